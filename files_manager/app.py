import logging

from flask import Flask

from files_manager.common.db import db
from files_manager.common.errors import AppError
from files_manager.common.response import fail
from files_manager.routes import app_bp, auth_bp, file_bp, user_bp
from files_manager.services import EXTENSION_KEY, build_services, get_services
from files_manager.services.queue import build_job_queue
from files_manager.services.storage import build_storage
from files_manager.services.store import SqlDocumentStore, build_token_store

logger = logging.getLogger(__name__)


def configure_logging(app):
    level = app.config.get('LOG_LEVEL', 'INFO')
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    logging.getLogger('files_manager').setLevel(level)


def create_app(config_overrides=None, token_store=None, job_queue=None, storage=None):
    """Application factory.

    ``token_store``, ``job_queue`` and ``storage`` replace the backends
    selected by the configuration when given.
    """
    app = Flask(__name__)
    app.config.from_object('files_manager.config.Config')
    if config_overrides:
        app.config.update(config_overrides)
    configure_logging(app)

    db.init_app(app)

    app.extensions[EXTENSION_KEY] = build_services(
        app.config,
        documents=SqlDocumentStore(db),
        tokens=token_store or build_token_store(app.config),
        storage=storage or build_storage(app.config),
        jobs=job_queue or build_job_queue(app.config),
    )

    @app.errorhandler(AppError)
    def handle_app_error(error):
        return fail(error.message, error.status_code)

    app.register_blueprint(app_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(user_bp, url_prefix='/users')
    app.register_blueprint(file_bp, url_prefix='/files')

    with app.app_context():
        db.create_all()

    return app


def check_dependencies(app):
    """Abort startup when a backing store is unreachable."""
    with app.app_context():
        services = get_services()
        checks = {
            'db': services.documents.is_alive(),
            'redis': services.tokens.is_alive(),
            'storage': services.storage.is_alive(),
        }
    down = [name for name, alive in checks.items() if not alive]
    if down:
        logger.error('Dependencies not reachable: %s', ', '.join(down))
        raise RuntimeError(f"Dependencies not reachable: {', '.join(down)}")
    logger.info('All dependencies reachable')


if __name__ == "__main__":
    app = create_app()
    check_dependencies(app)
    app.run(host='0.0.0.0', port=5000)
