"""Background worker: ``python -m files_manager.worker [thumbnail_generation|welcome_email]``."""
import argparse
import logging

from files_manager.app import check_dependencies, create_app
from files_manager.services import get_services
from files_manager.services.queue import THUMBNAIL_JOB, WELCOME_EMAIL_JOB

logger = logging.getLogger(__name__)

CONSUMERS_KEY = 'files_manager.consumers'


def _in_app_context(app, func):
    def handler(payload):
        with app.app_context():
            return func(payload)
    return handler


def register_consumers(app):
    """Map each job type to ``(handler, concurrency)`` and hook completion logging."""
    if CONSUMERS_KEY in app.extensions:
        return app.extensions[CONSUMERS_KEY]
    with app.app_context():
        services = get_services()
    jobs = services.jobs

    jobs.on_completed(THUMBNAIL_JOB, lambda job_id, result: logger.info(
        'Thumbnail generation job #%s completed: %s', job_id, result))
    jobs.on_completed(WELCOME_EMAIL_JOB, lambda job_id, result: logger.info(
        'Welcome email job #%s completed: %s', job_id, result))

    app.extensions[CONSUMERS_KEY] = {
        THUMBNAIL_JOB: (
            _in_app_context(app, services.thumbnails.generate),
            app.config['THUMBNAIL_CONCURRENCY'],
        ),
        WELCOME_EMAIL_JOB: (
            _in_app_context(app, services.users.send_welcome),
            app.config['EMAIL_CONCURRENCY'],
        ),
    }
    return app.extensions[CONSUMERS_KEY]


def run(app, job_type):
    consumers = register_consumers(app)
    handler, concurrency = consumers[job_type]
    with app.app_context():
        jobs = get_services().jobs
    return jobs.consume(job_type, concurrency, handler)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Run a files-manager job consumer.')
    parser.add_argument('job_type', nargs='?', default=THUMBNAIL_JOB,
                        choices=[THUMBNAIL_JOB, WELCOME_EMAIL_JOB])
    args = parser.parse_args(argv)

    app = create_app()
    check_dependencies(app)
    logger.info('Consuming %s jobs', args.job_type)
    run(app, args.job_type)


if __name__ == "__main__":
    main()
