from flask import Blueprint

from files_manager.common.response import success
from files_manager.services import get_services

app_bp = Blueprint('app', __name__)


@app_bp.route('/status', methods=['GET'])
def status():
    services = get_services()
    body = {"redis": services.tokens.is_alive(), "db": services.documents.is_alive()}
    return success(body, 200 if all(body.values()) else 503)


@app_bp.route('/stats', methods=['GET'])
def stats():
    return success(get_services().users.stats())
