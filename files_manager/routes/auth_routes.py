from flask import Blueprint, request

from files_manager.common.errors import Unauthorized
from files_manager.common.response import no_content, success
from files_manager.services import get_services

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/connect', methods=['GET'])
def connect():
    # Authorization: Basic base64(email:password)
    credentials = request.authorization
    if credentials is None or credentials.type != 'basic':
        raise Unauthorized()
    token = get_services().auth.login(credentials.username, credentials.password)
    return success({"token": token})


@auth_bp.route('/disconnect', methods=['GET'])
def disconnect():
    get_services().auth.logout(request.headers.get('X-Token'))
    return no_content()
