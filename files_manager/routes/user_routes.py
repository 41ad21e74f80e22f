from flask import Blueprint, request

from files_manager.common.response import success
from files_manager.services import get_services

user_bp = Blueprint('users', __name__)


@user_bp.route('', methods=['POST'])
def register():
    data = request.get_json(silent=True) or {}
    user = get_services().users.register(data.get('email'), data.get('password'))
    return success(user, 201)


@user_bp.route('/me', methods=['GET'])
def me():
    return success(get_services().auth.whoami(request.headers.get('X-Token')))
