import io

from flask import Blueprint, request, send_file

from files_manager.common.ids import ROOT_ID
from files_manager.common.response import success
from files_manager.services import get_services

file_bp = Blueprint('files', __name__)


def _token():
    return request.headers.get('X-Token')


@file_bp.route('', methods=['POST'])
def upload():
    data = request.get_json(silent=True) or {}
    node = get_services().files.create_node(
        _token(),
        name=data.get('name'),
        type=data.get('type'),
        parent_id=data.get('parentId', ROOT_ID),
        is_public=data.get('isPublic', False),
        data=data.get('data'),
    )
    return success(node, 201)


@file_bp.route('/<file_id>', methods=['GET'])
def show(file_id):
    return success(get_services().files.get(_token(), file_id))


@file_bp.route('', methods=['GET'])
def index():
    nodes = get_services().files.list_nodes(
        _token(),
        parent_id=request.args.get('parentId', '0'),
        page=request.args.get('page', '0'),
    )
    return success(nodes)


@file_bp.route('/<file_id>/publish', methods=['PUT'])
def publish(file_id):
    return success(get_services().files.publish(_token(), file_id))


@file_bp.route('/<file_id>/unpublish', methods=['PUT'])
def unpublish(file_id):
    return success(get_services().files.unpublish(_token(), file_id))


@file_bp.route('/<file_id>/data', methods=['GET'])
def data(file_id):
    # token 可选：公开文件允许匿名读取
    content = get_services().files.read_content(_token(), file_id, request.args.get('size'))
    return send_file(io.BytesIO(content.data), mimetype=content.mimetype, download_name=content.name)


@file_bp.route('/<file_id>/thumbnails', methods=['GET'])
def thumbnails(file_id):
    return success(get_services().files.rendition_status(_token(), file_id))
