# services/file_service.py
import logging
import mimetypes
import re
from dataclasses import dataclass

from files_manager.common.errors import (
    FolderHasNoContent,
    InvalidData,
    MissingData,
    MissingName,
    MissingType,
    NotAnImage,
    NotFound,
    ParentNotAFolder,
    ParentNotFound,
)
from files_manager.common.ids import MAX_ID, ROOT_ID, is_root, is_valid_id, to_id
from files_manager.models import FILE_TYPES
from files_manager.utils.format import format_file_document
from files_manager.utils.image import rendition_path

logger = logging.getLogger(__name__)

_PAGE_RE = re.compile(r'^\d+$')


@dataclass
class FileContent:
    name: str
    data: bytes
    mimetype: str


class FileService:
    """File/folder/image metadata, hierarchy rules, visibility and content reads.

    Nodes are always looked up scoped to their owner, except by
    ``read_content`` and ``rendition_status`` where public nodes are readable
    by anyone. A node the caller may not see is reported as ``NotFound``,
    exactly like a missing one.
    """

    def __init__(self, document_store, auth_service, upload_service, storage,
                 page_size=20, thumbnail_widths=(500, 250, 100)):
        self.documents = document_store
        self.auth = auth_service
        self.uploads = upload_service
        self.storage = storage
        self.page_size = page_size
        self.thumbnail_widths = tuple(thumbnail_widths)

    def create_node(self, token, name=None, type=None, parent_id=ROOT_ID, is_public=False, data=None):
        user_id = self.auth.resolve(token)
        if not name or not isinstance(name, str):
            raise MissingName()
        if type not in FILE_TYPES:
            raise MissingType()
        if type != 'folder':
            if not data:
                raise MissingData()
            if not isinstance(data, str):
                raise InvalidData()
        parent_id = self._check_parent(user_id, parent_id)

        doc = {
            'user_id': user_id,
            'name': name,
            'type': type,
            # 只接受 JSON true
            'is_public': is_public is True,
            'parent_id': parent_id,
        }
        # 文件夹只存元数据
        if type != 'folder':
            doc['local_path'] = self.uploads.store(data)
        doc['id'] = self.documents.insert_one('files', doc)
        logger.info('Created %s %s for user %s', type, doc['id'], user_id)

        if type == 'image':
            self.uploads.enqueue_thumbnail(doc['id'], user_id)
        return format_file_document(doc)

    def _check_parent(self, user_id, parent_id):
        if is_root(parent_id):
            return ROOT_ID
        pid = to_id(parent_id)
        parent = self.documents.find_one('files', {'id': pid}) if is_valid_id(pid) else None
        # 其他用户的目录视为不存在
        if parent is None or parent['user_id'] != user_id:
            raise ParentNotFound()
        if parent['type'] != 'folder':
            raise ParentNotAFolder()
        return pid

    def _find_owned(self, file_id, user_id):
        fid = to_id(file_id)
        doc = self.documents.find_one('files', {'id': fid, 'user_id': user_id}) if is_valid_id(fid) else None
        if doc is None:
            raise NotFound()
        return doc

    def _find_readable(self, token, file_id):
        fid = to_id(file_id)
        doc = self.documents.find_one('files', {'id': fid}) if is_valid_id(fid) else None
        if doc is None:
            raise NotFound()
        if not doc['is_public']:
            user_id = self.auth.resolve_optional(token)
            if user_id is None or user_id != doc['user_id']:
                raise NotFound()
        return doc

    def get(self, token, file_id):
        user_id = self.auth.resolve(token)
        return format_file_document(self._find_owned(file_id, user_id))

    def list_nodes(self, token, parent_id=ROOT_ID, page=0):
        user_id = self.auth.resolve(token)
        if is_root(parent_id):
            pid = ROOT_ID
        else:
            pid = to_id(parent_id)
            if pid is None:
                return []
        skip = self._page_number(page) * self.page_size
        if skip > MAX_ID:
            return []
        docs = self.documents.paginated_query(
            'files', {'parent_id': pid, 'user_id': user_id}, skip, self.page_size,
        )
        return [format_file_document(doc) for doc in docs]

    @staticmethod
    def _page_number(page):
        if isinstance(page, int) and not isinstance(page, bool):
            return max(page, 0)
        if isinstance(page, str) and _PAGE_RE.match(page):
            # 超长页码一定越界
            if len(page) > len(str(MAX_ID)):
                return MAX_ID
            return int(page)
        return 0

    def set_visibility(self, token, file_id, public):
        user_id = self.auth.resolve(token)
        fid = to_id(file_id)
        matched = 0
        if is_valid_id(fid):
            matched = self.documents.update_one(
                'files', {'id': fid, 'user_id': user_id}, {'is_public': bool(public)},
            )
        if not matched:
            raise NotFound()
        return format_file_document(self.documents.find_one('files', {'id': fid}))

    def publish(self, token, file_id):
        return self.set_visibility(token, file_id, True)

    def unpublish(self, token, file_id):
        return self.set_visibility(token, file_id, False)

    def read_content(self, token, file_id, size=None):
        doc = self._find_readable(token, file_id)
        if doc['type'] == 'folder':
            raise FolderHasNoContent()
        path = doc['local_path']
        if doc['type'] == 'image' and size is not None and str(size) in self._sizes():
            path = rendition_path(path, size)
        # 缩略图可能尚未生成
        if not self.storage.exists(path):
            raise NotFound()
        mimetype = mimetypes.guess_type(doc['name'])[0] or 'application/octet-stream'
        return FileContent(name=doc['name'], data=self.storage.read_file(path), mimetype=mimetype)

    def rendition_status(self, token, file_id):
        """Which thumbnail widths of an image are ready, e.g. ``{"100": True, ...}``."""
        doc = self._find_readable(token, file_id)
        if doc['type'] == 'folder':
            raise FolderHasNoContent()
        if doc['type'] != 'image':
            raise NotAnImage()
        return {
            str(width): self.storage.exists(rendition_path(doc['local_path'], width))
            for width in sorted(self.thumbnail_widths)
        }

    def _sizes(self):
        return {str(width) for width in self.thumbnail_widths}
