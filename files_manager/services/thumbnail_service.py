import logging

from files_manager.common.errors import FileNotFound, JobFailure
from files_manager.common.ids import is_valid_id, to_id
from files_manager.utils.image import make_thumbnail, rendition_path

logger = logging.getLogger(__name__)


class ThumbnailService:
    """Background handler producing fixed-width renditions of an image.

    Renditions are written beside the original as ``<path>_<width>``. A job
    that fails halfway leaves the renditions already written; a retry
    rewrites them with identical bytes.
    """

    def __init__(self, document_store, storage, widths=(500, 250, 100)):
        self.documents = document_store
        self.storage = storage
        self.widths = tuple(widths)

    def generate(self, payload):
        file_id = payload.get('fileId')
        user_id = payload.get('userId')
        if not file_id:
            raise JobFailure('Missing fileId')
        if not user_id:
            raise JobFailure('Missing userId')

        doc = None
        if is_valid_id(file_id) and is_valid_id(user_id):
            doc = self.documents.find_one('files', {'id': to_id(file_id), 'user_id': to_id(user_id)})
        # 数据库和存储中都必须存在
        if doc is None or not self.storage.exists(doc.get('local_path')):
            raise FileNotFound()

        source = self.storage.read_file(doc['local_path'])
        for width in self.widths:
            thumbnail = make_thumbnail(source, width)
            self.storage.write_file(rendition_path(doc['local_path'], width), thumbnail)
            logger.debug('Wrote %dpx thumbnail for file %s', width, doc['id'])
        return f"Thumbnails for {doc['name']} created successfully."
