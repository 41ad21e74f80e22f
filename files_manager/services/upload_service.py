import base64
import binascii
import logging
import uuid

from files_manager.common.errors import InvalidData
from files_manager.services.queue import THUMBNAIL_JOB

logger = logging.getLogger(__name__)


class UploadService:
    """Writes uploaded content to storage and hands images to the thumbnail worker."""

    def __init__(self, storage, job_queue):
        self.storage = storage
        self.jobs = job_queue

    def store(self, raw_base64):
        """Decode ``raw_base64`` and write it under a fresh uuid4 name.

        Returns:
            The storage path of the written bytes.

        Raises:
            InvalidData: If the content is not base64.
            StorageFailure: If the storage backend fails; not retried.
        """
        try:
            content = base64.b64decode(raw_base64)
        except (binascii.Error, TypeError, ValueError) as e:
            raise InvalidData() from e

        self.storage.ensure_directory(self.storage.root)
        path = self.storage.join(self.storage.root, str(uuid.uuid4()))
        self.storage.write_file(path, content)
        logger.info('Stored %d bytes at %s', len(content), path)
        return path

    def enqueue_thumbnail(self, file_id, user_id):
        """Queue thumbnail generation; a failure here never undoes the upload."""
        try:
            return self.jobs.enqueue(THUMBNAIL_JOB, {'fileId': file_id, 'userId': user_id})
        except Exception:
            logger.exception('Failed to queue thumbnails for file %s', file_id)
            return None
