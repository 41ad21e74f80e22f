# services/storage/local_storage.py
import logging
import os

from files_manager.common.errors import StorageFailure
from files_manager.services.storage.base_storage import BaseStorage

logger = logging.getLogger(__name__)


class LocalStorage(BaseStorage):
    """Bytes stored as plain files under ``root``; paths are absolute."""

    def __init__(self, root):
        self.root = os.path.abspath(root)

    def ensure_directory(self, path=None):
        path = path or self.root
        # FOLDER_PATH 不存在或不是目录时创建
        if not os.path.isdir(path):
            try:
                os.makedirs(path, exist_ok=True)
            except OSError as e:
                logger.exception('Failed to create storage directory: %s', path)
                raise StorageFailure() from e

    def join(self, directory, name):
        return os.path.join(directory, name)

    def write_file(self, path, data):
        try:
            with open(path, 'wb') as f:
                f.write(data)
        except OSError as e:
            logger.exception('Failed to write file: %s', path)
            raise StorageFailure() from e

    def read_file(self, path):
        try:
            with open(path, 'rb') as f:
                return f.read()
        except OSError as e:
            logger.exception('Failed to read file: %s', path)
            raise StorageFailure() from e

    def exists(self, path):
        return bool(path) and os.path.isfile(path)

    def is_alive(self):
        try:
            self.ensure_directory()
        except StorageFailure:
            return False
        return os.access(self.root, os.W_OK)
