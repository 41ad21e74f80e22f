# services/storage/base_storage.py
from abc import ABC, abstractmethod


class BaseStorage(ABC):
    @abstractmethod
    def ensure_directory(self, path):
        """Create ``path`` (recursively) if it doesn't exist yet."""
        pass

    @abstractmethod
    def join(self, directory, name):
        pass

    @abstractmethod
    def write_file(self, path, data):
        pass

    @abstractmethod
    def read_file(self, path):
        pass

    @abstractmethod
    def exists(self, path):
        pass

    @abstractmethod
    def is_alive(self):
        pass
