from files_manager.models.file import File, FILE_TYPES
from files_manager.models.user import User

__all__ = ['File', 'FILE_TYPES', 'User']
