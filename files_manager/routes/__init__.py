from files_manager.routes.app_routes import app_bp
from files_manager.routes.auth_routes import auth_bp
from files_manager.routes.file_routes import file_bp
from files_manager.routes.user_routes import user_bp

__all__ = ['app_bp', 'auth_bp', 'file_bp', 'user_bp']
