# services/auth_service.py
import logging
import uuid

from werkzeug.security import check_password_hash

from files_manager.common.errors import Unauthorized
from files_manager.common.ids import to_id
from files_manager.utils.format import format_user_document

logger = logging.getLogger(__name__)

TOKEN_KEY_PREFIX = 'auth_'


class AuthService:
    """Session tokens: opaque uuid4 strings mapped to a user id in the token store.

    Expiry is absolute (``token_ttl`` seconds from login) and enforced by the
    token store; nothing here ever refreshes it.
    """

    def __init__(self, document_store, token_store, token_ttl=60 * 60 * 24):
        self.documents = document_store
        self.tokens = token_store
        self.token_ttl = token_ttl

    @staticmethod
    def _key(token):
        return f"{TOKEN_KEY_PREFIX}{token}"

    def login(self, email, password):
        user = self.documents.find_one('users', {'email': email}) if email else None
        # 用户不存在与密码错误返回同样的错误
        if not user or not check_password_hash(user['password'], password or ''):
            raise Unauthorized()
        token = str(uuid.uuid4())
        self.tokens.set_with_expiry(self._key(token), str(user['id']), self.token_ttl)
        logger.info('User %s logged in', user['id'])
        return token

    def logout(self, token):
        user_id = self.resolve(token)
        self.tokens.delete(self._key(token))
        logger.info('User %s logged out', user_id)

    def resolve_optional(self, token):
        """User id for ``token``, or None when it is missing or expired."""
        if not token:
            return None
        return to_id(self.tokens.get(self._key(token)))

    def resolve(self, token):
        user_id = self.resolve_optional(token)
        if user_id is None:
            raise Unauthorized()
        return user_id

    def whoami(self, token):
        user_id = self.resolve(token)
        user = self.documents.find_one('users', {'id': user_id})
        if not user:
            raise Unauthorized()
        return format_user_document(user)
