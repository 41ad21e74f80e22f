import logging

from werkzeug.security import generate_password_hash

from files_manager.common.errors import Conflict, JobFailure, MissingEmail, MissingPassword
from files_manager.common.ids import to_id
from files_manager.services.queue import WELCOME_EMAIL_JOB

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, document_store, job_queue):
        self.documents = document_store
        self.jobs = job_queue

    def register(self, email, password):
        if not email:
            raise MissingEmail()
        if not password:
            raise MissingPassword()
        if self.documents.find_one('users', {'email': email}):
            raise Conflict()
        hashed = generate_password_hash(str(password))
        user_id = self.documents.insert_one('users', {'email': email, 'password': hashed})
        logger.info('Registered user %s', user_id)
        try:
            self.jobs.enqueue(WELCOME_EMAIL_JOB, {'userId': user_id})
        except Exception:
            logger.exception('Failed to queue welcome email for user %s', user_id)
        return {'id': user_id, 'email': email}

    def send_welcome(self, payload):
        """欢迎邮件任务（目前只记录日志）"""
        user_id = to_id(payload.get('userId'))
        if not user_id:
            raise JobFailure('Missing userId')
        user = self.documents.find_one('users', {'id': user_id})
        if not user:
            raise JobFailure('User not found')
        message = f"Welcome {user['email']}"
        logger.info(message)
        return message

    def stats(self):
        return {
            'users': self.documents.count('users'),
            'files': self.documents.count('files'),
        }
