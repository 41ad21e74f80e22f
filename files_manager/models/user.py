from files_manager.models.base import BaseModel
from files_manager.common.db import db


class User(BaseModel):
    __tablename__ = 'users'

    email = db.Column(db.String(256), unique=True, nullable=False, index=True)
    password = db.Column(db.String(256), nullable=False)  # werkzeug 单向哈希

    def __repr__(self):
        return f'<User {self.id} {self.email}>'
