from sqlalchemy import Index

from files_manager.models.base import BaseModel
from files_manager.common.db import db

FILE_TYPES = ('folder', 'file', 'image')


class File(BaseModel):
    """文件节点 - folder / file / image 的元数据"""
    __tablename__ = 'files'

    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    name = db.Column(db.String(256), nullable=False)
    type = db.Column(db.String(16), nullable=False)
    is_public = db.Column(db.Boolean, default=False, nullable=False)
    parent_id = db.Column(db.Integer, default=0, nullable=False)  # 0 = 根目录
    local_path = db.Column(db.String(512), nullable=True)  # 仅 file / image

    __table_args__ = (
        Index('idx_files_owner_parent', 'user_id', 'parent_id'),
    )

    def __repr__(self):
        return f'<File {self.id} {self.type} {self.name!r}>'
