from datetime import datetime, timezone

from files_manager.common.db import db


def _utcnow():
    return datetime.now(timezone.utc)


class BaseModel(db.Model):
    __abstract__ = True

    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)

    def to_document(self):
        """Plain dict of the row's columns."""
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}
