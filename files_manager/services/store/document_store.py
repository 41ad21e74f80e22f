# services/store/document_store.py
import logging
from abc import ABC, abstractmethod

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from files_manager.common.errors import Conflict, StorageFailure
from files_manager.models import File, User

logger = logging.getLogger(__name__)


class BaseDocumentStore(ABC):
    """Collections of plain-dict documents keyed by a store-assigned id."""

    @abstractmethod
    def find_one(self, collection, filter):
        pass

    @abstractmethod
    def insert_one(self, collection, doc):
        """Insert ``doc`` and return its new id."""
        pass

    @abstractmethod
    def update_one(self, collection, filter, patch):
        """Apply ``patch`` to the matching document; return the matched count."""
        pass

    @abstractmethod
    def count(self, collection):
        pass

    @abstractmethod
    def paginated_query(self, collection, filter, skip, limit):
        """Matching documents ordered by id ascending, ``limit`` from ``skip``."""
        pass

    @abstractmethod
    def is_alive(self):
        pass


class SqlDocumentStore(BaseDocumentStore):
    """Document store over the Flask-SQLAlchemy models.

    Filters and patches use column names (``user_id``, ``is_public`` ...).
    Must be used inside an application context.
    """

    COLLECTIONS = {'users': User, 'files': File}

    def __init__(self, db, collections=None):
        self.db = db
        self.collections = collections or self.COLLECTIONS

    def _model(self, collection):
        try:
            return self.collections[collection]
        except KeyError:
            raise ValueError(f'Unknown collection: {collection}')

    def find_one(self, collection, filter):
        model = self._model(collection)
        try:
            row = model.query.filter_by(**filter).first()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StorageFailure() from e
        return row.to_document() if row else None

    def insert_one(self, collection, doc):
        model = self._model(collection)
        row = model(**doc)
        try:
            self.db.session.add(row)
            self.db.session.commit()
        except IntegrityError as e:
            # 唯一约束冲突（例如并发注册同一邮箱）
            self.db.session.rollback()
            raise Conflict() from e
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StorageFailure() from e
        return row.id

    def update_one(self, collection, filter, patch):
        model = self._model(collection)
        try:
            # 单条 UPDATE 语句，可见性切换由数据库保证原子性
            matched = model.query.filter_by(**filter).update(patch, synchronize_session=False)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StorageFailure() from e
        return matched

    def count(self, collection):
        model = self._model(collection)
        try:
            return model.query.count()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StorageFailure() from e

    def paginated_query(self, collection, filter, skip, limit):
        model = self._model(collection)
        try:
            rows = (
                model.query.filter_by(**filter)
                .order_by(model.id.asc())
                .offset(skip)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StorageFailure() from e
        return [row.to_document() for row in rows]

    def is_alive(self):
        try:
            self.db.session.execute(text('SELECT 1'))
            return True
        except SQLAlchemyError as e:
            logger.error('Document store not reachable: %s', e)
            self.db.session.rollback()
            return False
