# app/storage/sql.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Query, Session, sessionmaker

from app.core.database import build_engine, build_session_factory, create_tables
from app.core.decorator import db_exception
from app.models import (
    BlogPost,
    Category,
    Comment,
    Course,
    Enrollment,
    Lesson,
    Payment,
    Review,
    User,
    Wishlist,
)
from app.storage.base import RecordT, Repository, Storage
from app.storage.entities import EntitySpec

logger = logging.getLogger(__name__)

ORM_MODELS = {
    "users": User,
    "categories": Category,
    "courses": Course,
    "lessons": Lesson,
    "enrollments": Enrollment,
    "reviews": Review,
    "payments": Payment,
    "blog_posts": BlogPost,
    "comments": Comment,
    "wishlist": Wishlist,
}


def _like_pattern(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqlRepository(Repository[RecordT]):
    """Repository over one table; one short-lived session per call."""

    def __init__(self, spec: EntitySpec, orm_model, session_factory: sessionmaker):
        super().__init__(spec)
        self.orm_model = orm_model
        self.session_factory = session_factory

    @db_exception
    def get(self, record_id: str) -> Optional[RecordT]:
        with self.session_factory() as session:
            row = session.get(self.orm_model, record_id)
            return self.model.model_validate(row) if row is not None else None

    @db_exception
    def delete(self, record_id: str) -> bool:
        with self.session_factory() as session:
            row = session.get(self.orm_model, record_id)
            if row is None:
                return False
            session.delete(row)
            session.commit()
            return True

    @db_exception
    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[RecordT]:
        with self.session_factory() as session:
            query = self._query(session, filters, search).order_by(*self._ordering())
            if offset:
                query = query.offset(offset)
            if limit is not None:
                query = query.limit(limit)
            return [self.model.model_validate(row) for row in query.all()]

    @db_exception
    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        with self.session_factory() as session:
            return self._query(session, filters, None).count()

    @db_exception
    def _insert(self, record: RecordT) -> None:
        with self.session_factory() as session:
            session.add(self.orm_model(**record.model_dump()))
            session.commit()

    @db_exception
    def _replace(self, record: RecordT) -> None:
        with self.session_factory() as session:
            session.merge(self.orm_model(**record.model_dump()))
            session.commit()

    def _query(
        self, session: Session, filters: Optional[Dict[str, Any]], search: Optional[str]
    ) -> Query:
        query = session.query(self.orm_model)

        for field, value in self._active_filters(filters).items():
            query = query.filter(getattr(self.orm_model, field) == value)

        if search and self.spec.search_fields:
            pattern = _like_pattern(search)
            query = query.filter(
                or_(
                    *[
                        getattr(self.orm_model, field).ilike(pattern, escape="\\")
                        for field in self.spec.search_fields
                    ]
                )
            )
        return query

    def _ordering(self):
        created = getattr(self.orm_model, self.spec.created_field)
        if self.spec.order_by is None:
            return [created.asc()]

        column = getattr(self.orm_model, self.spec.order_by)
        if self.spec.descending:
            return [column.desc(), self.orm_model.id.desc()]
        return [column.asc(), created.asc()]


class SqlStorage(Storage):
    """Relational store backed by SQLAlchemy."""

    def __init__(self, url: str = None, engine: Engine = None, create: bool = False):
        self.engine = engine if engine is not None else build_engine(url)
        self.session_factory = build_session_factory(self.engine)
        if create:
            create_tables(self.engine)
        super().__init__()

    def _make_repository(self, spec: EntitySpec) -> Repository:
        return SqlRepository(spec, ORM_MODELS[spec.name], self.session_factory)

    def close(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed")
