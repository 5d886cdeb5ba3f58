# app/storage/base.py
import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from app.schemas.blog import BlogPostResponse, CommentResponse
from app.schemas.category import CategoryResponse
from app.schemas.course import CourseResponse
from app.schemas.enrollment import EnrollmentResponse
from app.schemas.lesson import LessonResponse
from app.schemas.payment import PaymentResponse
from app.schemas.review import ReviewResponse
from app.schemas.user import UserInDB
from app.schemas.wishlist import WishlistResponse
from app.storage.entities import ENTITY_SPECS, EntitySpec

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Repository(ABC, Generic[RecordT]):
    """
    CRUD and filtered listing for one entity type.

    Records are the pydantic response models from ``app.schemas``. Identifiers
    and timestamps are always generated here, never taken from the caller.
    """

    def __init__(self, spec: EntitySpec):
        self.spec = spec
        self.model = spec.record

    # ---------- backend hooks ----------

    @abstractmethod
    def get(self, record_id: str) -> Optional[RecordT]:
        """Get a record by ID"""

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """Hard-delete a record. Returns False when nothing was deleted."""

    @abstractmethod
    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[RecordT]:
        """Records matching every equality filter and the search text, ordered, then paginated"""

    @abstractmethod
    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Number of records matching every equality filter"""

    @abstractmethod
    def _insert(self, record: RecordT) -> None:
        pass

    @abstractmethod
    def _replace(self, record: RecordT) -> None:
        pass

    # ---------- shared behaviour ----------

    def create(self, data: Dict[str, Any]) -> RecordT:
        now = utcnow()
        values = dict(data)
        values["id"] = str(uuid.uuid4())
        values[self.spec.created_field] = now
        if self.spec.has_updated_at:
            values["updated_at"] = now

        record = self.model(**values)
        self._insert(record)
        logger.debug(f"Created {self.spec.name} record {record.id}")
        return record

    def update(self, record_id: str, partial: Dict[str, Any]) -> Optional[RecordT]:
        current = self.get(record_id)
        if current is None:
            return None

        values = current.model_dump()
        for field, value in partial.items():
            if field in ("id", self.spec.created_field):
                continue
            values[field] = value
        if self.spec.has_updated_at:
            values["updated_at"] = utcnow()

        record = self.model(**values)
        self._replace(record)
        return record

    def find(self, **equals: Any) -> Optional[RecordT]:
        """First record whose fields equal all of ``equals``"""
        matches = self.list(filters=equals, limit=1)
        return matches[0] if matches else None

    def _active_filters(self, filters: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        active = {k: v for k, v in (filters or {}).items() if v is not None}
        unknown = set(active) - set(self.model.model_fields)
        if unknown:
            raise ValueError(
                f"Unknown filter field(s) for {self.spec.name}: {sorted(unknown)}"
            )
        return active


class Storage(ABC):
    """One repository per entity type."""

    users: Repository[UserInDB]
    categories: Repository[CategoryResponse]
    courses: Repository[CourseResponse]
    lessons: Repository[LessonResponse]
    enrollments: Repository[EnrollmentResponse]
    reviews: Repository[ReviewResponse]
    payments: Repository[PaymentResponse]
    blog_posts: Repository[BlogPostResponse]
    comments: Repository[CommentResponse]
    wishlist: Repository[WishlistResponse]

    def __init__(self):
        for spec in ENTITY_SPECS:
            setattr(self, spec.name, self._make_repository(spec))

    @abstractmethod
    def _make_repository(self, spec: EntitySpec) -> Repository:
        pass

    def close(self) -> None:
        """Release backend resources"""
