"""
Lookup of slugs already persisted in a scope
"""
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Set
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from url_slugs.exceptions import SlugQueryError
from url_slugs.schemas.slug_options import SlugOptions

logger = logging.getLogger(__name__)

Scope = Mapping[str, Any]


class SlugStore(ABC):
    """What the allocator needs to know about existing slugs"""

    @abstractmethod
    def slug_exists(self, scope: Scope, value: str) -> bool:
        """Whether a row in scope already holds value"""

    @abstractmethod
    def taken_slugs(self, scope: Scope, prefix: str) -> Set[str]:
        """Every slug in scope starting with prefix"""


class SQLAlchemySlugStore(SlugStore):
    """SlugStore backed by the slug column of a mapped class"""

    def __init__(self, db: Session, model, options: SlugOptions):
        self.db = db
        self.model = model
        self.options = options
        self.column = getattr(model, options.slug_field)

    def _filter_scope(self, query, scope: Optional[Scope]):
        for field, value in (scope or {}).items():
            query = query.filter(getattr(self.model, field) == value)
        return query

    def slug_exists(self, scope: Scope, value: str) -> bool:
        query = self._filter_scope(self.db.query(self.column), scope).filter(self.column == value)
        try:
            with self.db.no_autoflush:
                return query.first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Error checking slug '{value}' on {self.model.__name__}: {str(e)}")
            raise SlugQueryError(f"Could not check slug '{value}'") from e

    def taken_slugs(self, scope: Scope, prefix: str) -> Set[str]:
        query = self._filter_scope(self.db.query(self.column), scope).filter(
            self.column.startswith(prefix, autoescape=True)
        )
        try:
            with self.db.no_autoflush:
                return {row[0] for row in query.all()}
        except SQLAlchemyError as e:
            logger.error(f"Error listing slugs like '{prefix}' on {self.model.__name__}: {str(e)}")
            raise SlugQueryError(f"Could not list slugs starting with '{prefix}'") from e

    def find_by_slug(self, slug: str, scope: Optional[Scope] = None):
        """Return the row holding slug, or None"""
        query = self._filter_scope(self.db.query(self.model), scope).filter(self.column == slug)
        try:
            return query.first()
        except SQLAlchemyError as e:
            logger.error(f"Error loading {self.model.__name__} by slug '{slug}': {str(e)}")
            raise SlugQueryError(f"Could not load slug '{slug}'") from e
