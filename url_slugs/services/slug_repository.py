"""
Create/save wrapper that gives new rows a unique slug
"""
from typing import Any, Dict, Optional
import logging

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from url_slugs.config import settings
from url_slugs.exceptions import SlugCollisionError, SlugQueryError
from url_slugs.schemas.slug_options import SlugOptions
from url_slugs.services.slug_allocator import allocate
from url_slugs.services.slug_store import SlugStore, SQLAlchemySlugStore
from url_slugs.utils.slug import normalize

logger = logging.getLogger(__name__)


class SlugRepository:
    """
    Persists rows of one mapped class, allocating slugs on creation.

    The slug is written once, while the row is new and has no slug of its
    own. Saving an existing row never touches it, so a row loaded without
    its slug column keeps the persisted value.
    """

    def __init__(
        self,
        db: Session,
        model,
        options: SlugOptions,
        store: Optional[SlugStore] = None,
        retries: Optional[int] = None,
    ):
        self.db = db
        self.model = model
        self.options = options
        self.lookup = SQLAlchemySlugStore(db, model, options)
        self.store = store or self.lookup
        self.retries = settings.SLUG_CREATE_RETRIES if retries is None else retries

    def scope_for(self, obj) -> Dict[str, Any]:
        return {field: getattr(obj, field, None) for field in self.options.scope_fields}

    def needs_slug(self, obj) -> bool:
        """True for a new row that carries no slug value in memory"""
        state = inspect(obj)
        if not (state.transient or state.pending):
            return False
        return state.dict.get(self.options.slug_field) is None

    def assign_slug(self, obj) -> bool:
        """Allocate and set the slug if the row needs one; return whether it did"""
        if not self.needs_slug(obj):
            return False

        options = self.options
        candidate, is_empty = normalize(
            getattr(obj, options.source_field, None),
            separator=options.separator,
            generator=options.generator,
        )
        slug = allocate(
            candidate,
            is_empty,
            self.scope_for(obj),
            options.exclude,
            options.max_length,
            options.sparse,
            self.store,
            separator=options.separator,
        )
        setattr(obj, options.slug_field, slug)
        return True

    def create(self, obj, retries: Optional[int] = None):
        """Insert a new row with its slug; raise SlugCollisionError if another row won the slug"""
        attempts_left = self.retries if retries is None else retries

        while True:
            try:
                allocated = self.assign_slug(obj)
            except SlugQueryError:
                self.db.rollback()
                raise

            slug = inspect(obj).dict.get(self.options.slug_field)
            self.db.add(obj)
            try:
                self.db.commit()
            except IntegrityError as e:
                self.db.rollback()
                if not (allocated and slug is not None and self.lookup.slug_exists(self.scope_for(obj), slug)):
                    raise

                if attempts_left <= 0:
                    logger.warning(f"Slug '{slug}' on {self.model.__name__} was taken before insert")
                    raise SlugCollisionError(slug, self.model.__name__) from e

                attempts_left -= 1
                logger.warning(
                    f"Slug '{slug}' on {self.model.__name__} was taken before insert, allocating again"
                )
                setattr(obj, self.options.slug_field, None)
                continue

            self.db.refresh(obj)
            return obj

    def save(self, obj):
        """Commit changes to a row; new rows go through create()"""
        if self.needs_slug(obj):
            return self.create(obj)

        self.db.add(obj)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return obj

    def find_by_slug(self, slug: str, scope: Optional[Dict[str, Any]] = None):
        return self.lookup.find_by_slug(slug, scope)
