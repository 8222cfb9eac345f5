"""
Unique, human-readable URL slugs for SQLAlchemy models.

A slug is derived from one source column when a row is created, clipped to
an optional maximum length, and numbered (cool-stuff, cool-stuff-2, ...)
when the plain form is already used or reserved.
"""
from url_slugs.exceptions import SlugBudgetError, SlugCollisionError, SlugError, SlugQueryError
from url_slugs.models.columns import slug_column, slug_unique_constraint
from url_slugs.schemas.slug_options import SlugOptions
from url_slugs.services.slug_allocator import allocate
from url_slugs.services.slug_repository import SlugRepository
from url_slugs.services.slug_store import SlugStore, SQLAlchemySlugStore
from url_slugs.utils.slug import normalize

__all__ = [
    "SlugBudgetError",
    "SlugCollisionError",
    "SlugError",
    "SlugQueryError",
    "slug_column",
    "slug_unique_constraint",
    "SlugOptions",
    "allocate",
    "SlugRepository",
    "SlugStore",
    "SQLAlchemySlugStore",
    "normalize"
]
