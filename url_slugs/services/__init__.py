from url_slugs.services.slug_allocator import allocate
from url_slugs.services.slug_repository import SlugRepository
from url_slugs.services.slug_store import SlugStore, SQLAlchemySlugStore

__all__ = [
    "allocate",
    "SlugRepository",
    "SlugStore",
    "SQLAlchemySlugStore"
]
