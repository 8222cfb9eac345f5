from sqlalchemy import Column, String, Text, UniqueConstraint
from typing import Optional

from url_slugs.schemas.slug_options import SlugOptions


def slug_column(
    options: Optional[SlugOptions] = None,
    *,
    max_length: Optional[int] = None,
    sparse: bool = False,
    unique: bool = True,
    **kwargs
) -> Column:
    """
    Slug column sized for the longest slug the scope can produce.

    Pass options to take max_length, sparse and unique from them; scoped
    options (scope_fields) drop the column-level unique index in favour of
    slug_unique_constraint(). Without a max_length the column is unbounded
    Text. Sparse scopes get a nullable column; unique indexes in SQLite and
    PostgreSQL allow many NULLs.
    """
    if options is not None:
        max_length = options.max_length
        sparse = options.sparse
        unique = options.unique and not options.scope_fields

    return Column(
        String(max_length) if max_length is not None else Text(),
        unique=unique,
        nullable=sparse,
        index=True,
        **kwargs
    )


def slug_unique_constraint(options: SlugOptions, name: Optional[str] = None) -> UniqueConstraint:
    """Composite constraint over scope_fields plus the slug column"""
    return UniqueConstraint(*options.scope_fields, options.slug_field, name=name)
