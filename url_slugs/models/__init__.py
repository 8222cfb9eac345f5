from url_slugs.models.columns import slug_column, slug_unique_constraint

__all__ = [
    "slug_column",
    "slug_unique_constraint"
]
