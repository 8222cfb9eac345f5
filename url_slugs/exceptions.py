"""
Slug allocation errors
"""
from typing import Optional


class SlugError(Exception):
    """Base class for every error raised by url_slugs"""


class SlugQueryError(SlugError):
    """The existing-slug lookup could not be completed"""


class SlugBudgetError(SlugError):
    """max_length leaves no room for a numbered slug"""

    def __init__(self, max_length: int, minimum: int):
        self.max_length = max_length
        self.minimum = minimum
        super().__init__(
            f"max_length={max_length} is too small, numbered slugs need at least {minimum} characters"
        )


class SlugCollisionError(SlugError):
    """
    Another row claimed the slug between the lookup and the insert.

    Creating again re-runs allocation and will see the competing row.
    """
    retryable = True

    def __init__(self, slug: Optional[str], model_name: str):
        self.slug = slug
        self.model_name = model_name
        super().__init__(f"Slug '{slug}' is already taken in {model_name}")
