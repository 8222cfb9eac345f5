"""
Per-scope slug configuration
"""
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from typing import Any, Callable, FrozenSet, Mapping, Optional, Tuple

from url_slugs.config import settings
from url_slugs.exceptions import SlugBudgetError
from url_slugs.utils.slug import generate_slug

# "-1" plus at least one character of the source text
MIN_MAX_LENGTH = 3


class SlugOptions(BaseModel):
    """Settings for one slugged model, fixed once the scope is set up"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    source_field: str = Field(..., min_length=1)
    slug_field: str = Field(default_factory=lambda: settings.SLUG_FIELD, min_length=1)
    max_length: Optional[int] = Field(default_factory=lambda: settings.SLUG_MAX_LENGTH)
    sparse: bool = Field(default_factory=lambda: settings.SLUG_SPARSE)
    separator: str = Field(default="-", min_length=1)  # exclude is slugged with it, keep it first
    exclude: FrozenSet[str] = frozenset()
    scope_fields: Tuple[str, ...] = ()
    unique: bool = True
    generator: Optional[Callable[[str, str], str]] = None

    @field_validator('separator')
    @classmethod
    def validate_separator(cls, v):
        if any(c.isalnum() for c in v):
            raise ValueError('Separator must not contain letters or digits')
        return v

    @field_validator('exclude', mode='before')
    @classmethod
    def validate_exclude(cls, v):
        if isinstance(v, str):
            return frozenset([v])
        return v

    @field_validator('exclude')
    @classmethod
    def slug_exclusions(cls, v, info: ValidationInfo):
        # Reserved words are compared against candidates, so they get the same treatment
        separator = info.data.get('separator', '-')
        return frozenset(slug for slug in (generate_slug(word, separator) for word in v) if slug)

    @model_validator(mode="after")
    def validate_max_length(self):
        # SlugBudgetError is not a ValueError, so pydantic lets it through unwrapped
        if self.max_length is not None and self.max_length < MIN_MAX_LENGTH:
            raise SlugBudgetError(self.max_length, MIN_MAX_LENGTH)
        return self

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False):
        copied = super().model_copy(update=update, deep=deep)
        if update:
            # model_copy skips validation; updated options must pass the same checks
            return type(self).model_validate(dict(copied))
        return copied
