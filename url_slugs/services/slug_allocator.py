"""
Unique slug allocation
"""
from typing import AbstractSet, Dict, Optional, Set
import logging

from url_slugs.exceptions import SlugBudgetError
from url_slugs.services.slug_store import Scope, SlugStore
from url_slugs.utils.slug import truncate

logger = logging.getLogger(__name__)


class _TakenSlugs:
    """Numbered slugs (stem + separator + anything) fetched once per stem"""

    def __init__(self, store: SlugStore, scope: Scope, separator: str):
        self.store = store
        self.scope = scope
        self.separator = separator
        self._by_stem: Dict[str, Set[str]] = {}

    def __call__(self, stem: str) -> Set[str]:
        if stem not in self._by_stem:
            self._by_stem[stem] = self.store.taken_slugs(self.scope, stem + self.separator)
        return self._by_stem[stem]


def allocate(
    candidate: str,
    is_empty_source: bool,
    scope: Scope,
    exclusions: AbstractSet[str],
    budget: Optional[int],
    sparse: bool,
    store: SlugStore,
    separator: str = "-",
) -> Optional[str]:
    """
    Pick the slug to store for a new row.

    Returns None for an empty source in a sparse scope. Otherwise returns
    the candidate clipped to budget when it is free and not reserved, or
    the first free numbered variant. A taken bare slug counts as number 1,
    so numbering continues at 2; a reserved but unused one starts at 1.
    Numbered variants re-clip the candidate so the suffix always fits.
    """
    if sparse and is_empty_source:
        return None

    base = truncate(candidate, budget)
    base_taken = store.slug_exists(scope, base)

    if not base_taken and base not in exclusions:
        logger.debug(f"Allocated slug '{base}'")
        return base

    taken = _TakenSlugs(store, scope, separator)
    number = 2 if base_taken else 1
    while True:
        suffix = f"{separator}{number}"
        if budget is not None and len(suffix) >= budget:
            raise SlugBudgetError(budget, len(suffix) + 1)

        # The stem shrinks whenever the suffix gains a digit
        stem = truncate(base, None if budget is None else budget - len(suffix))
        slug = stem + suffix
        if slug not in taken(stem):
            logger.debug(f"Allocated slug '{slug}' ('{base}' taken or reserved)")
            return slug
        number += 1
