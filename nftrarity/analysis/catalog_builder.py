"""
Trait catalog construction.

Scans every item once and counts, per category, how many items carry
each value. Counting is either a single sequential pass or, for large
collections, contiguous partitions counted privately and merged at the
end. No counter is shared between threads.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from nftrarity.models.catalog import TraitCatalog
from nftrarity.models.errors import EmptyCollectionError
from nftrarity.models.item import Item, check_unique_ids

logger = logging.getLogger(__name__)


@dataclass
class _PartialCatalog:
    """Private, mutable counts for one partition of the collection."""

    items: int = 0
    value_counts: dict[str, Counter[str]] = field(default_factory=dict)
    trait_count_counts: Counter[int] = field(default_factory=Counter)

    def add(self, item: Item) -> None:
        traits = item.traits()
        self.items += 1
        for category, value in traits.items():
            self.value_counts.setdefault(category, Counter())[value] += 1
        self.trait_count_counts[len(traits)] += 1

    def merge(self, other: "_PartialCatalog") -> None:
        self.items += other.items
        for category, counts in other.value_counts.items():
            self.value_counts.setdefault(category, Counter()).update(counts)
        self.trait_count_counts.update(other.trait_count_counts)

    def freeze(self) -> TraitCatalog:
        return TraitCatalog(
            total_items=self.items,
            value_counts={category: dict(counts) for category, counts in self.value_counts.items()},
            trait_count_counts=dict(self.trait_count_counts),
        )


def _count_partition(items: Sequence[Item]) -> _PartialCatalog:
    partial = _PartialCatalog()
    for item in items:
        partial.add(item)
    return partial


def _split(items: Sequence[Item], partitions: int) -> list[Sequence[Item]]:
    """Split into at most `partitions` contiguous, non-empty chunks."""
    size = -(-len(items) // partitions)  # ceiling division
    return [items[start : start + size] for start in range(0, len(items), size)]


def build_catalog(items: Sequence[Item], partitions: int = 1) -> TraitCatalog:
    """
    Build the trait catalog for a collection.

    Args:
        items: Every item of the collection (N >= 1)
        partitions: Number of partitions to count concurrently (1 = sequential)

    Returns:
        Immutable TraitCatalog covering every observed (category, value)

    Raises:
        EmptyCollectionError: If no items are given
        DataError: If an item repeats a category or ids are not unique
    """
    items = list(items)
    if not items:
        raise EmptyCollectionError()

    check_unique_ids(item.external_id for item in items)

    if partitions <= 1 or len(items) == 1:
        merged = _count_partition(items)
    else:
        chunks = _split(items, partitions)
        logger.debug("Counting %d items in %d partitions", len(items), len(chunks))
        with ThreadPoolExecutor(max_workers=len(chunks)) as executor:
            # map re-raises the first failing partition in input order
            partials = list(executor.map(_count_partition, chunks))

        merged = _PartialCatalog()
        for partial in partials:
            merged.merge(partial)

    catalog = merged.freeze()
    logger.info(
        "Built trait catalog: %d items, %d categories",
        catalog.total_items,
        len(catalog.value_counts),
    )
    return catalog
