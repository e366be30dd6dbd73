"""
Trait catalog: per-category occurrence counts for a whole collection.

INVARIANTS:
- total_items >= 1
- Every counted value has count >= 1
- Per category, the sum of value counts is <= total_items
- Read-only once built
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class CategoryStats:
    """Summary of one trait category across the collection."""

    category: str
    distinct_values: int
    items_with_category: int
    items_missing: int
    rarest_value: str
    rarest_count: int
    most_common_value: str
    most_common_count: int


@dataclass(frozen=True)
class TraitCatalog:
    """
    Occurrence counts of every (category, value) pair in a collection.

    Attributes:
        total_items: Number of items in the collection (N)
        value_counts: {category: {value: count}}
        trait_count_counts: {number of traits on an item: items with that many}
    """

    total_items: int
    value_counts: Mapping[str, Mapping[str, int]] = field(default_factory=dict)
    trait_count_counts: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.total_items < 1:
            raise ValueError("Catalog requires at least one item")

        frozen: dict[str, Mapping[str, int]] = {}
        for category, counts in self.value_counts.items():
            if any(count < 1 for count in counts.values()):
                raise ValueError(f"Category {category!r} has a value with zero occurrences")
            if sum(counts.values()) > self.total_items:
                raise ValueError(f"Category {category!r} counts exceed total items")
            frozen[category] = MappingProxyType(dict(counts))

        object.__setattr__(self, "value_counts", MappingProxyType(frozen))
        object.__setattr__(
            self, "trait_count_counts", MappingProxyType(dict(self.trait_count_counts))
        )

    @property
    def categories(self) -> tuple[str, ...]:
        """Observed categories in lexicographic order."""
        return tuple(sorted(self.value_counts))

    def has_category(self, category: str) -> bool:
        return category in self.value_counts

    def value_count(self, category: str, value: str) -> int:
        """Items carrying `value` for `category` (0 if never seen)."""
        return self.value_counts.get(category, {}).get(value, 0)

    def category_total(self, category: str) -> int:
        """Items carrying any value for `category`."""
        return sum(self.value_counts.get(category, {}).values())

    def missing_count(self, category: str) -> int:
        """Items lacking `category` entirely."""
        return self.total_items - self.category_total(category)

    def trait_count_frequency(self, trait_count: int) -> int:
        """Items carrying exactly `trait_count` categories."""
        return self.trait_count_counts.get(trait_count, 0)

    def category_stats(self, category: str) -> CategoryStats:
        """
        Aggregate statistics for one category.

        Rarest and most common ties are broken by value ascending.

        Raises:
            KeyError: If the category was never observed
        """
        counts = self.value_counts[category]
        rarest_value, rarest_count = min(counts.items(), key=lambda kv: (kv[1], kv[0]))
        common_value, common_count = min(counts.items(), key=lambda kv: (-kv[1], kv[0]))
        with_category = sum(counts.values())

        return CategoryStats(
            category=category,
            distinct_values=len(counts),
            items_with_category=with_category,
            items_missing=self.total_items - with_category,
            rarest_value=rarest_value,
            rarest_count=rarest_count,
            most_common_value=common_value,
            most_common_count=common_count,
        )
