from dataclasses import dataclass

from nftrarity.models.catalog import CategoryStats, TraitCatalog


@dataclass(frozen=True)
class CollectionSummary:
    """Aggregate statistics shown alongside per-item results."""

    total_items: int
    categories: tuple[CategoryStats, ...]

    def distinct_values(self) -> dict[str, int]:
        """Distinct value count per category."""
        return {stats.category: stats.distinct_values for stats in self.categories}

    def for_category(self, category: str) -> CategoryStats | None:
        for stats in self.categories:
            if stats.category == category:
                return stats
        return None


def summarize_catalog(catalog: TraitCatalog) -> CollectionSummary:
    """Summarize every category of the catalog, lexicographic by name."""
    return CollectionSummary(
        total_items=catalog.total_items,
        categories=tuple(catalog.category_stats(category) for category in catalog.categories),
    )
