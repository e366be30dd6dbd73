"""
Collection analysis pipeline.

    build catalog (once) -> score every item (parallelizable) -> rank (barrier)

Any error aborts the whole run. Rarity is comparative, so a partial
catalog or a partially ranked collection is never returned.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from nftrarity.analysis.catalog_builder import build_catalog
from nftrarity.analysis.ranker import rank_items
from nftrarity.analysis.scorer import ScoringStrategy, get_strategy, score_items
from nftrarity.analysis.sort_view import SortMode, sort_view
from nftrarity.analysis.summary import CollectionSummary, summarize_catalog
from nftrarity.config import settings
from nftrarity.models.catalog import TraitCatalog
from nftrarity.models.item import Item
from nftrarity.models.rarity import ItemRarity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RarityReport:
    """Result of one collection-analysis run."""

    catalog: TraitCatalog
    ranked: tuple[ItemRarity, ...]
    summary: CollectionSummary

    def view(self, mode: SortMode = SortMode.MOST_RARE) -> list[ItemRarity]:
        """Ranked results in the requested display order."""
        return sort_view(self.ranked, mode)

    def by_id(self) -> dict[int | str, ItemRarity]:
        return {entry.external_id: entry for entry in self.ranked}


def analyze_collection(
    items: Sequence[Item],
    strategy: ScoringStrategy | None = None,
    *,
    max_workers: int | None = None,
    partitions: int | None = None,
    tie_precision: int | None = None,
) -> RarityReport:
    """
    Compute catalog, scores and ranks for a whole collection.

    Unset options fall back to application settings.

    Raises:
        EmptyCollectionError: If no items are given
        DataError: If an item's trait data is malformed
        DegenerateCategoryError: If scoring finds a catalog inconsistency
    """
    if strategy is None:
        strategy = get_strategy(settings.scoring_strategy)
    if max_workers is None:
        max_workers = settings.scoring_workers
    if partitions is None:
        partitions = settings.catalog_partitions
    if tie_precision is None:
        tie_precision = settings.tie_precision

    items = list(items)
    catalog = build_catalog(items, partitions=partitions)
    scored = score_items(catalog, items, strategy, max_workers=max_workers)
    ranked = rank_items(scored, tie_precision=tie_precision)

    logger.info("Ranked %d items using %s rarity", len(ranked), strategy.name)

    return RarityReport(
        catalog=catalog,
        ranked=tuple(ranked),
        summary=summarize_catalog(catalog),
    )
