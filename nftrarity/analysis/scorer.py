"""
Rarity scoring.

Scores one item against the shared, read-only catalog. The scoring model
is a pluggable strategy; the default is statistical rarity, the inverse
of a trait value's frequency in the collection:

    rarity = 1 / (count / N) = N / count

Items lacking a category are scored on the "missing" pseudo-value, whose
count is the number of items that also lack it.

Total rarity is summed in a pinned order (categories lexicographic) with
math.fsum, so identical input always yields a bit-identical total.
"""

import logging
import math
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Protocol

from nftrarity.config import TRAIT_COUNT_CATEGORY
from nftrarity.models.catalog import TraitCatalog
from nftrarity.models.errors import DegenerateCategoryError
from nftrarity.models.item import Item
from nftrarity.models.rarity import ItemRarity, TraitContribution

logger = logging.getLogger(__name__)


class ScoringStrategy(Protocol):
    """Produces an item's per-trait contributions in a fixed order."""

    name: str

    def contributions(self, catalog: TraitCatalog, item: Item) -> list[TraitContribution]: ...


def _contribution(
    category: str, value: str | None, count: int, total_items: int
) -> TraitContribution:
    return TraitContribution(
        category=category,
        value=value,
        count=count,
        frequency=count / total_items,
        rarity=total_items / count,
    )


class StatisticalRarity:
    """Inverse-frequency rarity for every category observed in the collection."""

    name = "statistical"

    def contributions(self, catalog: TraitCatalog, item: Item) -> list[TraitContribution]:
        traits = item.traits()
        n = catalog.total_items
        result: list[TraitContribution] = []

        for category in catalog.categories:
            value = traits.get(category)
            if value is not None:
                count = catalog.value_count(category, value)
                if count == 0:
                    raise DegenerateCategoryError(item.external_id, category)
                result.append(_contribution(category, value, count, n))
                continue

            # Missing pseudo-value. A zero count means this item was not part
            # of the catalog; score it as the rarest possible value.
            missing = catalog.missing_count(category)
            result.append(_contribution(category, None, max(missing, 1), n))

        # Categories the catalog never saw carry no discriminating information,
        # but an item claiming one was not counted at all.
        for category in traits:
            if not catalog.has_category(category):
                raise DegenerateCategoryError(item.external_id, category)

        return result


class TraitCountRarity:
    """
    Rarity of how many traits an item carries.

    One contribution under the "Trait Count" pseudo-category, scored as
    N / items-with-the-same-trait-count.
    """

    name = "trait_count"

    def contributions(self, catalog: TraitCatalog, item: Item) -> list[TraitContribution]:
        trait_count = len(item.traits())
        count = catalog.trait_count_frequency(trait_count)
        if count == 0:
            raise DegenerateCategoryError(item.external_id, TRAIT_COUNT_CATEGORY)
        return [
            _contribution(TRAIT_COUNT_CATEGORY, str(trait_count), count, catalog.total_items)
        ]


class CombinedRarity:
    """Unweighted concatenation of several strategies, in the order given."""

    name = "combined"

    def __init__(self, *strategies: ScoringStrategy):
        if not strategies:
            raise ValueError("CombinedRarity needs at least one strategy")
        self.strategies = strategies

    def contributions(self, catalog: TraitCatalog, item: Item) -> list[TraitContribution]:
        result: list[TraitContribution] = []
        for strategy in self.strategies:
            result.extend(strategy.contributions(catalog, item))
        return result


def get_strategy(name: str) -> ScoringStrategy:
    """
    Look up a scoring strategy by name.

    Raises:
        ValueError: If the name is unknown
    """
    if name == StatisticalRarity.name:
        return StatisticalRarity()
    if name == TraitCountRarity.name:
        return TraitCountRarity()
    if name == CombinedRarity.name:
        return CombinedRarity(StatisticalRarity(), TraitCountRarity())
    raise ValueError(f"Unknown scoring strategy: {name}")


def score_item(
    catalog: TraitCatalog,
    item: Item,
    strategy: ScoringStrategy | None = None,
) -> ItemRarity:
    """
    Score one item against the collection catalog.

    Pure function of (catalog, item, strategy); safe to call concurrently.

    Returns:
        Unranked ItemRarity

    Raises:
        DataError: If the item's traits are malformed
        DegenerateCategoryError: If the item is inconsistent with the catalog
    """
    if strategy is None:
        strategy = StatisticalRarity()

    contributions = tuple(strategy.contributions(catalog, item))
    total = math.fsum(c.rarity for c in contributions)

    return ItemRarity(
        external_id=item.external_id,
        contributions=contributions,
        total_rarity=total,
    )


def score_items(
    catalog: TraitCatalog,
    items: Sequence[Item],
    strategy: ScoringStrategy | None = None,
    max_workers: int = 1,
) -> list[ItemRarity]:
    """
    Score every item, optionally across worker threads.

    Results are in input order. The first failure cancels pending work and
    is re-raised; a partial result list is never returned.
    """
    if strategy is None:
        strategy = StatisticalRarity()

    if max_workers <= 1 or len(items) <= 1:
        return [score_item(catalog, item, strategy) for item in items]

    logger.debug("Scoring %d items with %d workers", len(items), max_workers)
    executor = ThreadPoolExecutor(max_workers=max_workers)
    try:
        futures = [executor.submit(score_item, catalog, item, strategy) for item in items]
        results = [future.result() for future in futures]
    except Exception:
        executor.shutdown(wait=True, cancel_futures=True)
        raise
    executor.shutdown(wait=True)
    return results
