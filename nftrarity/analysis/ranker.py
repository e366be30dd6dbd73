"""
Rarity ranking.

Assigns every item a dense rank 1..N by descending total rarity. Equal
totals are broken by external identifier ascending, so the result never
depends on input order or on sort stability.

This is a batch transform: ranks are only final once every item in the
collection has been scored.
"""

from collections.abc import Sequence

from nftrarity.config import settings
from nftrarity.models.errors import EmptyCollectionError
from nftrarity.models.item import check_unique_ids, external_id_sort_key
from nftrarity.models.rarity import ItemRarity


def ranking_key(scored: ItemRarity, tie_precision: int) -> tuple:
    """Sort key placing the rarest item first."""
    return (
        -round(scored.total_rarity, tie_precision),
        external_id_sort_key(scored.external_id),
    )


def rank_items(
    scored: Sequence[ItemRarity],
    tie_precision: int | None = None,
) -> list[ItemRarity]:
    """
    Rank a fully scored collection.

    Args:
        scored: Scores for every item of the collection
        tie_precision: Decimal places at which totals count as equal
            (defaults to Settings.tie_precision)

    Returns:
        New ItemRarity objects with rank assigned, rarest first

    Raises:
        EmptyCollectionError: If no scores are given
        DataError: If external ids are not unique
    """
    if not scored:
        raise EmptyCollectionError()

    check_unique_ids(entry.external_id for entry in scored)

    if tie_precision is None:
        tie_precision = settings.tie_precision

    ordered = sorted(scored, key=lambda s: ranking_key(s, tie_precision))
    return [entry.with_rank(rank) for rank, entry in enumerate(ordered, start=1)]
