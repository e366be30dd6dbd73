"""
Alternate orderings of a ranked collection for presentation.

Views are read-only projections: they return a new list and never touch
rank or total rarity.
"""

from collections.abc import Sequence
from enum import Enum

from nftrarity.models.item import external_id_sort_key
from nftrarity.models.rarity import ItemRarity


class SortMode(str, Enum):
    """Presentation orderings, valued by their display labels."""

    SERIAL_ASC = "Serial ASC"
    SERIAL_DESC = "Serial DESC"
    MOST_RARE = "Most Rare"
    LEAST_RARE = "Least Rare"


def sort_view(ranked: Sequence[ItemRarity], mode: SortMode) -> list[ItemRarity]:
    """
    Order ranked results for display.

    Raises:
        ValueError: If any entry has not been ranked
    """
    if any(not entry.is_ranked for entry in ranked):
        raise ValueError("sort_view requires ranked results")

    mode = SortMode(mode)
    if mode is SortMode.SERIAL_ASC:
        return sorted(ranked, key=lambda r: external_id_sort_key(r.external_id))
    if mode is SortMode.SERIAL_DESC:
        return sorted(ranked, key=lambda r: external_id_sort_key(r.external_id), reverse=True)
    if mode is SortMode.MOST_RARE:
        return sorted(ranked, key=lambda r: r.rank)
    return sorted(ranked, key=lambda r: r.rank, reverse=True)
