from dataclasses import dataclass, replace

from nftrarity.models.item import ExternalId


def format_rarity(value: float, precision: int) -> str:
    """Render a rarity value with a fixed number of decimal places."""
    return f"{value:.{precision}f}"


@dataclass(frozen=True, slots=True)
class TraitContribution:
    """
    One category's share of an item's total rarity.

    A value of None marks the "missing" pseudo-value: the item lacks the
    category and is scored by how many items share that absence.
    """

    category: str
    value: str | None
    count: int
    frequency: float
    rarity: float

    @property
    def is_missing(self) -> bool:
        return self.value is None


@dataclass(frozen=True, slots=True)
class ItemRarity:
    """
    Rarity of one item relative to its collection.

    total_rarity is fixed at scoring time. rank stays None until the
    whole collection has been scored and ranked.
    """

    external_id: ExternalId
    contributions: tuple[TraitContribution, ...]
    total_rarity: float
    rank: int | None = None

    @property
    def is_ranked(self) -> bool:
        return self.rank is not None

    def with_rank(self, rank: int) -> "ItemRarity":
        """Copy of this result with its rank assigned."""
        return replace(self, rank=rank)

    def contribution_for(self, category: str) -> TraitContribution | None:
        for contribution in self.contributions:
            if contribution.category == category:
                return contribution
        return None
