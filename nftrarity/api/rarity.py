"""
Rarity API endpoint.

Accepts already-parsed collection metadata and returns per-item rarity,
rank and collection statistics. Failures are classified KnownErrors and
reach the client through the response envelope; no partial table is
ever returned.
"""

from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel, Field

from nftrarity.analysis.pipeline import analyze_collection
from nftrarity.analysis.scorer import get_strategy
from nftrarity.analysis.sort_view import SortMode
from nftrarity.config import MAX_ITEMS_PER_REQUEST, settings
from nftrarity.models.catalog import CategoryStats
from nftrarity.models.failure import ApiResponse
from nftrarity.models.item import items_from_records
from nftrarity.models.rarity import ItemRarity, format_rarity

router = APIRouter(prefix="/rarity", tags=["rarity"])

StrategyName = Literal["statistical", "trait_count", "combined"]


class AttributeIn(BaseModel):
    """One trait of an item, in NFT metadata shape."""

    trait_type: str
    value: bool | int | float | str


class ItemIn(BaseModel):
    """One collection item."""

    external_id: int | str | None = Field(
        default=None,
        description="Unique identifier; defaults to the 1-based position in the request",
    )
    attributes: list[AttributeIn] = Field(default_factory=list)


class RarityRequest(BaseModel):
    """Request model for a rarity analysis."""

    items: list[ItemIn] = Field(
        ...,
        max_length=MAX_ITEMS_PER_REQUEST,
        examples=[
            [
                {"external_id": 1, "attributes": [{"trait_type": "Color", "value": "Red"}]},
                {"external_id": 2, "attributes": [{"trait_type": "Color", "value": "Blue"}]},
            ]
        ],
    )


class ContributionOut(BaseModel):
    """A category's contribution to an item's total rarity."""

    category: str
    value: str | None = Field(description="Trait value, or null when the item lacks the category")
    count: int
    frequency: str
    rarity: str


class ItemRarityOut(BaseModel):
    """Rarity result for one item."""

    external_id: int | str
    rank: int
    total_rarity: str
    contributions: list[ContributionOut] = Field(default_factory=list)


class CategoryStatsOut(BaseModel):
    """Collection-wide statistics for one category."""

    category: str
    distinct_values: int
    items_with_category: int
    items_missing: int
    rarest_value: str
    rarest_count: int
    most_common_value: str
    most_common_count: int


class RarityResponse(BaseModel):
    """Response model for a rarity analysis."""

    total_items: int
    strategy: str
    sort: SortMode
    categories: list[CategoryStatsOut] = Field(default_factory=list)
    items: list[ItemRarityOut] = Field(default_factory=list)


def _item_out(entry: ItemRarity, precision: int) -> ItemRarityOut:
    return ItemRarityOut(
        external_id=entry.external_id,
        rank=entry.rank or 0,
        total_rarity=format_rarity(entry.total_rarity, precision),
        contributions=[
            ContributionOut(
                category=c.category,
                value=c.value,
                count=c.count,
                frequency=format_rarity(c.frequency, precision),
                rarity=format_rarity(c.rarity, precision),
            )
            for c in entry.contributions
        ],
    )


def _stats_out(stats: CategoryStats) -> CategoryStatsOut:
    return CategoryStatsOut(
        category=stats.category,
        distinct_values=stats.distinct_values,
        items_with_category=stats.items_with_category,
        items_missing=stats.items_missing,
        rarest_value=stats.rarest_value,
        rarest_count=stats.rarest_count,
        most_common_value=stats.most_common_value,
        most_common_count=stats.most_common_count,
    )


@router.get("/sort-modes", response_model=list[str])
async def list_sort_modes() -> list[str]:
    """Display labels of the supported orderings."""
    return [mode.value for mode in SortMode]


@router.post("", response_model=ApiResponse[RarityResponse])
def compute_rarity(
    request: RarityRequest,
    sort: SortMode = SortMode.SERIAL_ASC,
    strategy: StrategyName | None = None,
) -> ApiResponse[RarityResponse]:
    """
    Compute rarity scores and ranks for a collection.

    Items are ranked by descending total rarity; equal totals are ordered
    by external id. The `sort` parameter only changes presentation order.
    """
    items = items_from_records(item.model_dump() for item in request.items)
    scoring = get_strategy(strategy or settings.scoring_strategy)

    report = analyze_collection(items, scoring)
    precision = settings.display_precision

    result = RarityResponse(
        total_items=report.summary.total_items,
        strategy=scoring.name,
        sort=sort,
        categories=[_stats_out(stats) for stats in report.summary.categories],
        items=[_item_out(entry, precision) for entry in report.view(sort)],
    )
    return ApiResponse[RarityResponse].success(result)
