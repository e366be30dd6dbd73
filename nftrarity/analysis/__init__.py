from nftrarity.analysis.catalog_builder import build_catalog
from nftrarity.analysis.pipeline import RarityReport, analyze_collection
from nftrarity.analysis.ranker import rank_items
from nftrarity.analysis.scorer import (
    CombinedRarity,
    ScoringStrategy,
    StatisticalRarity,
    TraitCountRarity,
    get_strategy,
    score_item,
    score_items,
)
from nftrarity.analysis.sort_view import SortMode, sort_view
from nftrarity.analysis.summary import CollectionSummary, summarize_catalog

__all__ = [
    "CollectionSummary",
    "CombinedRarity",
    "RarityReport",
    "ScoringStrategy",
    "SortMode",
    "StatisticalRarity",
    "TraitCountRarity",
    "analyze_collection",
    "build_catalog",
    "get_strategy",
    "rank_items",
    "score_item",
    "score_items",
    "sort_view",
    "summarize_catalog",
]
