from nftrarity.models.catalog import CategoryStats, TraitCatalog
from nftrarity.models.errors import (
    DataError,
    DegenerateCategoryError,
    EmptyCollectionError,
    RarityError,
)
from nftrarity.models.failure import (
    UNKNOWN_FAILURE_MESSAGE,
    ApiResponse,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
)
from nftrarity.models.item import (
    ExternalId,
    Item,
    check_unique_ids,
    external_id_sort_key,
    items_from_records,
    normalize_trait_value,
)
from nftrarity.models.rarity import ItemRarity, TraitContribution, format_rarity

__all__ = [
    "ApiResponse",
    "CategoryStats",
    "DataError",
    "DegenerateCategoryError",
    "EmptyCollectionError",
    "ExternalId",
    "FailureDetail",
    "FailureKind",
    "Item",
    "ItemRarity",
    "KnownError",
    "OutcomeType",
    "RarityError",
    "TraitCatalog",
    "TraitContribution",
    "UNKNOWN_FAILURE_MESSAGE",
    "check_unique_ids",
    "external_id_sort_key",
    "format_rarity",
    "items_from_records",
    "normalize_trait_value",
]
