"""
Terminal errors of a collection-analysis run.

Rarity is comparative: one skipped or corrupted item biases the rank of
every other item. All of these errors therefore abort the whole run.
"""

from nftrarity.models.failure import FailureKind, KnownError


def _context(item_id: int | str | None, category: str | None) -> str | None:
    parts: list[str] = []
    if item_id is not None:
        parts.append(f"item={item_id!r}")
    if category is not None:
        parts.append(f"category={category!r}")
    return ", ".join(parts) or None


class RarityError(KnownError):
    """Base class for rarity analysis failures."""

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        item_id: int | str | None = None,
        category: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.item_id = item_id
        self.category = category
        super().__init__(
            kind=kind,
            message=message,
            detail=_context(item_id, category),
            suggestion=suggestion,
            status_code=status_code,
        )


class EmptyCollectionError(RarityError):
    """Raised when a run is given zero items. Rarity is undefined for N = 0."""

    def __init__(self) -> None:
        super().__init__(
            kind=FailureKind.EMPTY_COLLECTION,
            message="Cannot compute rarity for an empty collection.",
            suggestion="Supply at least one item.",
            status_code=400,
        )


class DataError(RarityError):
    """
    Raised when an item's trait data is malformed.

    Covers a category appearing twice for one item, an empty category
    name, an unusable trait value and duplicate external identifiers.
    """

    def __init__(
        self,
        reason: str,
        item_id: int | str | None = None,
        category: str | None = None,
    ):
        self.reason = reason
        super().__init__(
            kind=FailureKind.DATA_ERROR,
            message=f"Invalid trait data: {reason}",
            item_id=item_id,
            category=category,
            suggestion="Fix the metadata for the reported item and retry.",
            status_code=422,
        )


class DegenerateCategoryError(RarityError):
    """
    Raised when an item claims a trait value the catalog never counted.

    The catalog was built from a different item set than the one being
    scored, which is a bug in the calling code rather than bad user data.
    """

    def __init__(self, item_id: int | str, category: str):
        super().__init__(
            kind=FailureKind.DEGENERATE_CATEGORY,
            message=(
                f"Item {item_id!r} has a value for category {category!r} "
                "that does not occur in the collection catalog."
            ),
            item_id=item_id,
            category=category,
            suggestion="Rebuild the catalog from the same items that are being scored.",
            status_code=500,
        )
