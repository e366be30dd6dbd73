"""
Collection items and trait value normalization.

An item keeps its attributes as the ordered (category, value) pairs the
ingestion collaborator supplied. Uniqueness of categories is checked when
the mapping view is requested, so malformed upstream data that repeats a
category is reported instead of being collapsed by a dict.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from nftrarity.models.errors import DataError

ExternalId = int | str
RawTraitValue = str | int | float | bool


def normalize_trait_value(
    value: Any,
    item_id: ExternalId | None = None,
    category: str | None = None,
) -> str:
    """
    Normalize a raw trait value to its hashable, comparable form.

    Values are rendered the way they read in JSON metadata, so 1, 1.0 and
    "1" are the same trait value while True becomes "true".

    Raises:
        DataError: If the value is None or not a scalar
    """
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if value is None:
        raise DataError("trait value is missing", item_id=item_id, category=category)
    raise DataError(
        f"unsupported trait value type {type(value).__name__}",
        item_id=item_id,
        category=category,
    )


def external_id_sort_key(external_id: ExternalId) -> tuple[int, int | str]:
    """Sort key for identifiers: integers numerically, then strings lexicographically."""
    if isinstance(external_id, int):
        return (0, external_id)
    return (1, external_id)


@dataclass(frozen=True)
class Item:
    """
    A single collection member.

    Attributes:
        external_id: Stable identifier (e.g. serial number), unique per collection
        attributes: Ordered (category, value) pairs; values are normalized
    """

    external_id: ExternalId
    attributes: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.external_id, bool) or not isinstance(self.external_id, int | str):
            raise DataError(
                f"external id must be an integer or string, got "
                f"{type(self.external_id).__name__}",
                item_id=None,
            )

        normalized = tuple(
            (category, normalize_trait_value(value, self.external_id, category))
            for category, value in self.attributes
        )
        object.__setattr__(self, "attributes", normalized)

    @classmethod
    def from_mapping(
        cls, external_id: ExternalId, traits: Mapping[str, RawTraitValue]
    ) -> "Item":
        """Create an item from a category -> value mapping."""
        return cls(external_id=external_id, attributes=tuple(traits.items()))

    @classmethod
    def from_attributes(
        cls, external_id: ExternalId, attributes: Iterable[Mapping[str, Any]]
    ) -> "Item":
        """
        Create an item from NFT-metadata style attribute entries.

        Each entry is {"trait_type": <category>, "value": <value>}.

        Raises:
            DataError: If an entry has no trait_type
        """
        pairs: list[tuple[str, Any]] = []
        for entry in attributes:
            category = entry.get("trait_type")
            if category is None:
                raise DataError("attribute entry has no trait_type", item_id=external_id)
            pairs.append((category, entry.get("value")))
        return cls(external_id=external_id, attributes=tuple(pairs))

    @property
    def trait_count(self) -> int:
        """Number of categories this item carries."""
        return len(self.attributes)

    def traits(self) -> dict[str, str]:
        """
        Mapping view of the item's traits.

        Raises:
            DataError: If a category is empty, not a string, or repeated
        """
        traits: dict[str, str] = {}
        for category, value in self.attributes:
            if not isinstance(category, str) or not category.strip():
                raise DataError(
                    "trait category must be a non-empty string",
                    item_id=self.external_id,
                    category=str(category),
                )
            if category in traits:
                raise DataError(
                    "trait category appears more than once",
                    item_id=self.external_id,
                    category=category,
                )
            traits[category] = value
        return traits


def items_from_records(records: Iterable[Mapping[str, Any]]) -> list[Item]:
    """
    Build items from already-parsed metadata records.

    A record holds an optional "external_id" and either "attributes"
    (list of trait_type/value entries) or "traits" (category -> value).
    Records without an id get their 1-based position, the serial-number
    convention of NFT collections.

    Raises:
        DataError: If a position id collides with an explicitly supplied id
    """
    records = list(records)
    explicit_ids = {
        record["external_id"] for record in records if record.get("external_id") is not None
    }

    items: list[Item] = []
    for position, record in enumerate(records, start=1):
        external_id = record.get("external_id")
        if external_id is None:
            if position in explicit_ids:
                raise DataError(
                    "default position id collides with an explicit id",
                    item_id=position,
                )
            external_id = position

        if "traits" in record:
            items.append(Item.from_mapping(external_id, record["traits"] or {}))
        else:
            items.append(Item.from_attributes(external_id, record.get("attributes") or []))
    return items


def check_unique_ids(external_ids: Iterable[ExternalId]) -> None:
    """
    Verify external identifiers are unique within a collection.

    Raises:
        DataError: On the first repeated identifier
    """
    seen: set[ExternalId] = set()
    for external_id in external_ids:
        if external_id in seen:
            raise DataError("external id is not unique", item_id=external_id)
        seen.add(external_id)
