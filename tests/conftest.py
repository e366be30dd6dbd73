import pytest

from nftrarity.models.item import Item


@pytest.fixture
def color_items() -> list[Item]:
    """Four items, one category: three Red and a single Blue (id 3)."""
    return [
        Item.from_mapping(1, {"Color": "Red"}),
        Item.from_mapping(2, {"Color": "Red"}),
        Item.from_mapping(3, {"Color": "Blue"}),
        Item.from_mapping(4, {"Color": "Red"}),
    ]


@pytest.fixture
def hat_items() -> list[Item]:
    """Three of four items wear a hat; item 4 has none."""
    return [
        Item.from_mapping(1, {"Background": "Sky", "Hat": "Cap"}),
        Item.from_mapping(2, {"Background": "Sky", "Hat": "Cap"}),
        Item.from_mapping(3, {"Background": "Sky", "Hat": "Crown"}),
        Item.from_mapping(4, {"Background": "Sky"}),
    ]


@pytest.fixture
def uneven_items() -> list[Item]:
    """
    Non-rectangular collection where items 1 and 3 tie on total rarity.

    Statistical totals: item 1 = 1.5 + 3.0, item 2 = 1.5 + 1.5, item 3 = 3.0 + 1.5
    """
    return [
        Item.from_mapping(1, {"Eyes": "Laser", "Mouth": "Pipe"}),
        Item.from_mapping(2, {"Eyes": "Laser"}),
        Item.from_mapping(3, {"Eyes": "Sleepy"}),
    ]
