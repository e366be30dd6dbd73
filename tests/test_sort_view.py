import pytest

from nftrarity.analysis.catalog_builder import build_catalog
from nftrarity.analysis.ranker import rank_items
from nftrarity.analysis.scorer import score_items
from nftrarity.analysis.sort_view import SortMode, sort_view
from nftrarity.models.item import Item
from nftrarity.models.rarity import ItemRarity


@pytest.fixture
def ranked(color_items: list[Item]) -> list[ItemRarity]:
    catalog = build_catalog(color_items)
    return rank_items(score_items(catalog, color_items))


class TestSortView:
    @pytest.mark.parametrize(
        ("mode", "expected"),
        [
            (SortMode.SERIAL_ASC, [1, 2, 3, 4]),
            (SortMode.SERIAL_DESC, [4, 3, 2, 1]),
            (SortMode.MOST_RARE, [3, 1, 2, 4]),
            (SortMode.LEAST_RARE, [4, 2, 1, 3]),
        ],
    )
    def test_orderings(self, ranked: list[ItemRarity], mode: SortMode, expected: list[int]) -> None:
        assert [r.external_id for r in sort_view(ranked, mode)] == expected

    def test_accepts_display_label(self, ranked: list[ItemRarity]) -> None:
        view = sort_view(ranked, "Most Rare")  # type: ignore[arg-type]
        assert view[0].external_id == 3

    def test_does_not_mutate(self, ranked: list[ItemRarity]) -> None:
        before = list(ranked)

        view = sort_view(ranked, SortMode.SERIAL_DESC)

        assert ranked == before
        assert view is not ranked
        assert {(r.external_id, r.rank, r.total_rarity) for r in view} == {
            (r.external_id, r.rank, r.total_rarity) for r in before
        }

    def test_rejects_unranked(self) -> None:
        unranked = [ItemRarity(external_id=1, contributions=(), total_rarity=1.0)]

        with pytest.raises(ValueError, match="ranked"):
            sort_view(unranked, SortMode.MOST_RARE)

    def test_labels(self) -> None:
        assert [mode.value for mode in SortMode] == [
            "Serial ASC",
            "Serial DESC",
            "Most Rare",
            "Least Rare",
        ]
