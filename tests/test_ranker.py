import random

import pytest

from nftrarity.analysis.catalog_builder import build_catalog
from nftrarity.analysis.ranker import rank_items
from nftrarity.analysis.scorer import score_items
from nftrarity.config import settings
from nftrarity.models.errors import DataError, EmptyCollectionError
from nftrarity.models.item import Item
from nftrarity.models.rarity import ItemRarity


def _scored(external_id: int | str, total: float) -> ItemRarity:
    return ItemRarity(external_id=external_id, contributions=(), total_rarity=total)


def _ranks(ranked: list[ItemRarity]) -> dict[int | str, int]:
    return {entry.external_id: entry.rank for entry in ranked}


class TestRankItems:
    def test_descending_by_total(self) -> None:
        ranked = rank_items([_scored(1, 2.0), _scored(2, 5.0), _scored(3, 3.5)])

        assert [r.external_id for r in ranked] == [2, 3, 1]
        assert [r.rank for r in ranked] == [1, 2, 3]

    def test_color_scenario(self, color_items: list[Item]) -> None:
        catalog = build_catalog(color_items)
        ranked = rank_items(score_items(catalog, color_items))

        assert _ranks(ranked) == {3: 1, 1: 2, 2: 3, 4: 4}

    def test_ties_break_by_external_id(self, uneven_items: list[Item]) -> None:
        catalog = build_catalog(uneven_items)
        ranked = rank_items(score_items(catalog, uneven_items))

        assert _ranks(ranked) == {1: 1, 3: 2, 2: 3}

    def test_identical_traits_rank_by_id(self) -> None:
        items = [Item.from_mapping(i, {"Color": "Red", "Hat": "Cap"}) for i in (5, 3, 9, 1)]
        catalog = build_catalog(items)
        scored = score_items(catalog, items)

        assert len({s.total_rarity for s in scored}) == 1
        assert _ranks(rank_items(scored)) == {1: 1, 3: 2, 5: 3, 9: 4}

    def test_mixed_id_types(self) -> None:
        ranked = rank_items([_scored("b", 1.0), _scored(10, 1.0), _scored("a", 1.0), _scored(2, 1.0)])

        assert [r.external_id for r in ranked] == [2, 10, "a", "b"]

    def test_ranks_are_permutation(self) -> None:
        rng = random.Random(7)
        scored = [_scored(i, float(rng.randint(1, 5))) for i in range(1, 51)]

        ranked = rank_items(scored)

        assert sorted(r.rank for r in ranked) == list(range(1, 51))

    def test_independent_of_input_order(self) -> None:
        rng = random.Random(11)
        scored = [_scored(i, float(rng.randint(1, 3))) for i in range(1, 21)]
        shuffled = list(scored)
        rng.shuffle(shuffled)

        assert _ranks(rank_items(scored)) == _ranks(rank_items(shuffled))

    def test_near_equal_totals_tie_at_precision(self) -> None:
        scored = [_scored(2, 1.0000000001), _scored(1, 1.0)]

        assert [r.external_id for r in rank_items(scored)] == [1, 2]
        assert [r.external_id for r in rank_items(scored, tie_precision=12)] == [2, 1]

    def test_tie_precision_defaults_to_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "tie_precision", 12)
        scored = [_scored(2, 1.0000000001), _scored(1, 1.0)]

        assert [r.external_id for r in rank_items(scored)] == [2, 1]

    def test_input_left_unranked(self) -> None:
        scored = [_scored(1, 1.0), _scored(2, 2.0)]
        rank_items(scored)
        assert all(s.rank is None for s in scored)

    def test_empty_rejected(self) -> None:
        with pytest.raises(EmptyCollectionError):
            rank_items([])

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(DataError):
            rank_items([_scored(1, 1.0), _scored(1, 2.0)])
