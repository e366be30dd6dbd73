import pytest
from pydantic import ValidationError

from nftrarity.config import MAX_ITEMS_PER_REQUEST, TRAIT_COUNT_CATEGORY, Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NFTRARITY_DISPLAY_PRECISION", raising=False)
        settings = Settings(_env_file=None)

        assert settings.display_precision == 4
        assert settings.tie_precision == 9
        assert settings.scoring_workers == 1
        assert settings.catalog_partitions == 1
        assert settings.scoring_strategy == "statistical"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NFTRARITY_DISPLAY_PRECISION", "2")
        monkeypatch.setenv("NFTRARITY_SCORING_STRATEGY", "combined")

        settings = Settings(_env_file=None)

        assert settings.display_precision == 2
        assert settings.scoring_strategy == "combined"

    @pytest.mark.parametrize(
        ("variable", "value"),
        [
            ("NFTRARITY_DISPLAY_PRECISION", "-1"),
            ("NFTRARITY_TIE_PRECISION", "-1"),
            ("NFTRARITY_SCORING_WORKERS", "0"),
        ],
    )
    def test_rejects_out_of_range(
        self, monkeypatch: pytest.MonkeyPatch, variable: str, value: str
    ) -> None:
        monkeypatch.setenv(variable, value)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_constants(self) -> None:
        assert MAX_ITEMS_PER_REQUEST == 50_000
        assert TRAIT_COUNT_CATEGORY == "Trait Count"
