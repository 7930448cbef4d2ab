"""Tests for the JSON seed-data provider."""

from pathlib import Path

import pytest

from wordfilter.filtering.exceptions import SeedLoadError
from wordfilter.seeds.loader import DEFAULT_SEED_NAME, available_seeds, load_seed


class TestLoadSeed:
    def test_loads_bundled_default(self) -> None:
        seed = load_seed(DEFAULT_SEED_NAME)
        assert seed["shit"] == "shoot"
        assert all(isinstance(value, str) for value in seed.values())

    def test_loads_object_from_directory(self, seed_dir: Path) -> None:
        assert load_seed("fruits", seed_dir) == {"apple": "pear", "Plum": "fig"}

    def test_word_list_gets_default_replacement(self, seed_dir: Path) -> None:
        seed = load_seed("colors", seed_dir, default_replacement="***")
        assert seed == {"red": "***", "blue": "***"}

    def test_missing_file_raises_error(self, tmp_path: Path) -> None:
        with pytest.raises(SeedLoadError, match="Failed to load seed file"):
            load_seed("nothing", tmp_path)

    def test_invalid_json_raises_error(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text("{not json")
        with pytest.raises(SeedLoadError, match="Invalid JSON"):
            load_seed("broken", tmp_path)

    def test_non_string_replacement_raises_error(self, tmp_path: Path) -> None:
        (tmp_path / "numbers.json").write_text('{"one": 1}')
        with pytest.raises(SeedLoadError, match="must be a string"):
            load_seed("numbers", tmp_path)

    def test_non_string_list_item_raises_error(self, tmp_path: Path) -> None:
        (tmp_path / "mixed.json").write_text('["ok", 2]')
        with pytest.raises(SeedLoadError, match="strings only"):
            load_seed("mixed", tmp_path)

    def test_scalar_document_raises_error(self, tmp_path: Path) -> None:
        (tmp_path / "scalar.json").write_text("42")
        with pytest.raises(SeedLoadError, match="object or array"):
            load_seed("scalar", tmp_path)

    @pytest.mark.parametrize("name", ["", "../profanity", "a/b", "profanity.json"])
    def test_invalid_name_raises_error(self, name: str) -> None:
        with pytest.raises(SeedLoadError, match="Invalid seed name"):
            load_seed(name)

    def test_non_string_name_raises_error(self) -> None:
        with pytest.raises(SeedLoadError):
            load_seed(None)  # type: ignore[arg-type]


class TestAvailableSeeds:
    def test_lists_bundled_seeds(self) -> None:
        assert DEFAULT_SEED_NAME in available_seeds()

    def test_lists_directory_seeds_sorted(self, seed_dir: Path) -> None:
        assert available_seeds(seed_dir) == ["colors", "fruits"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert available_seeds(tmp_path) == []
