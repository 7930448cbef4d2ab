import random
from pathlib import Path

import pytest

from wordfilter.filtering.engine import WordFilter


@pytest.fixture()
def word_filter() -> WordFilter:
    """A filter seeded with a small dictionary and a deterministic rng."""
    return WordFilter(rng=random.Random(1234)).seed(
        {"bad": "good", "ugly": "pretty", "rotten egg": "fresh egg"}
    )


@pytest.fixture()
def seed_dir(tmp_path: Path) -> Path:
    """Directory holding a couple of custom seed files."""
    (tmp_path / "fruits.json").write_text('{"apple": "pear", "Plum": "fig"}')
    (tmp_path / "colors.json").write_text('["red", "blue"]')
    return tmp_path
