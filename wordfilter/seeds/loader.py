"""Seed-data provider: named word dictionaries stored as JSON files.

A seed file is ``<directory>/<name>.json`` holding either an object that
maps each word to its replacement text, or an array of words that all get
the default replacement text.
"""

import json
import re
from pathlib import Path
from typing import Any

from wordfilter.filtering.dictionary import DEFAULT_REPLACEMENT
from wordfilter.filtering.exceptions import SeedLoadError

_DEFAULT_SEED_DIR = Path(__file__).parent
_SEED_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")

DEFAULT_SEED_NAME = "profanity"


def load_seed(
    name: str,
    directory: Path | None = None,
    default_replacement: str = DEFAULT_REPLACEMENT,
) -> dict[str, str]:
    """Load a named seed dictionary.

    Args:
        name: Seed name, without the ``.json`` suffix.
        directory: Directory holding seed files.
                   Defaults to the bundled seeds directory.
        default_replacement: Replacement text for words listed without one.

    Returns:
        Mapping of word to replacement text.

    Raises:
        SeedLoadError: if the name is invalid or the file cannot be read,
                       parsed or validated.
    """
    if not isinstance(name, str) or not _SEED_NAME_RE.fullmatch(name):
        raise SeedLoadError(f"Invalid seed name: {name!r}")
    if directory is None:
        directory = _DEFAULT_SEED_DIR
    path = Path(directory) / f"{name}.json"
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SeedLoadError(f"Failed to load seed file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SeedLoadError(f"Invalid JSON in seed file {path}: {exc}") from exc
    return _build_entries(raw, path, default_replacement)


def available_seeds(directory: Path | None = None) -> list[str]:
    """List the names of seed files in *directory* (bundled seeds by default)."""
    if directory is None:
        directory = _DEFAULT_SEED_DIR
    return sorted(
        path.stem
        for path in Path(directory).glob("*.json")
        if _SEED_NAME_RE.fullmatch(path.stem)
    )


def _build_entries(raw: Any, path: Path, default_replacement: str) -> dict[str, str]:
    if isinstance(raw, list):
        if not all(isinstance(word, str) for word in raw):
            raise SeedLoadError(f"Seed file {path} must list strings only")
        return {word: default_replacement for word in raw}
    if isinstance(raw, dict):
        for word, replacement in raw.items():
            if not isinstance(replacement, str):
                raise SeedLoadError(
                    f"Seed file {path}: replacement for '{word}' must be a string"
                )
        return dict(raw)
    raise SeedLoadError(f"Seed file {path} must contain a JSON object or array")
