"""
Loading dictionary files supplied by the caller.

Files are TOML or JSON. Entries may sit at the top level or under a
``[words]`` table:

    [words]
    "서울" = "seoul"
"""

import json
from pathlib import Path
from typing import Dict, Iterable

import toml

from ..exceptions import DictionaryError
from ..utils.logger import get_logger

logger = get_logger("dictionary.loader")


def load_dictionary(path: str | Path) -> Dict[str, str]:
    path = Path(path)
    if not path.exists():
        raise DictionaryError(f"Dictionary file not found: {path}", code="missing")

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = toml.load(f)
    except (json.JSONDecodeError, toml.TomlDecodeError, UnicodeDecodeError) as e:
        raise DictionaryError(f"Cannot parse dictionary {path}: {e}", code="parse") from e
    except OSError as e:
        raise DictionaryError(f"Cannot read dictionary {path}: {e}", code="io") from e

    if isinstance(data, dict) and isinstance(data.get("words"), dict):
        data = data["words"]

    if not isinstance(data, dict):
        raise DictionaryError(f"Dictionary {path} must be a table of words", code="shape")

    for word, rendering in data.items():
        if not isinstance(rendering, str):
            raise DictionaryError(
                f"Dictionary {path}: rendering for {word!r} must be a string", code="shape"
            )

    logger.info(f"Loaded {len(data)} dictionary entries from {path}")
    return dict(data)


def merge_dictionaries(base: Dict[str, str], paths: Iterable[str | Path]) -> Dict[str, str]:
    """Entries from later files override earlier ones and `base`."""
    merged = dict(base)
    for path in paths:
        merged.update(load_dictionary(path))
    return merged
