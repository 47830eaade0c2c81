"""Champion list and class-membership loader."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from ..models.champion import Champion, ChampionClass


logger = logging.getLogger(__name__)

# Bundled snapshot, shipped as package data
DATA_DIR = Path(__file__).parent.parent / "snapshot"
CHAMPIONS_FILENAME = "champions.json"
CLASSES_FILENAME = "champion_classes.json"


def read_snapshot(path: Path) -> Optional[Any]:
    """Read one JSON snapshot file.

    Returns:
        The decoded document, or None if the file is missing or unreadable.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.warning("Catalog file not found: %s", path)
    except (OSError, ValueError) as e:
        logger.warning("Could not read catalog file %s: %s", path, e)
    return None


def _parse_champion(champ_data: dict) -> Champion:
    """Parse a champion from JSON data."""
    return Champion(
        id=champ_data["id"],
        name=champ_data["name"],
        image=champ_data.get("image", f"{champ_data['id']}.png"),
    )


def load_champion_list(data_dir: Optional[Path] = None) -> tuple[str, Optional[str], list[Champion]]:
    """Load the champion list snapshot.

    Args:
        data_dir: Directory holding the snapshot files.

    Returns:
        (version, fetched_at, champions). An unreadable snapshot yields
        an empty champion list.
    """
    data = read_snapshot((data_dir or DATA_DIR) / CHAMPIONS_FILENAME)
    if not isinstance(data, dict):
        return "", None, []

    champions = []
    for champ_data in data.get("champions", []):
        try:
            champions.append(_parse_champion(champ_data))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed champion entry %r: %s", champ_data, e)
    champions.sort(key=lambda c: c.name)
    return str(data.get("version", "")), data.get("fetchedAt"), champions


def load_class_map(data_dir: Optional[Path] = None) -> dict[str, tuple[ChampionClass, ...]]:
    """Load the champion id -> class tags mapping.

    Unknown tags are dropped. Champions left with no valid tag are omitted,
    so the lookup falls back for them.
    """
    data = read_snapshot((data_dir or DATA_DIR) / CLASSES_FILENAME)
    if not isinstance(data, dict):
        return {}

    class_map = {}
    for champion_id, tags in data.items():
        if not isinstance(tags, list):
            continue
        valid = [cls for cls in (ChampionClass.parse(t) for t in tags if isinstance(t, str)) if cls]
        if len(valid) > 2:
            logger.warning("Champion %s has %d classes, keeping the first two", champion_id, len(valid))
            valid = valid[:2]
        if valid:
            class_map[champion_id] = tuple(valid)
    return class_map
