# Data Loaders
from .champion_loader import (
    DATA_DIR,
    load_champion_list,
    load_class_map,
    read_snapshot,
)
from .spell_loader import (
    format_rank_values,
    load_spell_data,
    parse_champion_abilities,
)

__all__ = [
    "DATA_DIR",
    # Champion loaders
    "load_champion_list",
    "load_class_map",
    "read_snapshot",
    # Spell loaders
    "format_rank_values",
    "load_spell_data",
    "parse_champion_abilities",
]
