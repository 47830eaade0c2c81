"""Champion trainer constants."""

from typing import Final

from rift_trainer.data.models import AbilitySlot, ChampionClass, ClassGroup

# =============================================================================
# CLASS TAXONOMY
# =============================================================================
# Riot's class framework: 7 parent categories, 13 subclasses.
CLASS_GROUPS: Final[tuple[ClassGroup, ...]] = (
    ClassGroup(parent="Controller", subclasses=[ChampionClass.ENCHANTER, ChampionClass.CATCHER]),
    ClassGroup(parent="Fighter", subclasses=[ChampionClass.JUGGERNAUT, ChampionClass.DIVER]),
    ClassGroup(
        parent="Mage",
        subclasses=[ChampionClass.BURST, ChampionClass.BATTLEMAGE, ChampionClass.ARTILLERY],
    ),
    ClassGroup(parent="Marksman", subclasses=[ChampionClass.MARKSMAN]),
    ClassGroup(parent="Slayer", subclasses=[ChampionClass.ASSASSIN, ChampionClass.SKIRMISHER]),
    ClassGroup(parent="Tank", subclasses=[ChampionClass.VANGUARD, ChampionClass.WARDEN]),
    ClassGroup(parent="Specialist", subclasses=[ChampionClass.SPECIALIST]),
)

ALL_CLASSES: Final[frozenset[ChampionClass]] = frozenset(ChampionClass)

# Champions missing from the class map are treated as Specialists
DEFAULT_CLASS: Final[ChampionClass] = ChampionClass.SPECIALIST

# A champion has at most two classes, so a guess holds at most two
MAX_SELECTED_CLASSES: Final[int] = 2

# =============================================================================
# ABILITIES
# =============================================================================
ABILITY_SLOTS: Final[tuple[AbilitySlot, ...]] = tuple(AbilitySlot)
ALL_SLOTS: Final[frozenset[AbilitySlot]] = frozenset(AbilitySlot)

# =============================================================================
# SELF-RATINGS
# =============================================================================
RATING_POINTS: Final[dict[str, int]] = {
    "nailed": 2,
    "partial": 1,
    "no_idea": 0,
}
MAX_RATING_POINTS: Final[int] = 2

RATING_LABELS: Final[dict[str, str]] = {
    "nailed": "Nailed it",
    "partial": "Partially",
    "no_idea": "No idea",
}

# Mastery badge thresholds (percent)
MASTERY_HIGH: Final[int] = 80
MASTERY_MEDIUM: Final[int] = 50

# Ratings shown per ability on the champion progress page
RECENT_RATINGS_PER_ABILITY: Final[int] = 5

# =============================================================================
# STORAGE & ASSETS
# =============================================================================
HISTORY_STORAGE_KEY: Final[str] = "skills-trainer-history"

DDRAGON_CDN: Final[str] = "https://ddragon.leagueoflegends.com/cdn"
CDRAGON_ABILITY_ICON: Final[str] = (
    "https://cdn.communitydragon.org/latest/champion/{champion_id}/ability-icon/{slot}"
)


def champion_image_url(version: str, image: str) -> str:
    """Portrait URL for a champion image file."""
    return f"{DDRAGON_CDN}/{version}/img/champion/{image}"


def ability_image_url(version: str, slot: AbilitySlot, image: str) -> str:
    """Icon URL for a spell or passive image file."""
    folder = "passive" if slot == AbilitySlot.P else "spell"
    return f"{DDRAGON_CDN}/{version}/img/{folder}/{image}"


def fallback_ability_icon(champion_id: str, slot: AbilitySlot) -> str:
    """CommunityDragon icon URL used when the snapshot has no icon."""
    return CDRAGON_ABILITY_ICON.format(champion_id=champion_id, slot=slot.value.lower())
