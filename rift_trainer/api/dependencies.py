"""
Dependency injection for API services.
"""

from functools import lru_cache
from pathlib import Path

from rift_trainer.core.history_store import HistoryStore
from rift_trainer.core.storage import LocalStorage
from rift_trainer.data.catalog import Catalog, load_catalog

from .config import settings
from .services.class_trainer_service import ClassTrainerService
from .services.skills_trainer_service import SkillsTrainerService
from .services.progress_service import ProgressService


@lru_cache()
def get_catalog() -> Catalog:
    """Get the catalog snapshot."""
    return load_catalog(settings.DATA_DIR)


@lru_cache()
def get_history_store() -> HistoryStore:
    """Get the review history store."""
    path = settings.STORAGE_PATH
    storage = LocalStorage(path if path == ":memory:" else Path(path))
    return HistoryStore(storage, key=settings.HISTORY_KEY)


@lru_cache()
def get_class_trainer_service() -> ClassTrainerService:
    """Get ClassTrainerService singleton."""
    return ClassTrainerService(
        get_catalog(),
        history_limit=settings.HISTORY_DISPLAY_LIMIT,
        max_sessions=settings.MAX_SESSIONS,
    )


@lru_cache()
def get_skills_trainer_service() -> SkillsTrainerService:
    """Get SkillsTrainerService singleton."""
    return SkillsTrainerService(
        get_catalog(),
        get_history_store(),
        max_sessions=settings.MAX_SESSIONS,
    )


@lru_cache()
def get_progress_service() -> ProgressService:
    """Get ProgressService singleton."""
    return ProgressService(get_catalog(), get_history_store())
