"""API services."""

from .class_trainer_service import ClassTrainerService
from .skills_trainer_service import SkillsTrainerService
from .progress_service import ProgressService
from .common import SessionNotFoundError, SessionRegistry

__all__ = [
    "ClassTrainerService",
    "SkillsTrainerService",
    "ProgressService",
    "SessionNotFoundError",
    "SessionRegistry",
]
