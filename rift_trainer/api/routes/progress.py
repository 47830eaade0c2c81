"""
Review history and mastery API routes.
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional, List

from rift_trainer.data.models import ChampionClass

from ..schemas.common import BaseResponse
from ..schemas.progress import ChampionProgressSchema, DirectoryResponse, HistoryResponse
from ..services.progress_service import ProgressService
from ..dependencies import get_progress_service

router = APIRouter()


@router.get("/history", response_model=HistoryResponse)
async def get_history(
    limit: Optional[int] = Query(default=None, ge=1),
    service: ProgressService = Depends(get_progress_service),
):
    """Review history, newest first."""
    return service.get_history(limit)


@router.delete("/history", response_model=BaseResponse)
async def clear_history(
    confirm: bool = False,
    service: ProgressService = Depends(get_progress_service),
):
    """Delete all review records. Requires ``confirm=true``."""
    try:
        service.clear_history(confirm)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return BaseResponse(message="History cleared")


@router.get("/directory", response_model=DirectoryResponse)
async def get_directory(
    search: str = "",
    classes: Optional[List[ChampionClass]] = Query(default=None),
    service: ProgressService = Depends(get_progress_service),
):
    """Champion directory with mastery, filtered by name and class."""
    return service.get_directory(search=search, classes=classes)


@router.get("/champions/{champion_id}", response_model=ChampionProgressSchema)
async def get_champion_progress(
    champion_id: str,
    service: ProgressService = Depends(get_progress_service),
):
    """Overall and per-ability mastery for one champion."""
    progress = service.get_champion_progress(champion_id)
    if progress is None:
        raise HTTPException(status_code=404, detail="Champion not found")
    return progress
