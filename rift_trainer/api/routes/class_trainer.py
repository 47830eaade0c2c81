"""
Class trainer API routes.
"""

from fastapi import APIRouter, HTTPException, Depends

from rift_trainer.core.session import EmptyQueueError, InvalidGuessError, SessionStateError
from rift_trainer.data.models import ChampionClass

from ..schemas.class_trainer import (
    ClassSessionSchema,
    CreateClassSessionRequest,
    GuessRequest,
    GuessResponse,
)
from ..schemas.common import BaseResponse
from ..services.class_trainer_service import ClassTrainerService
from ..services.common import SessionNotFoundError
from ..dependencies import get_class_trainer_service

router = APIRouter()


@router.post("/sessions", response_model=ClassSessionSchema)
async def create_session(
    request: CreateClassSessionRequest,
    service: ClassTrainerService = Depends(get_class_trainer_service),
):
    """Create a new class trainer session."""
    return service.create_session(request.filters)


@router.get("/sessions/{session_id}", response_model=ClassSessionSchema)
async def get_session(
    session_id: str,
    service: ClassTrainerService = Depends(get_class_trainer_service),
):
    """Get session state."""
    session = service.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.post("/sessions/{session_id}/start", response_model=ClassSessionSchema)
async def start_session(
    session_id: str,
    service: ClassTrainerService = Depends(get_class_trainer_service),
):
    """Start (or start over) with a freshly shuffled queue."""
    try:
        return service.start(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except EmptyQueueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/sessions/{session_id}/select/{cls}", response_model=ClassSessionSchema)
async def toggle_selection(
    session_id: str,
    cls: ChampionClass,
    service: ClassTrainerService = Depends(get_class_trainer_service),
):
    """Toggle a class in the pending guess."""
    try:
        return service.toggle_selection(session_id, cls)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/sessions/{session_id}/discard/{cls}", response_model=ClassSessionSchema)
async def toggle_discard(
    session_id: str,
    cls: ChampionClass,
    service: ClassTrainerService = Depends(get_class_trainer_service),
):
    """Toggle a class as ruled out for the current champion."""
    try:
        return service.toggle_discard(session_id, cls)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/sessions/{session_id}/guess", response_model=GuessResponse)
async def submit_guess(
    session_id: str,
    request: GuessRequest,
    service: ClassTrainerService = Depends(get_class_trainer_service),
):
    """Submit a class guess for the current champion."""
    try:
        return service.submit_guess(session_id, request.classes)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except InvalidGuessError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/sessions/{session_id}/finish", response_model=ClassSessionSchema)
async def finish_session(
    session_id: str,
    service: ClassTrainerService = Depends(get_class_trainer_service),
):
    """End the session early, keeping the score."""
    try:
        return service.finish(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/sessions/{session_id}/restart", response_model=ClassSessionSchema)
async def restart_session(
    session_id: str,
    service: ClassTrainerService = Depends(get_class_trainer_service),
):
    """Return to the start screen, discarding session state."""
    try:
        return service.restart(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")


@router.delete("/sessions/{session_id}", response_model=BaseResponse)
async def delete_session(
    session_id: str,
    service: ClassTrainerService = Depends(get_class_trainer_service),
):
    """Delete session."""
    service.delete_session(session_id)
    return BaseResponse(message="Session deleted")
