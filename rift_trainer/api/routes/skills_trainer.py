"""
Skills trainer API routes.
"""

from fastapi import APIRouter, HTTPException, Depends

from rift_trainer.core.session import EmptyQueueError, SessionStateError

from ..schemas.common import BaseResponse
from ..schemas.skills_trainer import (
    CreateSkillsSessionRequest,
    RateRequest,
    RateResponse,
    SkillsSessionSchema,
)
from ..services.common import SessionNotFoundError
from ..services.skills_trainer_service import SkillsTrainerService
from ..dependencies import get_skills_trainer_service

router = APIRouter()


@router.post("/sessions", response_model=SkillsSessionSchema)
async def create_session(
    request: CreateSkillsSessionRequest,
    service: SkillsTrainerService = Depends(get_skills_trainer_service),
):
    """Create a new skills trainer session."""
    return service.create_session(request.filters, request.order)


@router.get("/sessions/{session_id}", response_model=SkillsSessionSchema)
async def get_session(
    session_id: str,
    service: SkillsTrainerService = Depends(get_skills_trainer_service),
):
    """Get session state."""
    session = service.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.post("/sessions/{session_id}/start", response_model=SkillsSessionSchema)
async def start_session(
    session_id: str,
    service: SkillsTrainerService = Depends(get_skills_trainer_service),
):
    """Build the ability queue and show the first icon."""
    try:
        return service.start(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except EmptyQueueError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/sessions/{session_id}/reveal", response_model=SkillsSessionSchema)
async def reveal_ability(
    session_id: str,
    service: SkillsTrainerService = Depends(get_skills_trainer_service),
):
    """Reveal name and description of the current ability."""
    try:
        return service.reveal(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/sessions/{session_id}/rate", response_model=RateResponse)
async def rate_ability(
    session_id: str,
    request: RateRequest,
    service: SkillsTrainerService = Depends(get_skills_trainer_service),
):
    """Record a self-rating and move to the next ability."""
    try:
        return service.rate(session_id, request.rating)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/sessions/{session_id}/finish", response_model=SkillsSessionSchema)
async def finish_session(
    session_id: str,
    service: SkillsTrainerService = Depends(get_skills_trainer_service),
):
    """End the session early. Ratings already given stay in history."""
    try:
        return service.finish(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/sessions/{session_id}/restart", response_model=SkillsSessionSchema)
async def restart_session(
    session_id: str,
    service: SkillsTrainerService = Depends(get_skills_trainer_service),
):
    """Return to the start screen."""
    try:
        return service.restart(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")


@router.delete("/sessions/{session_id}", response_model=BaseResponse)
async def delete_session(
    session_id: str,
    service: SkillsTrainerService = Depends(get_skills_trainer_service),
):
    """Delete session."""
    service.delete_session(session_id)
    return BaseResponse(message="Session deleted")
