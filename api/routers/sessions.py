"""
Sessions router.

This router provides:
- Resolution of the session shown for a calendar date
- Saving or skipping that session
- Copying the previous row of an exercise into the next one
"""

import logging
from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import (
    get_commit_session_use_case,
    get_current_user,
    get_resolve_session_use_case,
)
from application.exceptions import PersistenceError
from application.use_cases import (
    CommitSessionResult,
    CommitSessionUseCase,
    ResolveSessionUseCase,
)
from backend.core.progression_rules import copy_previous_set
from domain.models import ExercisePlan, ResolvedSession, SessionState, SetEntry, WorkoutSet

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sessions",
    tags=["Sessions"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class SessionResponse(BaseModel):
    """Response model for a resolved session."""
    workout_date: date
    weekday: int
    state: SessionState
    session_label: Optional[str] = None
    program_day_id: Optional[str] = None
    log_id: Optional[str] = None
    is_skipped: bool = False
    has_program: bool = True
    exercises: List[ExercisePlan] = Field(default_factory=list)
    initial_sets: Dict[str, List[SetEntry]] = Field(default_factory=dict)

    @classmethod
    def from_resolved(cls, session: ResolvedSession) -> "SessionResponse":
        return cls(
            workout_date=session.workout_date,
            weekday=session.weekday,
            state=session.state,
            session_label=session.session_label,
            program_day_id=session.scheduled_day.id if session.scheduled_day else None,
            log_id=session.log.id if session.log else None,
            is_skipped=session.is_skipped,
            has_program=session.has_program,
            exercises=session.exercises,
            initial_sets=session.initial_sets,
        )


class CommitSessionRequest(BaseModel):
    """Request model for saving a session."""
    entries: Dict[str, List[SetEntry]] = Field(
        default_factory=dict,
        description="Entered rows keyed by exercise ID",
    )
    skipped: bool = Field(default=False, description="Record the session as skipped")


class CopyPreviousRowRequest(BaseModel):
    """Request model for copying a row onto the next one."""
    entries: List[SetEntry] = Field(..., description="Rows of one exercise, in order")
    index: int = Field(..., ge=0, description="Row that receives the copy")


class CommitSessionResponse(BaseModel):
    """Response model for a saved session."""
    success: bool
    log_id: Optional[str] = None
    is_skipped: bool = False
    saved_sets: List[WorkoutSet] = Field(default_factory=list)
    weight_updates: Dict[str, float] = Field(default_factory=dict)

    @classmethod
    def from_result(cls, result: CommitSessionResult) -> "CommitSessionResponse":
        return cls(
            success=result.success,
            log_id=result.log.id if result.log else None,
            is_skipped=result.is_skipped,
            saved_sets=result.saved_sets,
            weight_updates=result.weight_updates,
        )


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/rows/copy-previous", response_model=List[SetEntry])
def copy_previous_row(
    request: CopyPreviousRowRequest,
    user_id: str = Depends(get_current_user),
) -> List[SetEntry]:
    """
    Copy weight and reps of the row before ``index`` into row ``index``.

    The AMRAP flag of the target row is kept. Index 0 or an index past the
    last row returns the rows unchanged.
    """
    return copy_previous_set(request.entries, request.index)


@router.get("/{workout_date}", response_model=SessionResponse)
def get_session(
    workout_date: date,
    user_id: str = Depends(get_current_user),
    use_case: ResolveSessionUseCase = Depends(get_resolve_session_use_case),
) -> SessionResponse:
    """
    Resolve the session of a date.

    Returns the rest-day state, the saved log, or pre-filled rows computed
    from the previous completed session of the same program day.
    """
    try:
        session = use_case.execute(user_id, workout_date)
    except PersistenceError as e:
        raise HTTPException(status_code=502, detail=e.message)
    return SessionResponse.from_resolved(session)


@router.post("/{workout_date}", response_model=CommitSessionResponse)
def commit_session(
    workout_date: date,
    request: CommitSessionRequest,
    user_id: str = Depends(get_current_user),
    use_case: CommitSessionUseCase = Depends(get_commit_session_use_case),
) -> CommitSessionResponse:
    """
    Save (or skip) the session of a date.

    Rest days are rejected with 409. A failed step returns 502 naming the
    step; steps already applied are not rolled back.
    """
    result = use_case.execute_for_date(
        user_id,
        workout_date,
        request.entries,
        skipped=request.skipped,
    )

    if result.validation_errors:
        raise HTTPException(
            status_code=409,
            detail={"message": result.error, "errors": result.validation_errors},
        )
    if not result.success:
        raise HTTPException(
            status_code=502,
            detail={"message": result.error, "failed_step": result.failed_step},
        )
    return CommitSessionResponse.from_result(result)
