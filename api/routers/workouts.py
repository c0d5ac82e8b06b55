"""
Workouts router for logging, browsing and deleting workouts.

This router contains endpoints for:
- GET /workouts - Workout history, newest first
- POST /workouts - Log a workout from a draft
- POST /workouts/preview - Total load a draft would store
- GET /workouts/{workout_id} - Get a single workout
- DELETE /workouts/{workout_id} - Delete a workout with its exercises and sets

Store failures are surfaced as 502 responses; nothing is retried.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from api.deps import (
    get_delete_workout_use_case,
    get_log_workout_use_case,
    get_workout_repo,
)
from api.schemas import (
    DeleteFailureDetail,
    DraftPreviewResponse,
    WorkoutListResponse,
    WorkoutResponse,
)
from application.exceptions import (
    WorkoutCreationError,
    WorkoutDeletionError,
    WorkoutNotFoundError,
    WorkoutStoreError,
)
from application.ports import WorkoutRepository
from application.use_cases import DeleteWorkoutUseCase, LogWorkoutUseCase
from domain.models import WorkoutDraft

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


# =============================================================================
# History
# =============================================================================


@router.get("", response_model=WorkoutListResponse)
def list_workouts_endpoint(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """Get all workouts with exercises and sets, newest date first."""
    try:
        workouts = workout_repo.list_workouts()
    except WorkoutStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return WorkoutListResponse(
        workouts=[WorkoutResponse.from_record(w) for w in workouts],
        count=len(workouts),
    )


@router.get("/{workout_id}", response_model=WorkoutResponse)
def get_workout_endpoint(
    workout_id: str,
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """Get a single workout by ID."""
    try:
        workout = workout_repo.get_workout(workout_id)
    except WorkoutStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))

    if workout is None:
        raise HTTPException(status_code=404, detail=f"Workout {workout_id} not found")
    return WorkoutResponse.from_record(workout)


# =============================================================================
# Logging
# =============================================================================


@router.post("/preview", response_model=DraftPreviewResponse)
def preview_workout_endpoint(draft: WorkoutDraft):
    """Return the total load and counts that logging this draft would store."""
    return DraftPreviewResponse.from_draft(draft)


@router.post("", response_model=WorkoutResponse, status_code=201)
def log_workout_endpoint(
    draft: WorkoutDraft,
    use_case: LogWorkoutUseCase = Depends(get_log_workout_use_case),
):
    """
    Log a workout from a draft.

    Blank exercises and sets with zero reps or weight are dropped. A draft
    with nothing left to store is rejected with 422.
    """
    try:
        result = use_case.execute(draft)
    except WorkoutCreationError as e:
        logger.error(f"Logging workout failed: {e}")
        raise HTTPException(
            status_code=502,
            detail={
                "message": str(e),
                "workout_id": e.workout_id,
                "created_exercise_ids": e.created_exercise_ids,
            },
        )

    if not result.success:
        raise HTTPException(
            status_code=422,
            detail={
                "message": result.error,
                "validation_errors": result.validation_errors,
            },
        )
    return WorkoutResponse.from_record(result.workout)


# =============================================================================
# Deletion
# =============================================================================


@router.delete("/{workout_id}", status_code=204)
def delete_workout_endpoint(
    workout_id: str,
    use_case: DeleteWorkoutUseCase = Depends(get_delete_workout_use_case),
):
    """Delete a workout: its sets first, then its exercises, then the workout."""
    try:
        use_case.execute(workout_id)
    except WorkoutNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except WorkoutDeletionError as e:
        detail = DeleteFailureDetail(
            message=str(e),
            workout_id=e.workout_id,
            failed_stage=e.failed_stage.value,
            completed_stages=[s.value for s in e.completed_stages],
        )
        raise HTTPException(status_code=502, detail=detail.model_dump())
    return Response(status_code=204)
