"""
Workout Schemas for the workouts API.

Schemas for:
- WorkoutResponse: a stored workout with nested exercises and sets
- WorkoutListResponse: response for GET /workouts
- DraftPreviewResponse: live total for a draft (POST /workouts/preview)
- DeleteFailureDetail: body of a 502 after a partial delete
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models import DayType, WorkoutDraft, WorkoutRecord


class SetResponse(BaseModel):
    """A stored set with its volume."""
    id: str
    reps: int
    weight_kg: float
    volume_kg: float


class ExerciseResponse(BaseModel):
    """A stored exercise with its sets."""
    id: str
    name: str
    volume_kg: float
    sets: List[SetResponse] = []


class WorkoutResponse(BaseModel):
    """A stored workout as shown in the history list."""
    id: str
    date: date
    day_type: DayType
    total_kg: float
    exercises: List[ExerciseResponse] = []
    created_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, workout: WorkoutRecord) -> "WorkoutResponse":
        return cls(
            id=workout.id,
            date=workout.date,
            day_type=workout.day_type,
            total_kg=workout.total_kg,
            created_at=workout.created_at,
            exercises=[
                ExerciseResponse(
                    id=e.id,
                    name=e.name,
                    volume_kg=e.volume_kg,
                    sets=[
                        SetResponse(
                            id=s.id,
                            reps=s.reps,
                            weight_kg=s.weight_kg,
                            volume_kg=s.volume_kg,
                        )
                        for s in e.sets
                    ],
                )
                for e in workout.exercises
            ],
        )


class WorkoutListResponse(BaseModel):
    """Response for GET /workouts."""
    workouts: List[WorkoutResponse] = []
    count: int = 0


class DraftPreviewResponse(BaseModel):
    """What logging a draft would store."""
    total_kg: float = Field(..., description="Total load over counted sets")
    exercise_count: int = Field(..., description="Exercises that will be stored")
    set_count: int = Field(..., description="Sets that will be stored")

    @classmethod
    def from_draft(cls, draft: WorkoutDraft) -> "DraftPreviewResponse":
        exercises = draft.persistable_exercises()
        return cls(
            total_kg=draft.total_kg,
            exercise_count=len(exercises),
            set_count=sum(len(e.sets) for e in exercises),
        )


class DeleteFailureDetail(BaseModel):
    """Detail returned when a delete stops part-way."""
    message: str
    workout_id: str
    failed_stage: str
    completed_stages: List[str] = []
