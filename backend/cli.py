import json
import argparse
import sys
from datetime import datetime
from typing import List, Optional

from pydantic import ValidationError
from supabase import create_client

from application.exceptions import WorkoutStoreError
from application.ports import WorkoutRepository
from application.use_cases import (
    DeleteWorkoutUseCase,
    GetWorkoutStatsUseCase,
    LogWorkoutUseCase,
)
from backend.logging_config import configure_logging
from backend.settings import get_settings
from domain.models import WorkoutDraft, WorkoutRecord
from domain.services import WorkoutStats
from infrastructure import SupabaseWorkoutRepository


def format_workout(workout: WorkoutRecord) -> str:
    lines = [
        f"{workout.date:%A, %B} {workout.date.day}, {workout.date.year}  {workout.day_type.value.upper()}"
        f"  {workout.total_kg:g} kg  [{workout.id}]"
    ]
    for exercise in workout.exercises:
        lines.append(f"  {exercise.name}")
        for i, s in enumerate(exercise.sets, start=1):
            lines.append(f"    Set {i}: {s.reps} x {s.weight_kg:g} kg ({s.volume_kg:g} kg)")
    return "\n".join(lines)


def format_stats(stats: Optional[WorkoutStats]) -> str:
    if stats is None:
        return "No stats available. Add some workouts!"

    sign = "+" if stats.trend_percent >= 0 else ""
    lines = [
        "Total Stats",
        f"  Total Workouts:   {stats.total_workouts}",
        f"  Total KG Lifted:  {stats.total_kg:,.0f} kg",
        f"  Avg KG/Workout:   {round(stats.avg_kg_per_workout)} kg",
        "This Week",
        f"  Workouts:         {stats.this_week_workouts}",
        f"  KG Lifted:        {stats.this_week_kg:,.0f} kg",
        "Progress",
        f"  Last 7 days:      {stats.last_7_days_kg:,.0f} kg",
        f"  Previous 7 days:  {stats.previous_7_days_kg:,.0f} kg",
        f"  Change:           {sign}{round(stats.trend_percent)}%",
        "Workout Split Breakdown",
    ]
    for day_type, count in stats.day_type_breakdown.items():
        lines.append(f"  {day_type.value.capitalize():<8} {count} workouts")
    return "\n".join(lines)


def build_repository() -> WorkoutRepository:
    settings = get_settings()
    if not settings.has_database:
        raise RuntimeError("Supabase credentials not configured (SUPABASE_URL / SUPABASE_*_KEY)")
    return SupabaseWorkoutRepository(create_client(settings.supabase_url, settings.supabase_key))


def run(args: argparse.Namespace, repo: WorkoutRepository) -> int:
    if args.command == "list":
        workouts = repo.list_workouts()
        if not workouts:
            print("No workouts found. Add your first workout!")
        for workout in workouts:
            print(format_workout(workout))
        return 0

    if args.command == "stats":
        stats = GetWorkoutStatsUseCase(workout_repo=repo).execute(now=args.now)
        print(format_stats(stats))
        return 0

    if args.command == "delete":
        DeleteWorkoutUseCase(workout_repo=repo).execute(args.workout_id)
        print(f"Deleted workout {args.workout_id}")
        return 0

    if args.command == "add":
        with open(args.input, "r") as f:
            draft = WorkoutDraft.model_validate(json.load(f))
        result = LogWorkoutUseCase(workout_repo=repo).execute(draft)
        if not result.success:
            for error in result.validation_errors:
                print(f"Error: {error}", file=sys.stderr)
            return 1
        print(format_workout(result.workout))
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Log strength workouts and view statistics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List workouts, newest first")

    stats_parser = subparsers.add_parser("stats", help="Show summary statistics")
    stats_parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="Reference time in ISO format (default: current time)",
    )

    delete_parser = subparsers.add_parser("delete", help="Delete a workout with its exercises and sets")
    delete_parser.add_argument("workout_id", help="Workout ID")

    add_parser = subparsers.add_parser("add", help="Log a workout from a JSON draft file")
    add_parser.add_argument("input", help="Input JSON file path")

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None, repo: Optional[WorkoutRepository] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")

    try:
        return run(args, repo if repo is not None else build_repository())
    except FileNotFoundError:
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Error: Invalid workout draft: {e}", file=sys.stderr)
        return 1
    except WorkoutStoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
