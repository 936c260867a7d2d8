"""
Exercise Service

Store operations for exercises, always scoped to the owning user.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fittrack.extensions import db
from fittrack.models.exercise import Exercise
from fittrack.services.ownership import get_owned_record
from fittrack.services.summary_service import start_of_day
from fittrack.utils.enums import ExerciseType

logger = logging.getLogger(__name__)


def create_exercise(user_id: int, data: Dict[str, Any]) -> Exercise:
    exercise = Exercise(
        user_id=user_id,
        name=data["name"],
        duration=data["duration"],
        calories_burned=data["calories_burned"],
        exercise_type=ExerciseType(data["exercise_type"]),
    )
    if data.get("date") is not None:
        exercise.date = data["date"]

    db.session.add(exercise)
    db.session.commit()
    logger.info("Exercise %s created for user %s", exercise.id, user_id)
    return exercise


def list_exercises(user_id: int) -> List[Exercise]:
    return (
        Exercise.query
        .filter_by(user_id=user_id)
        .order_by(Exercise.date.desc(), Exercise.id.desc())
        .all()
    )


def get_exercise(user_id: int, exercise_id: Any) -> Exercise:
    return get_owned_record(Exercise, user_id, exercise_id, "Exercise")


def delete_exercise(user_id: int, exercise_id: Any) -> None:
    exercise = get_exercise(user_id, exercise_id)
    db.session.delete(exercise)
    db.session.commit()
    logger.info("Exercise %s removed by user %s", exercise_id, user_id)


def todays_exercises(user_id: int, now: Optional[datetime] = None) -> List[Exercise]:
    midnight = start_of_day(now or datetime.now())
    return (
        Exercise.query
        .filter(Exercise.user_id == user_id, Exercise.date >= midnight)
        .order_by(Exercise.id)
        .all()
    )
