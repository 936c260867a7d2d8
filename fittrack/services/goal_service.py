"""
Goal Service

Store operations for goals. Goals are the only resource with an update path,
and it only touches `current` and `is_completed`.
"""

import logging
from typing import Any, Dict, List

from fittrack.extensions import db
from fittrack.models.goal import Goal
from fittrack.services.ownership import get_owned_record
from fittrack.utils.enums import GoalType

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("current", "is_completed")


def create_goal(user_id: int, data: Dict[str, Any]) -> Goal:
    goal = Goal(
        user_id=user_id,
        goal_type=GoalType(data["goal_type"]),
        target=data["target"],
        current=data.get("current") or 0,
        end_date=data["end_date"],
    )
    if data.get("start_date") is not None:
        goal.start_date = data["start_date"]

    db.session.add(goal)
    db.session.commit()
    logger.info("Goal %s created for user %s", goal.id, user_id)
    return goal


def list_goals(user_id: int) -> List[Goal]:
    return (
        Goal.query
        .filter_by(user_id=user_id)
        .order_by(Goal.end_date.asc(), Goal.id.asc())
        .all()
    )


def get_goal(user_id: int, goal_id: Any) -> Goal:
    return get_owned_record(Goal, user_id, goal_id, "Goal")


def update_goal(user_id: int, goal_id: Any, changes: Dict[str, Any]) -> Goal:
    """Apply only the fields present in `changes`; absent ones stay as they are."""
    goal = get_goal(user_id, goal_id)
    for field in UPDATABLE_FIELDS:
        if field in changes:
            setattr(goal, field, changes[field])
    db.session.commit()
    return goal


def delete_goal(user_id: int, goal_id: Any) -> None:
    goal = get_goal(user_id, goal_id)
    db.session.delete(goal)
    db.session.commit()
    logger.info("Goal %s removed by user %s", goal_id, user_id)


def open_goals(user_id: int) -> List[Goal]:
    return (
        Goal.query
        .filter_by(user_id=user_id, is_completed=False)
        .order_by(Goal.id)
        .all()
    )
