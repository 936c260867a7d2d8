"""
Meal Service

Store operations for meals, always scoped to the owning user.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fittrack.extensions import db
from fittrack.models.meal import Meal
from fittrack.services.ownership import get_owned_record
from fittrack.services.summary_service import start_of_day
from fittrack.utils.enums import MealType

logger = logging.getLogger(__name__)


def create_meal(user_id: int, data: Dict[str, Any]) -> Meal:
    """
    Persist a new meal for a user.

    Args:
        user_id: Owner of the meal
        data: Validated fields from CreateMealSchema

    Returns:
        The committed Meal
    """
    meal = Meal(
        user_id=user_id,
        name=data["name"],
        calories=data["calories"],
        protein=data.get("protein") or 0,
        carbs=data.get("carbs") or 0,
        fats=data.get("fats") or 0,
        meal_type=MealType(data["meal_type"]),
    )
    if data.get("date") is not None:
        meal.date = data["date"]

    db.session.add(meal)
    db.session.commit()
    logger.info("Meal %s created for user %s", meal.id, user_id)
    return meal


def list_meals(user_id: int) -> List[Meal]:
    return (
        Meal.query
        .filter_by(user_id=user_id)
        .order_by(Meal.date.desc(), Meal.id.desc())
        .all()
    )


def get_meal(user_id: int, meal_id: Any) -> Meal:
    return get_owned_record(Meal, user_id, meal_id, "Meal")


def delete_meal(user_id: int, meal_id: Any) -> None:
    meal = get_meal(user_id, meal_id)
    db.session.delete(meal)
    db.session.commit()
    logger.info("Meal %s removed by user %s", meal_id, user_id)


def todays_meals(user_id: int, now: Optional[datetime] = None) -> List[Meal]:
    """Meals logged since local midnight, in insertion order."""
    midnight = start_of_day(now or datetime.now())
    return (
        Meal.query
        .filter(Meal.user_id == user_id, Meal.date >= midnight)
        .order_by(Meal.id)
        .all()
    )
