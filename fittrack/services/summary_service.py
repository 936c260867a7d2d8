"""
Summary Service

Per-user aggregates over already-fetched records:
- today's nutrition totals with meals grouped by meal type
- today's exercise totals with exercises grouped by exercise type
- progress and days left for open goals

Nothing here touches the database, so callers decide what "today" is.
"""

import math
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List

from fittrack.utils.enums import MealType, ExerciseType

ONE_DAY_SECONDS = timedelta(days=1).total_seconds()


def start_of_day(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def _category_buckets(enum_cls) -> Dict[str, List[Dict[str, Any]]]:
    return {e.value: [] for e in enum_cls}


def summarize_meals(meals: Iterable[Any]) -> Dict[str, Any]:
    """
    Reduce today's meals into nutrition totals.

    Every meal type is present in `mealsByType`, even with no meals;
    list order follows the order of `meals`.
    """
    summary = {
        "totalCalories": 0,
        "totalProtein": 0,
        "totalCarbs": 0,
        "totalFats": 0,
        "mealsByType": _category_buckets(MealType),
    }
    for meal in meals:
        summary["totalCalories"] += meal.calories
        summary["totalProtein"] += meal.protein
        summary["totalCarbs"] += meal.carbs
        summary["totalFats"] += meal.fats
        summary["mealsByType"][MealType(meal.meal_type).value].append(meal.to_dict())
    return summary


def summarize_exercises(exercises: Iterable[Any]) -> Dict[str, Any]:
    summary = {
        "totalDuration": 0,
        "totalCaloriesBurned": 0,
        "exercisesByType": _category_buckets(ExerciseType),
    }
    for exercise in exercises:
        summary["totalDuration"] += exercise.duration
        summary["totalCaloriesBurned"] += exercise.calories_burned
        summary["exercisesByType"][ExerciseType(exercise.exercise_type).value].append(exercise.to_dict())
    return summary


def progress_percentage(current: float, target: float) -> float:
    """current / target * 100 without clamping; a zero target gives inf or nan."""
    if target == 0:
        if current == 0 or math.isnan(current):
            return math.nan
        return math.copysign(math.inf, current) * math.copysign(1.0, target)
    return current / target * 100


def days_left(end_date: datetime, now: datetime) -> int:
    """Whole days until `end_date`, rounded up; negative once overdue."""
    # aware local times so a DST shift counts as elapsed hours, not wall-clock ones
    elapsed = end_date.astimezone() - now.astimezone()
    return math.ceil(elapsed.total_seconds() / ONE_DAY_SECONDS)


def goal_progress(goals: Iterable[Any], now: datetime) -> List[Dict[str, Any]]:
    return [
        {
            "id": goal.id,
            "goalType": goal.goal_type.value if hasattr(goal.goal_type, "value") else goal.goal_type,
            "target": goal.target,
            "current": goal.current,
            "progress": progress_percentage(goal.current, goal.target),
            "daysLeft": days_left(goal.end_date, now),
        }
        for goal in goals
    ]
