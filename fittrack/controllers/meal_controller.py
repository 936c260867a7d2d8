from flask import request
from fittrack.schemas.meal_schema import CreateMealSchema
from fittrack.services.meal_service import create_meal, list_meals, get_meal, delete_meal, todays_meals
from fittrack.services.summary_service import summarize_meals
from fittrack.utils.errors import ApiError
from fittrack.utils.http import ok, error, json_body, validate_schema, server_error

def create_meal_handler():
    """
    Body Parameters:
        - name, calories, mealType (required)
        - protein, carbs, fats (optional, default 0)
        - date (optional ISO datetime, default now)
    """
    data, errors = validate_schema(CreateMealSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid meal data", 400, details=errors)

    try:
        meal = create_meal(request.user_id, data)
        return ok(meal.to_dict())
    except Exception:
        return server_error("creating meal")

def list_meals_handler():
    try:
        return ok([m.to_dict() for m in list_meals(request.user_id)])
    except Exception:
        return server_error("listing meals")

def get_meal_handler(id):
    try:
        return ok(get_meal(request.user_id, id).to_dict())
    except ApiError as e:
        return error(e.code, e.message, e.status)
    except Exception:
        return server_error("fetching meal")

def delete_meal_handler(id):
    try:
        delete_meal(request.user_id, id)
        return ok({"message": "Meal removed"})
    except ApiError as e:
        return error(e.code, e.message, e.status)
    except Exception:
        return server_error("deleting meal")

def today_summary_handler():
    try:
        return ok(summarize_meals(todays_meals(request.user_id)))
    except Exception:
        return server_error("building meal summary")
