from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.meal_controller import (
    create_meal_handler,
    list_meals_handler,
    get_meal_handler,
    delete_meal_handler,
    today_summary_handler,
)

meal_bp = Blueprint("meals", __name__, url_prefix="/api/meals")

@meal_bp.post("")
@require_auth
def create_meal():
    return create_meal_handler()


@meal_bp.get("")
@require_auth
def list_meals():
    return list_meals_handler()


@meal_bp.get("/summary/today")
@require_auth
def today_summary():
    return today_summary_handler()


# ids stay strings here so malformed ones reach the handler and become 404s
@meal_bp.get("/<id>")
@require_auth
def get_meal(id):
    return get_meal_handler(id)


@meal_bp.delete("/<id>")
@require_auth
def delete_meal(id):
    return delete_meal_handler(id)
