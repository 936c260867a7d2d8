from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.exercise_controller import (
    create_exercise_handler,
    list_exercises_handler,
    get_exercise_handler,
    delete_exercise_handler,
    today_summary_handler,
)

exercise_bp = Blueprint("exercises", __name__, url_prefix="/api/exercises")

@exercise_bp.post("")
@require_auth
def create_exercise():
    return create_exercise_handler()


@exercise_bp.get("")
@require_auth
def list_exercises():
    return list_exercises_handler()


@exercise_bp.get("/summary/today")
@require_auth
def today_summary():
    return today_summary_handler()


@exercise_bp.get("/<id>")
@require_auth
def get_exercise(id):
    return get_exercise_handler(id)


@exercise_bp.delete("/<id>")
@require_auth
def delete_exercise(id):
    return delete_exercise_handler(id)
