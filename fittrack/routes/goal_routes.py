from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.goal_controller import (
    create_goal_handler,
    list_goals_handler,
    get_goal_handler,
    update_goal_handler,
    delete_goal_handler,
    progress_handler,
)

goal_bp = Blueprint("goals", __name__, url_prefix="/api/goals")

@goal_bp.post("")
@require_auth
def create_goal():
    return create_goal_handler()


@goal_bp.get("")
@require_auth
def list_goals():
    return list_goals_handler()


@goal_bp.get("/progress")
@require_auth
def progress():
    return progress_handler()


@goal_bp.get("/<id>")
@require_auth
def get_goal(id):
    return get_goal_handler(id)


@goal_bp.put("/<id>")
@require_auth
def update_goal(id):
    return update_goal_handler(id)


@goal_bp.delete("/<id>")
@require_auth
def delete_goal(id):
    return delete_goal_handler(id)
