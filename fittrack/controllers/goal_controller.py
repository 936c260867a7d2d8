from datetime import datetime
from flask import request
from fittrack.schemas.goal_schema import CreateGoalSchema, UpdateGoalSchema
from fittrack.services.goal_service import (
    create_goal,
    list_goals,
    get_goal,
    update_goal,
    delete_goal,
    open_goals,
)
from fittrack.services.summary_service import goal_progress
from fittrack.utils.errors import ApiError
from fittrack.utils.http import ok, error, json_body, validate_schema, server_error

def create_goal_handler():
    data, errors = validate_schema(CreateGoalSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid goal data", 400, details=errors)

    try:
        goal = create_goal(request.user_id, data)
        return ok(goal.to_dict())
    except Exception:
        return server_error("creating goal")

def list_goals_handler():
    try:
        return ok([g.to_dict() for g in list_goals(request.user_id)])
    except Exception:
        return server_error("listing goals")

def get_goal_handler(id):
    try:
        return ok(get_goal(request.user_id, id).to_dict())
    except ApiError as e:
        return error(e.code, e.message, e.status)
    except Exception:
        return server_error("fetching goal")

def update_goal_handler(id):
    """
    Partial update. Only `current` and `isCompleted` are honoured; keys that
    are absent from the body are left untouched.
    """
    changes, errors = validate_schema(UpdateGoalSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid goal data", 400, details=errors)

    try:
        goal = update_goal(request.user_id, id, changes)
        return ok(goal.to_dict())
    except ApiError as e:
        return error(e.code, e.message, e.status)
    except Exception:
        return server_error("updating goal")

def delete_goal_handler(id):
    try:
        delete_goal(request.user_id, id)
        return ok({"message": "Goal removed"})
    except ApiError as e:
        return error(e.code, e.message, e.status)
    except Exception:
        return server_error("deleting goal")

def progress_handler():
    try:
        return ok(goal_progress(open_goals(request.user_id), datetime.now()))
    except Exception:
        return server_error("computing goal progress")
