from flask import request
from fittrack.schemas.exercise_schema import CreateExerciseSchema
from fittrack.services.exercise_service import (
    create_exercise,
    list_exercises,
    get_exercise,
    delete_exercise,
    todays_exercises,
)
from fittrack.services.summary_service import summarize_exercises
from fittrack.utils.errors import ApiError
from fittrack.utils.http import ok, error, json_body, validate_schema, server_error

def create_exercise_handler():
    data, errors = validate_schema(CreateExerciseSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid exercise data", 400, details=errors)

    try:
        exercise = create_exercise(request.user_id, data)
        return ok(exercise.to_dict())
    except Exception:
        return server_error("creating exercise")

def list_exercises_handler():
    try:
        return ok([e.to_dict() for e in list_exercises(request.user_id)])
    except Exception:
        return server_error("listing exercises")

def get_exercise_handler(id):
    try:
        return ok(get_exercise(request.user_id, id).to_dict())
    except ApiError as e:
        return error(e.code, e.message, e.status)
    except Exception:
        return server_error("fetching exercise")

def delete_exercise_handler(id):
    try:
        delete_exercise(request.user_id, id)
        return ok({"message": "Exercise removed"})
    except ApiError as e:
        return error(e.code, e.message, e.status)
    except Exception:
        return server_error("deleting exercise")

def today_summary_handler():
    try:
        return ok(summarize_exercises(todays_exercises(request.user_id)))
    except Exception:
        return server_error("building exercise summary")
