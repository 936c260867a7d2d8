from flask import request
from fittrack.extensions import db
from fittrack.models.user import User
from fittrack.schemas.user_schema import RegisterSchema, LoginSchema
from fittrack.utils.auth import create_token, hash_password, verify_password
from fittrack.utils.enums import Gender, FitnessGoal
from fittrack.utils.http import ok, error, json_body, validate_schema, server_error

def login_handler():
    data, errors = validate_schema(LoginSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "email and password required", 400, details=errors)

    email = data["email"].strip().lower()
    user = User.query.filter_by(email=email).first()
    if not user or not verify_password(user.password, data["password"]):
        return error("INVALID_CREDENTIALS", "Email or password incorrect", 401)

    return ok({"token": create_token(user.id), "user": user.to_dict()})

def register_handler():
    data, errors = validate_schema(RegisterSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid registration data", 400, details=errors)

    if User.query.filter_by(email=data["email"]).first():
        return error("EMAIL_IN_USE", "email already registered", 409)

    try:
        user = User(
            name=data["name"].strip(),
            email=data["email"],
            password=hash_password(data["password"]),
            age=data.get("age"),
            weight=data.get("weight"),
            height=data.get("height"),
            gender=Gender(data["gender"]) if data.get("gender") else None,
            fitness_goal=FitnessGoal(data["fitness_goal"]) if data.get("fitness_goal") else None,
            daily_calorie_goal=data["daily_calorie_goal"],
        )
        db.session.add(user)
        db.session.commit()
        return ok({"token": create_token(user.id), "user": user.to_dict()}, 201)
    except Exception:
        return server_error("registering user")

def me_handler():
    user = db.session.get(User, request.user_id)
    if not user:
        return error("NOT_FOUND", "User not found", 404)
    return ok(user.to_dict())
