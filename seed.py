from datetime import datetime, timedelta
from fittrack import create_app
from fittrack.extensions import db
from fittrack.models.user import User
from fittrack.models.meal import Meal
from fittrack.models.exercise import Exercise
from fittrack.models.goal import Goal
from fittrack.utils.auth import hash_password
from fittrack.utils.enums import MealType, ExerciseType, GoalType, FitnessGoal

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    user = User.query.filter_by(email="user@example.com").first()
    if not user:
        user = User(name="User Demo", email="user@example.com",
                    password=hash_password("secret"),
                    fitness_goal=FitnessGoal.WEIGHT_LOSS,
                    daily_calorie_goal=1800)
        db.session.add(user)
        db.session.flush()

    if not Meal.query.filter_by(user_id=user.id).first():
        db.session.add_all([
            Meal(user_id=user.id, name="Oatmeal with banana", calories=350,
                 protein=12, carbs=60, fats=6, meal_type=MealType.BREAKFAST),
            Meal(user_id=user.id, name="Chicken rice bowl", calories=620,
                 protein=42, carbs=70, fats=14, meal_type=MealType.LUNCH),
        ])

    if not Exercise.query.filter_by(user_id=user.id).first():
        db.session.add(Exercise(user_id=user.id, name="Morning run", duration=30,
                                calories_burned=300, exercise_type=ExerciseType.CARDIO))

    if not Goal.query.filter_by(user_id=user.id).first():
        db.session.add(Goal(user_id=user.id, goal_type=GoalType.WEIGHT, target=5,
                            current=1, end_date=datetime.now() + timedelta(days=30)))

    db.session.commit()
    print("Seed complete.")
