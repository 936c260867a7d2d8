from datetime import datetime
from fittrack.extensions import db
from fittrack.utils.enums import Gender, FitnessGoal, enum_values
from fittrack.utils.http import isoformat

class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), nullable=False, unique=True, index=True)
    password = db.Column(db.String(255), nullable=False)  # hash only
    age = db.Column(db.Integer, nullable=True)
    weight = db.Column(db.Float, nullable=True)
    height = db.Column(db.Float, nullable=True)
    gender = db.Column(db.Enum(Gender, values_callable=enum_values, native_enum=False), nullable=True)
    fitness_goal = db.Column(db.Enum(FitnessGoal, values_callable=enum_values, native_enum=False), nullable=True)
    daily_calorie_goal = db.Column(db.Float, nullable=False, default=2000)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "age": self.age,
            "weight": self.weight,
            "height": self.height,
            "gender": self.gender.value if self.gender else None,
            "fitnessGoal": self.fitness_goal.value if self.fitness_goal else None,
            "dailyCalorieGoal": self.daily_calorie_goal,
            "date": isoformat(self.created_at),
        }

    def __repr__(self):
        return f"<User {self.id}: {self.email}>"
