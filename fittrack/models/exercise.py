from datetime import datetime
from fittrack.extensions import db
from fittrack.utils.enums import ExerciseType, enum_values
from fittrack.utils.http import isoformat

class Exercise(db.Model):
    __tablename__ = "exercises"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    name = db.Column(db.String(150), nullable=False)
    duration = db.Column(db.Float, nullable=False)  # minutes
    calories_burned = db.Column(db.Float, nullable=False)
    exercise_type = db.Column(db.Enum(ExerciseType, values_callable=enum_values, native_enum=False), nullable=False)
    date = db.Column(db.DateTime, nullable=False, default=datetime.now, index=True)

    def to_dict(self):
        return {
            "id": self.id,
            "user": self.user_id,
            "name": self.name,
            "duration": self.duration,
            "caloriesBurned": self.calories_burned,
            "exerciseType": self.exercise_type.value,
            "date": isoformat(self.date),
        }
