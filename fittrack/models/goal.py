from datetime import datetime
from fittrack.extensions import db
from fittrack.utils.enums import GoalType, enum_values
from fittrack.utils.http import isoformat

class Goal(db.Model):
    __tablename__ = "goals"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    goal_type = db.Column(db.Enum(GoalType, values_callable=enum_values, native_enum=False), nullable=False)
    target = db.Column(db.Float, nullable=False)
    current = db.Column(db.Float, nullable=False, default=0)
    start_date = db.Column(db.DateTime, nullable=False, default=datetime.now)
    end_date = db.Column(db.DateTime, nullable=False)
    is_completed = db.Column(db.Boolean, nullable=False, default=False)

    def to_dict(self):
        return {
            "id": self.id,
            "user": self.user_id,
            "goalType": self.goal_type.value,
            "target": self.target,
            "current": self.current,
            "startDate": isoformat(self.start_date),
            "endDate": isoformat(self.end_date),
            "isCompleted": self.is_completed,
        }
