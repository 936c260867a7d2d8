from enum import Enum

class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

class ExerciseType(str, Enum):
    CARDIO = "cardio"
    STRENGTH = "strength"
    FLEXIBILITY = "flexibility"
    BALANCE = "balance"

class GoalType(str, Enum):
    WEIGHT = "weight"
    CALORIES = "calories"
    EXERCISE = "exercise"
    NUTRITION = "nutrition"

class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

class FitnessGoal(str, Enum):
    WEIGHT_LOSS = "weight-loss"
    MUSCLE_GAIN = "muscle-gain"
    MAINTENANCE = "maintenance"
    IMPROVE_FITNESS = "improve-fitness"


def enum_values(enum_cls):
    return [e.value for e in enum_cls]
