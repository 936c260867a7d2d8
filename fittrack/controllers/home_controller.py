from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from fittrack.extensions import db

def home_index():
    return jsonify({"message": "Fitness Tracker API Running"})

def health_check():
    db_status = "healthy"
    try:
        db.session.execute(db.text("SELECT 1"))
    except SQLAlchemyError as e:
        db.session.rollback()
        db_status = f"unhealthy: {e.__class__.__name__}"

    return jsonify({
        "status": "online",
        "database": db_status,
    })
