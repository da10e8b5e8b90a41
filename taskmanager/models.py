import enum
from datetime import datetime

from flask_sqlalchemy import SQLAlchemy

from .errors import InvalidFrequencyError

db = SQLAlchemy()


class Frequency(enum.Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value):
        """Case-insensitive lookup by name; unknown text is a validation error."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or value.strip().upper() not in cls.__members__:
            raise InvalidFrequencyError()
        return cls[value.strip().upper()]


class Status(enum.Enum):
    # STARTED is never written by any operation, only counted by the stats
    STARTED = "started"
    FINISHED = "finished"


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(100), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    birth_date = db.Column(db.Date, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    activities = db.relationship("Activity", backref="user", lazy=True, cascade="all, delete-orphan")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "birth_date": self.birth_date.isoformat() if self.birth_date else None,
            "created_at": self.created_at.isoformat()
        }


class Activity(db.Model):
    __tablename__ = "activities"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(255), nullable=False)
    frequency = db.Column(db.Enum(Frequency, name="frequency", native_enum=False, length=10), nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    active = db.Column(db.Boolean, nullable=False, default=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    progresses = db.relationship("Progress", backref="activity", lazy=True, cascade="all, delete-orphan")

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "frequency": self.frequency.name,
            "start_date": self.start_date.isoformat(),
            "active": self.active
        }


class Progress(db.Model):
    __tablename__ = "progress"
    __table_args__ = (
        db.UniqueConstraint("activity_id", "finish_date", name="uq_progress_activity_finish_date"),
    )

    id = db.Column(db.Integer, primary_key=True)
    finish_date = db.Column(db.Date, nullable=False, index=True)
    status = db.Column(db.Enum(Status, name="status", native_enum=False, length=10), nullable=False)
    activity_id = db.Column(db.Integer, db.ForeignKey("activities.id", ondelete="CASCADE"), nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "finish_date": self.finish_date.isoformat(),
            "status": self.status.name,
            "activity_id": self.activity_id,
            "activity_title": self.activity.title
        }
