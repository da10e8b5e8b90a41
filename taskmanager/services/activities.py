import logging

from ..errors import DuplicateTitleError, NotFoundError, ValidationError
from ..models import Activity, Frequency, User, db

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 255


def _clean_text(value, field, max_length):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} required")
    value = value.strip()
    if len(value) > max_length:
        raise ValidationError(f"{field} must have at most {max_length} characters")
    return value


def _has_similar_title(user_id, title):
    # Fuzzy duplicate: either title contains the other, ignoring case
    wanted = title.lower()
    titles = db.session.query(Activity.title).filter_by(user_id=user_id, active=True).all()
    return any(wanted in existing.lower() or existing.lower() in wanted for (existing,) in titles)


def get(activity_id, user_id):
    activity = Activity.query.filter_by(id=activity_id, user_id=user_id).first()
    if not activity:
        raise NotFoundError("Activity not found")
    return activity


def list_active(user_id):
    activities = Activity.query.filter_by(user_id=user_id, active=True).order_by(Activity.id).all()
    logger.debug(f"Fetched {len(activities)} active activities for user {user_id}")
    return activities


def list_by_frequency(user_id, frequency):
    frequency = Frequency.parse(frequency)
    return Activity.query.filter_by(user_id=user_id, frequency=frequency, active=True).order_by(Activity.id).all()


def count_active(user_id):
    return Activity.query.filter_by(user_id=user_id, active=True).count()


def create(user_id, title, description, frequency, start_date):
    if not db.session.get(User, user_id):
        raise NotFoundError("User not found")
    title = _clean_text(title, "Title", TITLE_MAX_LENGTH)
    description = _clean_text(description, "Description", DESCRIPTION_MAX_LENGTH)
    frequency = Frequency.parse(frequency)
    if start_date is None:
        raise ValidationError("Start date required")
    if _has_similar_title(user_id, title):
        logger.warning(f"Activity '{title}' rejected for user {user_id}, similar title exists")
        raise DuplicateTitleError()
    activity = Activity(title=title, description=description, frequency=frequency, start_date=start_date,
                        active=True, user_id=user_id)
    db.session.add(activity)
    db.session.commit()
    logger.info(f"Activity {activity.id} created for user {user_id}")
    return activity


def update(activity_id, user_id, title=None, description=None, frequency=None, start_date=None):
    activity = get(activity_id, user_id)
    if title is not None:
        activity.title = _clean_text(title, "Title", TITLE_MAX_LENGTH)
    if description is not None:
        activity.description = _clean_text(description, "Description", DESCRIPTION_MAX_LENGTH)
    if frequency is not None:
        activity.frequency = Frequency.parse(frequency)
    if start_date is not None:
        activity.start_date = start_date
    db.session.commit()
    logger.info(f"Activity {activity.id} updated for user {user_id}")
    return activity


def soft_delete(activity_id, user_id):
    """Deactivate the activity. Its progress history is left untouched."""
    activity = get(activity_id, user_id)
    activity.active = False
    db.session.commit()
    logger.info(f"Activity {activity.id} deactivated for user {user_id}")
