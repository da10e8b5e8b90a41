"""Progress ledger: dated completion records for activities.

At most one record may exist per (activity, finish date). The lookup in
``record_completion`` rejects the common case early; the unique constraint on
the ``progress`` table settles concurrent inserts that both pass it.
"""
import logging
from datetime import date, timedelta

from sqlalchemy.exc import IntegrityError

from ..errors import AlreadyCompletedError, NotFoundError, ValidationError
from ..models import Activity, Progress, Status, db

logger = logging.getLogger(__name__)

MAX_DAYS = 36500


def _for_user(user_id):
    return Progress.query.join(Activity).filter(Activity.user_id == user_id)


def completion_for(activity_id, finish_date):
    return Progress.query.filter_by(activity_id=activity_id, finish_date=finish_date).first()


def record_completion(activity_id, finish_date=None, today=date.today):
    activity = db.session.get(Activity, activity_id)
    if not activity:
        raise NotFoundError("Activity not found")
    if finish_date is None:
        finish_date = today()
    if completion_for(activity.id, finish_date):
        logger.warning(f"Activity {activity.id} already completed on {finish_date}")
        raise AlreadyCompletedError()
    progress = Progress(activity_id=activity.id, finish_date=finish_date, status=Status.FINISHED)
    db.session.add(progress)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        logger.warning(f"Concurrent completion of activity {activity_id} on {finish_date} rejected")
        raise AlreadyCompletedError()
    logger.info(f"Progress {progress.id} recorded for activity {activity.id} on {finish_date}")
    return progress


def list_for_activity(activity_id):
    return Progress.query.filter_by(activity_id=activity_id).order_by(Progress.finish_date.desc()).all()


def list_for_user(user_id):
    return _for_user(user_id).order_by(Progress.finish_date.desc(), Progress.id.desc()).all()


def list_for_user_today(user_id, today=date.today):
    return _for_user(user_id).filter(Progress.finish_date == today()).order_by(Progress.id).all()


def list_for_user_since(user_id, days=30, today=date.today):
    if days < 0 or days > MAX_DAYS:
        raise ValidationError(f"Days must be between 0 and {MAX_DAYS}")
    start = today() - timedelta(days=days)
    return _for_user(user_id).filter(Progress.finish_date >= start) \
        .order_by(Progress.finish_date.desc(), Progress.id.desc()).all()


def list_between(user_id, start, end):
    if start > end:
        raise ValidationError("Start date must not be after end date")
    return _for_user(user_id).filter(Progress.finish_date.between(start, end)) \
        .order_by(Progress.finish_date.desc(), Progress.id.desc()).all()


def latest_for_activity(activity_id):
    return Progress.query.filter_by(activity_id=activity_id).order_by(Progress.finish_date.desc()).first()


def delete(progress_id):
    progress = db.session.get(Progress, progress_id)
    if not progress:
        raise NotFoundError("Progress not found")
    db.session.delete(progress)
    db.session.commit()
    logger.info(f"Progress {progress_id} deleted")
