import logging

from sqlalchemy import func

from ..models import Activity, Progress, Status, db

logger = logging.getLogger(__name__)


def count_by_status(user_id, status):
    return db.session.query(func.count(Progress.id)).select_from(Progress).join(Activity).filter(
        Activity.user_id == user_id,
        Progress.status == status
    ).scalar() or 0


def completion_rate(finished, started):
    total = finished + started
    return round(finished / total * 100, 2) if total > 0 else 0


def completion_stats(user_id):
    finished = count_by_status(user_id, Status.FINISHED)
    started = count_by_status(user_id, Status.STARTED)
    logger.debug(f"Stats for user {user_id}: {finished} finished, {started} started")
    return {
        "total_finished": finished,
        "total_started": started,
        "completion_rate": completion_rate(finished, started)
    }
