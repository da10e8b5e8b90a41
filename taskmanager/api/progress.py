from flask import jsonify, request

from .. import app
from ..errors import NotFoundError, ValidationError
from ..services import progress, stats
from . import get_json, parse_date, today


def _dump(records):
    return jsonify([record.to_dict() for record in records])


# Complete an activity
@app.route("/api/progress", methods=["POST"])
def record_progress():
    data = get_json()
    activity_id = data.get("activity_id")
    if not isinstance(activity_id, int) or isinstance(activity_id, bool):
        raise ValidationError("activity_id required")
    record = progress.record_completion(
        activity_id,
        finish_date=parse_date(data.get("finish_date"), "finish_date"),
        today=today
    )
    return jsonify(record.to_dict()), 201


@app.route("/api/progress/activity/<int:activity_id>", methods=["GET"])
def get_activity_progress(activity_id):
    return _dump(progress.list_for_activity(activity_id)), 200


@app.route("/api/progress/activity/<int:activity_id>/latest", methods=["GET"])
def get_latest_activity_progress(activity_id):
    record = progress.latest_for_activity(activity_id)
    if not record:
        raise NotFoundError("No progress recorded for this activity")
    return jsonify(record.to_dict()), 200


@app.route("/api/progress/user/<int:user_id>", methods=["GET"])
def get_user_progress(user_id):
    start = parse_date(request.args.get("start"), "start")
    end = parse_date(request.args.get("end"), "end")
    if start is None and end is None:
        return _dump(progress.list_for_user(user_id)), 200
    if start is None or end is None:
        raise ValidationError("Both start and end are required for a date range")
    return _dump(progress.list_between(user_id, start, end)), 200


@app.route("/api/progress/user/<int:user_id>/today", methods=["GET"])
def get_user_progress_today(user_id):
    return _dump(progress.list_for_user_today(user_id, today=today)), 200


@app.route("/api/progress/user/<int:user_id>/recent", methods=["GET"])
def get_user_recent_progress(user_id):
    days = request.args.get("days", "30")
    try:
        days = int(days)
    except ValueError:
        raise ValidationError("days must be an integer")
    return _dump(progress.list_for_user_since(user_id, days=days, today=today)), 200


@app.route("/api/progress/user/<int:user_id>/stats", methods=["GET"])
def get_user_stats(user_id):
    return jsonify(stats.completion_stats(user_id)), 200


@app.route("/api/progress/<int:progress_id>", methods=["DELETE"])
def delete_progress(progress_id):
    progress.delete(progress_id)
    return jsonify({"message": "Progress deleted"}), 200
