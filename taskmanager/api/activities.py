from flask import jsonify

from .. import app
from ..services import activities
from . import get_json, parse_date


@app.route("/api/activities/user/<int:user_id>", methods=["GET"])
def list_activities(user_id):
    return jsonify([activity.to_dict() for activity in activities.list_active(user_id)]), 200


@app.route("/api/activities/user/<int:user_id>", methods=["POST"])
def create_activity(user_id):
    data = get_json()
    activity = activities.create(
        user_id,
        title=data.get("title"),
        description=data.get("description"),
        frequency=data.get("frequency"),
        start_date=parse_date(data.get("start_date"), "start_date")
    )
    return jsonify(activity.to_dict()), 201


@app.route("/api/activities/<int:activity_id>/user/<int:user_id>", methods=["GET"])
def get_activity(activity_id, user_id):
    return jsonify(activities.get(activity_id, user_id).to_dict()), 200


@app.route("/api/activities/<int:activity_id>/user/<int:user_id>", methods=["PUT"])
def update_activity(activity_id, user_id):
    data = get_json()
    activity = activities.update(
        activity_id,
        user_id,
        title=data.get("title"),
        description=data.get("description"),
        frequency=data.get("frequency"),
        start_date=parse_date(data.get("start_date"), "start_date")
    )
    return jsonify(activity.to_dict()), 200


@app.route("/api/activities/<int:activity_id>/user/<int:user_id>", methods=["DELETE"])
def delete_activity(activity_id, user_id):
    activities.soft_delete(activity_id, user_id)
    return jsonify({"message": "Activity deleted"}), 200


@app.route("/api/activities/user/<int:user_id>/frequency/<frequency>", methods=["GET"])
def list_by_frequency(user_id, frequency):
    return jsonify([activity.to_dict() for activity in activities.list_by_frequency(user_id, frequency)]), 200
