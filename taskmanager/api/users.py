from flask import jsonify

from .. import app
from ..services import users
from . import get_json, parse_date


@app.route("/api/users/<int:user_id>/profile", methods=["GET"])
def get_profile(user_id):
    return jsonify(users.get_user(user_id).to_dict()), 200


@app.route("/api/users/<int:user_id>/profile-with-activities", methods=["GET"])
@app.route("/api/users/<int:user_id>/profile-with-active-activities", methods=["GET"])
def get_profile_with_activities(user_id):
    return jsonify(users.profile_summary(user_id)), 200


@app.route("/api/users/<int:user_id>/profile", methods=["PUT"])
def update_profile(user_id):
    data = get_json()
    user = users.update_profile(
        user_id,
        name=data.get("name"),
        email=data.get("email"),
        birth_date=parse_date(data.get("birth_date"), "birth_date")
    )
    return jsonify(user.to_dict()), 200


@app.route("/api/users/<int:user_id>/password", methods=["PUT"])
def change_password(user_id):
    data = get_json()
    users.change_password(user_id, data.get("current_password"), data.get("new_password"))
    return jsonify({"message": "Password changed"}), 200


@app.route("/api/users/check-email/<path:email>", methods=["GET"])
def check_email(email):
    return jsonify({"email": email, "exists": users.email_exists(email)}), 200


@app.route("/api/users/email/<path:email>", methods=["GET"])
def get_by_email(email):
    return jsonify(users.find_by_email(email).to_dict()), 200
