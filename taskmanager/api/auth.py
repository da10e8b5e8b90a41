import logging

from flask import jsonify

from .. import app
from ..services import users
from . import get_json, parse_date

logger = logging.getLogger(__name__)


# Register endpoint
@app.route("/api/auth/register", methods=["POST"])
def register():
    data = get_json()
    user = users.register(
        name=data.get("name"),
        email=data.get("email"),
        password=data.get("password"),
        birth_date=parse_date(data.get("birth_date"), "birth_date")
    )
    return jsonify(user.to_dict()), 201


# Login endpoint
@app.route("/api/auth/login", methods=["POST"])
def login():
    data = get_json()
    user = users.authenticate(data.get("email"), data.get("password"))
    return jsonify({
        "user_id": user.id,
        "name": user.name,
        "email": user.email,
        "message": "Login successful"
    }), 200


@app.route("/api/auth/forgot-password", methods=["POST"])
def forgot_password():
    data = get_json()
    # Same answer either way so the endpoint can't be used to probe for accounts
    if users.email_exists(data.get("email")):
        logger.info("Password reset requested for a registered email")
    return jsonify({"message": "If the email exists, you will receive instructions to reset your password"}), 200
