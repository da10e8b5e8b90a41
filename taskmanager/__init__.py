import logging

from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .config import Config
from .errors import TaskManagerError
from .models import db

# Configure logging
logging.basicConfig(level=Config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize Flask app
app = Flask(__name__)
app.config.from_object(Config)
CORS(app, resources={r"/api/*": {
    "origins": app.config["FRONTEND_URL"],
    "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    "allow_headers": ["Content-Type", "Authorization"]
}})
db.init_app(app)
migrate = Migrate(app, db)


def create_tables():
    """Create missing tables unless the schema is managed through migrations."""
    if not app.config["AUTO_CREATE_TABLES"]:
        return False
    with app.app_context():
        db.create_all()
    return True


@app.errorhandler(TaskManagerError)
def handle_domain_error(e):
    return jsonify(e.to_dict()), e.status_code


@app.errorhandler(SQLAlchemyError)
def handle_database_error(e):
    logger.error(f"Database error: {str(e)}")
    db.session.rollback()
    return jsonify({"message": "Internal server error"}), 500


@app.errorhandler(HTTPException)
def handle_http_error(e):
    return jsonify({"message": e.description}), e.code


@app.errorhandler(Exception)
def handle_unexpected_error(e):
    logger.exception(f"Unexpected error: {str(e)}")
    return jsonify({"message": "Internal server error"}), 500


from .api import activities, auth, progress, users  # noqa: E402,F401
