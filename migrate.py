import logging
import sys

from flask_migrate import upgrade
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError

from taskmanager import app

logger = logging.getLogger(__name__)

# Schema comes from the migration scripts only
app.config["AUTO_CREATE_TABLES"] = False

# Test database connection
try:
    engine = create_engine(app.config["SQLALCHEMY_DATABASE_URI"])
    with engine.connect() as conn:
        logger.info("Database connection successful")
except OperationalError as e:
    logger.error(f"Database connection failed: {e}")
    sys.exit(1)

with app.app_context():
    try:
        upgrade()  # Apply migrations
        logger.info("Database migrations applied successfully")
    except Exception as e:
        logger.error(f"Failed to apply migrations: {e}")
        sys.exit(1)
