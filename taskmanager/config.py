import os
from datetime import date

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///taskmanager.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 12))
    # Off when the schema is managed through migrate.py / flask db upgrade
    AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "1") == "1"
    # Source of "today" for progress defaults; tests swap in a fixed date
    CLOCK = date.today
