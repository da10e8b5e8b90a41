"""User registry: registration, credential checks and profile changes.

Emails are normalised (stripped, lower-cased) before they are stored or
compared, so uniqueness is case-insensitive everywhere and the unique index
on ``users.email`` enforces exactly the same rule as the lookups here.
"""
import logging

import bcrypt
from flask import current_app
from sqlalchemy.exc import IntegrityError

from ..errors import (EmailTakenError, InvalidCredentialsError, NotFoundError, PasswordTooShortError,
                      ValidationError, WrongPasswordError)
from ..models import Activity, User, db
from .activities import count_active

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def normalize_email(email):
    return email.strip().lower() if email else email


def _hash_password(password):
    rounds = current_app.config.get("BCRYPT_ROUNDS", 12)
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def _check_password(password, password_hash):
    if not password or not isinstance(password, str):
        return False
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


def _blank(value):
    return not isinstance(value, str) or not value.strip()


def _commit_user(user):
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        logger.warning(f"Email uniqueness violated on commit for {user.email}")
        raise EmailTakenError()


def get_user(user_id):
    user = db.session.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def email_exists(email):
    if _blank(email):
        return False
    return User.query.filter_by(email=normalize_email(email)).first() is not None


def find_by_email(email):
    user = None if _blank(email) else User.query.filter_by(email=normalize_email(email)).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def register(name, email, password, birth_date=None):
    if _blank(name) or _blank(email) or not password or not isinstance(password, str):
        raise ValidationError("Name, email, and password required")
    email = normalize_email(email)
    if len(name.strip()) > 100 or len(email) > 100:
        raise ValidationError("Name and email must have at most 100 characters")
    if email_exists(email):
        logger.warning(f"Registration rejected, email already in use: {email}")
        raise EmailTakenError()
    user = User(name=name.strip(), email=email, password_hash=_hash_password(password), birth_date=birth_date)
    db.session.add(user)
    _commit_user(user)
    logger.info(f"User {user.id} registered")
    return user


def authenticate(email, password):
    user = None if _blank(email) else User.query.filter_by(email=normalize_email(email)).first()
    if not user or not _check_password(password, user.password_hash):
        logger.warning("Login failed")
        raise InvalidCredentialsError()
    logger.info(f"User {user.id} logged in")
    return user


def update_profile(user_id, name=None, email=None, birth_date=None):
    """Partial update; blank name or email is treated as not provided."""
    user = get_user(user_id)
    if not _blank(name):
        if len(name.strip()) > 100:
            raise ValidationError("Name must have at most 100 characters")
        user.name = name.strip()
    if not _blank(email):
        email = normalize_email(email)
        if len(email) > 100:
            raise ValidationError("Email must have at most 100 characters")
        if email != user.email:
            taken = User.query.filter(User.email == email, User.id != user.id).first()
            if taken:
                logger.warning(f"Profile update for user {user.id} rejected, email in use")
                raise EmailTakenError("Email already in use by another user")
            user.email = email
    if birth_date is not None:
        user.birth_date = birth_date
    _commit_user(user)
    logger.info(f"Profile updated for user {user.id}")
    return user


def change_password(user_id, current_password, new_password):
    user = get_user(user_id)
    if not _check_password(current_password, user.password_hash):
        logger.warning(f"Password change for user {user.id} rejected, wrong current password")
        raise WrongPasswordError()
    if not isinstance(new_password, str) or len(new_password) < MIN_PASSWORD_LENGTH:
        raise PasswordTooShortError()
    user.password_hash = _hash_password(new_password)
    db.session.commit()
    logger.info(f"Password changed for user {user.id}")


def profile_summary(user_id):
    user = get_user(user_id)
    total = Activity.query.filter_by(user_id=user.id).count()
    active = count_active(user.id)
    summary = user.to_dict()
    summary.update({"total_activities": total, "active_activities": active})
    return summary
