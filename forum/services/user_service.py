# forum/services/user_service.py
import logging
from typing import Optional, Tuple

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from forum.config import Settings
from forum.errors import Conflict, InvalidInput, StorageUnavailable, Unauthorized
from forum.models.user import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, USERNAME_MAX_LENGTH, User
from forum.services.auth import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 8


def register_user(
    db: Session,
    username: Optional[str],
    firstname: Optional[str],
    lastname: Optional[str],
    email: Optional[str],
    password: Optional[str],
) -> int:
    if not all([username, firstname, lastname, email, password]):
        raise InvalidInput("Please provide all required information")

    if len(password) < PASSWORD_MIN_LENGTH:
        raise InvalidInput("Password must be at least 8 characters")

    # 컬럼 길이 초과는 DB 에러(500) 대신 400 으로
    limits = (
        ("username", username, USERNAME_MAX_LENGTH),
        ("firstname", firstname, NAME_MAX_LENGTH),
        ("lastname", lastname, NAME_MAX_LENGTH),
        ("email", email, EMAIL_MAX_LENGTH),
    )
    for field, value, max_length in limits:
        if len(value) > max_length:
            raise InvalidInput(f"{field} must be at most {max_length} characters")

    try:
        existing = db.execute(
            select(User.userid).where(or_(User.username == username, User.email == email))
        ).first()
        if existing is not None:
            raise Conflict("User already registered")

        user = User(
            username=username,
            firstname=firstname,
            lastname=lastname,
            email=email,
            password=hash_password(password),
        )
        db.add(user)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("User already registered")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error registering user")
        raise StorageUnavailable("Something went wrong, try again later")

    logger.info("user registered: %s", username)
    return user.userid


def login_user(
    db: Session,
    settings: Settings,
    email: Optional[str],
    password: Optional[str],
) -> Tuple[str, str]:
    """(token, username) 반환"""
    if not email or not password:
        raise InvalidInput("Please enter all required fields")

    try:
        user = db.execute(select(User).where(User.email == email)).scalar_one_or_none()
    except SQLAlchemyError:
        logger.exception("Error during login")
        raise StorageUnavailable("Something went wrong, try again later")

    if user is None or not verify_password(password, user.password):
        raise Unauthorized("Invalid credential")

    token = create_access_token(settings, user.userid, user.username)
    logger.info("user logged in: %s", user.username)
    return token, user.username
