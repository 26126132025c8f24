# forum/deps.py
import logging
from dataclasses import dataclass

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from forum.config import Settings
from forum.errors import Unauthorized
from forum.services.auth import verify_bearer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    userid: int
    username: str


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


# ----------------------------
# DB 세션
# ----------------------------
def get_db(request: Request):
    db: Session = request.app.state.db.SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


# ----------------------------
# 현재 사용자 가져오기
# ----------------------------
def get_current_user(
    authorization: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    try:
        claims = verify_bearer(settings, authorization)
    except ValueError as e:
        logger.info("bearer verification failed: %s", e)
        raise Unauthorized("Authentication invalid")

    return CurrentUser(userid=claims["userid"], username=claims["username"])
