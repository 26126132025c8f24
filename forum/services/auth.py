# forum/services/auth.py
# 인증 관련 로직
# - 비밀번호 해시/검증, JWT 생성/검증
# 실제 라우팅은 forum/routers/users.py, 의존성은 forum/deps.py 에서 처리
from datetime import datetime, timedelta, timezone
from typing import Dict

from jose import JWTError, jwt
from passlib.context import CryptContext

from forum.config import Settings

# bcrypt 해시/검증용 context
pwd_ctx = CryptContext(schemes=["bcrypt"], deprecated="auto")


# ---------- Password ----------
def hash_password(raw: str) -> str:
    return pwd_ctx.hash(raw)


def verify_password(raw: str, hashed: str) -> bool:
    return pwd_ctx.verify(raw, hashed)


# ---------- JWT ----------
def create_access_token(settings: Settings, userid: int, username: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(userid),  # 사용자 식별자
        "username": username,
        "type": "access",
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=settings.jwt_expire_minutes)).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_bearer(settings: Settings, authorization: str | None) -> Dict[str, object]:
    """
    - Authorization: Bearer <access_token> 헤더에서 토큰을 꺼내서
    - JWT secret 으로 검증하고
    - userid / username 을 반환한다.
    실패 시 ValueError (get_current_user 쪽에서 401로 바꿔서 응답)
    """
    if not authorization:
        raise ValueError("missing Authorization header")

    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise ValueError("invalid Authorization header")

    token = parts[1].strip()
    if not token:
        raise ValueError("invalid Authorization header")

    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise ValueError("invalid token") from e

    if claims.get("type") != "access":
        raise ValueError("invalid token: access token required")

    sub = claims.get("sub")
    username = claims.get("username")
    if not sub or not username:
        raise ValueError("invalid token: missing sub")

    try:
        userid = int(sub)
    except (TypeError, ValueError) as e:
        raise ValueError("invalid token: bad sub") from e

    return {"userid": userid, "username": username}
