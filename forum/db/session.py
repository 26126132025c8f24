# forum/db/session.py
# SQLAlchemy 기본 세팅. 엔진/세션 팩토리는 앱 시작 시 한 번 만들고 종료 시 dispose 한다.
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from forum.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    url = settings.database_url
    if not url:
        raise RuntimeError("DATABASE_URL 환경변수가 설정되어 있지 않습니다.")

    if url.startswith("sqlite"):
        # SQLite + FastAPI 스레드풀 조합용 설정
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool  # 인메모리 DB는 커넥션 하나를 공유해야 함
        return create_engine(url, **kwargs)

    return create_engine(
        url,
        pool_pre_ping=True,                     # 끊어진 커넥션 자동 감지
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,  # 풀 고갈 시 대기 시간(초)
    )


class Database:
    """프로세스 단위 커넥션 풀. app.state.db 로 주입해서 사용한다."""

    def __init__(self, settings: Settings):
        self.engine = build_engine(settings)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        # 모델 import 해야 metadata 에 테이블이 등록됨
        from forum.models import question, user  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        logger.info("disposing connection pool")
        self.engine.dispose()
