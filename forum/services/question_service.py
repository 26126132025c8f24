# forum/services/question_service.py
# 질문 등록/목록/단건 조회 로직. 라우터는 HTTP 변환만 담당한다.
import logging
import uuid
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from forum.errors import Conflict, InvalidInput, NotFound, StorageUnavailable
from forum.models.question import Question, TITLE_MAX_LENGTH
from forum.models.user import User

logger = logging.getLogger(__name__)


def _new_question_id() -> str:
    return str(uuid.uuid4())


def _question_id_exists(db: Session, questionid: str) -> bool:
    found = db.execute(
        select(Question.id).where(Question.questionid == questionid)
    ).first()
    return found is not None


def create_question(db: Session, title: Optional[str], description: Optional[str], user) -> str:
    """질문을 저장하고 새 questionid 를 반환한다."""
    if not title or not description:
        raise InvalidInput("Please provide all required information")

    if len(title) > TITLE_MAX_LENGTH:
        raise InvalidInput("Title must be less than 200 characters")

    questionid = _new_question_id()

    try:
        if _question_id_exists(db, questionid):
            raise Conflict("Question ID already exists")

        db.add(
            Question(
                questionid=questionid,
                userid=user.userid,
                title=title,
                description=description,
            )
        )
        db.commit()
    except IntegrityError:
        # 존재 확인과 insert 사이에 같은 id 가 들어온 경우 (unique 제약)
        db.rollback()
        logger.warning("questionid collision on insert: %s", questionid)
        raise Conflict("Question ID already exists")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error adding question")
        raise StorageUnavailable("Something went wrong, try again later")

    logger.info("question %s added by %s", questionid, user.username)
    return questionid


def list_questions(db: Session, limit: Optional[int] = None, offset: int = 0) -> List[Dict]:
    """작성자 이름을 붙인 전체 질문 목록 (최근 등록 순)."""
    stmt = (
        select(
            Question.questionid.label("question_id"),
            Question.title,
            Question.description.label("content"),
            User.username.label("user_name"),
        )
        .join(User, Question.userid == User.userid)
        .order_by(Question.id.desc())
    )
    if limit is not None:
        stmt = stmt.limit(limit)
    if offset:
        stmt = stmt.offset(offset)

    try:
        rows = db.execute(stmt).mappings().all()
    except SQLAlchemyError:
        logger.exception("Error listing questions")
        raise NotFound("No questions found")

    # 0건은 에러가 아니라 빈 목록
    return [dict(r) for r in rows]


def get_question(db: Session, question_id: Optional[str]) -> Dict:
    if not question_id:
        raise InvalidInput("Please provide a question ID.")

    stmt = (
        select(
            Question.questionid,
            Question.title,
            Question.description,
            Question.created_at,
            Question.userid,
            User.username,
        )
        .outerjoin(User, Question.userid == User.userid)
        .where(Question.questionid == question_id)
    )

    try:
        row = db.execute(stmt).mappings().first()
    except SQLAlchemyError:
        logger.exception("Error while retrieving question %s", question_id)
        raise StorageUnavailable("Something went wrong, please try again!")

    if row is None:
        raise NotFound("No question found with this ID.")

    question = dict(row)
    created_at = question.get("created_at")
    question["created_at"] = created_at.isoformat() if created_at else None
    return question
