# forum/routers/question.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from forum.deps import CurrentUser, get_current_user, get_db
from forum.schemas.question import (
    QuestionCreate,
    QuestionCreated,
    QuestionDetailResponse,
    QuestionListResponse,
)
from forum.services import question_service as svc_question

router = APIRouter(prefix="/question", tags=["question"])


# 질문 등록
@router.post("", response_model=QuestionCreated, status_code=status.HTTP_201_CREATED)
def post_question(
    body: QuestionCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    questionid = svc_question.create_question(db, body.title, body.description, user)
    return QuestionCreated(msg="Question added", questionid=questionid)


# 전체 질문 목록 (최근 등록 순)
@router.get("", response_model=QuestionListResponse)
def all_questions(
    limit: Optional[int] = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"questions": svc_question.list_questions(db, limit=limit, offset=offset)}


# 단건 조회
@router.get("/{question_id}", response_model=QuestionDetailResponse)
def single_question(
    question_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"question": svc_question.get_question(db, question_id)}
