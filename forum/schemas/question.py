from pydantic import BaseModel, Field
from typing import Optional, List

# -- Request --

# 질문 등록 - 요청 (필수값/길이 검증은 서비스에서)
class QuestionCreate(BaseModel):
    title: Optional[str] = Field(None, description="질문 제목 (최대 200자)")
    description: Optional[str] = Field(None, description="질문 내용")


# -- Response --

class QuestionCreated(BaseModel):
    msg: str
    questionid: str


# 목록 항목
class QuestionSummary(BaseModel):
    question_id: str
    title: str
    content: str
    user_name: str


class QuestionListResponse(BaseModel):
    questions: List[QuestionSummary]


class QuestionDetail(BaseModel):
    questionid: str
    title: str
    description: str
    created_at: Optional[str] = None
    userid: int
    username: Optional[str] = None


class QuestionDetailResponse(BaseModel):
    question: QuestionDetail
