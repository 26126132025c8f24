# forum/models/question.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from forum.db.base import Base

TITLE_MAX_LENGTH = 200


class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, autoincrement=True)  # 목록 정렬 기준 (입력 순서)
    questionid = Column(String(36), unique=True, nullable=False)  # 외부 노출용 uuid
    userid = Column(Integer, ForeignKey("users.userid"), nullable=False, index=True)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    description = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
