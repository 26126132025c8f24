# forum/models/user.py
# 질문 작성자 참조용 users 테이블
from sqlalchemy import Column, Integer, String, DateTime, func
from forum.db.base import Base

USERNAME_MAX_LENGTH = 20
NAME_MAX_LENGTH = 20
EMAIL_MAX_LENGTH = 40


class User(Base):
    __tablename__ = "users"

    userid = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(USERNAME_MAX_LENGTH), unique=True, nullable=False)
    firstname = Column(String(NAME_MAX_LENGTH), nullable=False)
    lastname = Column(String(NAME_MAX_LENGTH), nullable=False)
    email = Column(String(EMAIL_MAX_LENGTH), unique=True, nullable=False)
    password = Column(String(100), nullable=False)  # bcrypt 해시
    created_at = Column(DateTime, nullable=False, server_default=func.now())
