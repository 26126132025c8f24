from pydantic import BaseModel
from typing import Optional


# 회원가입 요청 (필수값 검증은 서비스에서)
class RegisterIn(BaseModel):
    username: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class MessageOut(BaseModel):
    msg: str


class LoginOut(BaseModel):
    msg: str
    token: str
    username: str


class CheckOut(BaseModel):
    msg: str
    username: str
    userid: int
