# forum/routers/users.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from forum.config import Settings
from forum.deps import CurrentUser, get_current_user, get_db, get_settings
from forum.schemas.user import CheckOut, LoginIn, LoginOut, MessageOut, RegisterIn
from forum.services import user_service as svc_user

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def register(body: RegisterIn, db: Session = Depends(get_db)):
    svc_user.register_user(
        db,
        username=body.username,
        firstname=body.firstname,
        lastname=body.lastname,
        email=body.email,
        password=body.password,
    )
    return MessageOut(msg="user registered")


@router.post("/login", response_model=LoginOut)
def login(
    body: LoginIn,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    token, username = svc_user.login_user(db, settings, body.email, body.password)
    return LoginOut(msg="user login successful", token=token, username=username)


# 프론트에서 로그인 상태 확인용 (실패 시 로그인 화면으로 이동)
@router.get("/check", response_model=CheckOut)
def check_user(user: CurrentUser = Depends(get_current_user)):
    return CheckOut(msg="valid user", username=user.username, userid=user.userid)
