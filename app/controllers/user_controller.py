from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.core.dependencies import authenticate_user, create_access_token, get_current_active_user, get_db
from app.core.rate_limit import LOGIN_LIMIT, limiter
from app.models import user_model
from app.schemas import user_schema
from app.schemas.response_schema import ApiResponse

router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


# Token (formato OAuth2, consumido pelo painel e pelo Swagger)
@router.post("/token", response_model=user_schema.Token)
@limiter.limit(LOGIN_LIMIT)
def login_for_access_token(
    request: Request,
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    user = authenticate_user(db, form_data.username, form_data.password)
    if not user:
        raise HTTPException(
            status_code=401,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"}
        )
    return {"access_token": create_access_token(user.username), "token_type": "bearer"}


@router.get("/me", response_model=ApiResponse[user_schema.UserOut])
def read_users_me(
    current_user: user_model.User = Depends(get_current_active_user)
):
    return ApiResponse.ok(data=user_schema.UserOut.model_validate(current_user))
