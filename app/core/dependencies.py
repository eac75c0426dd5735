# Dependências compartilhadas: sessão do banco, autenticação e ciclo de vida
import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.core import database
from app.core.config import settings
from app.models import category_setting_model, property_model, user_model  # noqa: F401 (registra tabelas)
from app.schemas import user_schema
from app.services import user_service
from app.services.user_service import pwd_context

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")


# Lifespan handler para startup (tabelas + admin) e shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    database.Base.metadata.create_all(bind=database.engine)
    os.makedirs(settings.IMAGES_DIR, exist_ok=True)

    db = database.SessionLocal()
    try:
        if not user_service.get_user_by_username(db, settings.ADMIN_USERNAME):
            admin_in = user_schema.UserCreate(
                username=settings.ADMIN_USERNAME,
                email=settings.ADMIN_EMAIL,
                full_name="Administrador",
                password=settings.ADMIN_PASSWORD,
                is_admin=True
            )
            try:
                user_service.create_user(db, admin_in)
                logger.info(f"Usuário admin '{settings.ADMIN_USERNAME}' criado com sucesso")
            except Exception as e:
                logger.error(f"Erro ao criar usuário admin: {e}", exc_info=True)
                raise
    except Exception as e:
        logger.error(f"Erro no startup: {e}", exc_info=True)
        raise
    finally:
        db.close()

    logger.info(f"LoonCamp API iniciada (ambiente: {settings.ENVIRONMENT})")
    yield
    database.engine.dispose()
    logger.info("LoonCamp API encerrada")


def get_db():
    # sessão exclusiva da requisição, sempre devolvida ao pool
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def authenticate_user(db: Session, username: str, password: str):
    user = user_service.get_user_by_username(db, username)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> user_model.User:
    credentials_exception = HTTPException(
        status_code=401,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"}
    )
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        username: str = payload.get("sub")
        if username is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception
    user = user_service.get_user_by_username(db, username)
    if user is None:
        raise credentials_exception
    return user


def get_current_active_user(
    current_user: user_model.User = Depends(get_current_user)
) -> user_model.User:
    if current_user.disabled:
        raise HTTPException(status_code=400, detail="Inactive user")
    return current_user


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    expires = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return jwt.encode(
        {"sub": subject, "exp": datetime.now(timezone.utc) + expires},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )
