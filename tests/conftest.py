"""
Configuração global para testes

Este arquivo é carregado automaticamente pelo pytest antes de qualquer teste.
Ele configura as variáveis de ambiente necessárias e fornece um banco SQLite
isolado por teste.
"""
import os
import tempfile

import pytest

# Configurações padrão para testes - definidas ANTES de qualquer import do app
TEST_ENV_VARS = {
    "SECRET_KEY": "test_secret_key_for_testing_only",
    "DATABASE_URL": "sqlite:///:memory:",
    "ALGORITHM": "HS256",
    "ACCESS_TOKEN_EXPIRE_MINUTES": "30",
    "ADMIN_USERNAME": "admin",
    "ADMIN_EMAIL": "admin@test.com",
    "ADMIN_PASSWORD": "admin123",
    "ENVIRONMENT": "testing",
    "CORS_ORIGINS": "*",
    "LOG_LEVEL": "WARNING",
    "IMAGES_DIR": os.path.join(tempfile.gettempdir(), "looncamp_test_images"),
    "MAX_FILE_SIZE_MB": "1",
    "RATE_LIMIT_ENABLED": "false",
    "RATE_LIMIT_PER_MINUTE": "60",
}

for key, value in TEST_ENV_VARS.items():
    os.environ.setdefault(key, value)

from fastapi.testclient import TestClient  # noqa: E402

from app.core import database  # noqa: E402
from app.core.config import Settings, settings  # noqa: E402
from app.core.database import Base, build_engine, build_session_factory  # noqa: E402
from app.core.dependencies import create_access_token, get_db  # noqa: E402
from app.models import category_setting_model, property_model, user_model  # noqa: E402,F401
from app.schemas import property_schema  # noqa: E402


@pytest.fixture(scope="function")
def engine(tmp_path):
    """Banco SQLite em arquivo, novo a cada teste"""
    config = Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}")
    test_engine = build_engine(config)
    Base.metadata.create_all(bind=test_engine)
    try:
        yield test_engine
    finally:
        Base.metadata.drop_all(bind=test_engine)
        test_engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    """Cria uma sessão de banco de dados para cada teste"""
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def images_dir(tmp_path, monkeypatch):
    path = tmp_path / "images"
    monkeypatch.setattr(settings, "IMAGES_DIR", str(path))
    return path


@pytest.fixture(scope="function")
def client(engine, session_factory, images_dir, monkeypatch):
    """Cliente de teste apontando o app (lifespan incluso) para o banco do teste"""
    monkeypatch.setattr(database, "engine", engine)
    monkeypatch.setattr(database, "SessionLocal", session_factory)

    from app.main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def admin_token(client):
    """Token do admin criado pelo lifespan"""
    response = client.post(
        "/api/auth/token",
        data={"username": settings.ADMIN_USERNAME, "password": settings.ADMIN_PASSWORD},
    )
    assert response.status_code == 200, f"Login failed: {response.status_code} - {response.text}"
    return response.json()["access_token"]


@pytest.fixture(scope="function")
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


def make_property_payload(**overrides) -> dict:
    payload = {
        "title": "Pawna Lake Camping",
        "description": "Lakeside tents with bonfire and dinner",
        "category": "camping",
        "location": "Pawna, Lonavala",
        "price": "₹1,499",
        "price_note": "per person with meal",
        "capacity": 4,
    }
    payload.update(overrides)
    return payload


def make_property_in(**overrides) -> property_schema.PropertyCreate:
    return property_schema.PropertyCreate(**make_property_payload(**overrides))


@pytest.fixture
def property_payload():
    return make_property_payload


@pytest.fixture
def property_in():
    return make_property_in


@pytest.fixture
def expired_token():
    from datetime import timedelta
    return create_access_token(settings.ADMIN_USERNAME, expires_delta=timedelta(minutes=-1))
