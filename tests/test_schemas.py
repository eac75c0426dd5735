"""
Testes para schemas e validações
"""
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from app.schemas import property_schema, user_schema
from app.schemas.image_schema import UploadedImage
from app.schemas.response_schema import ApiResponse


class TestUserSchemas:
    """Testes para schemas de usuário"""

    def test_user_create_invalid_email(self):
        with pytest.raises(ValidationError):
            user_schema.UserCreate(
                username="testuser",
                email="invalid_email",
                password="password123",
            )


class TestPropertyCreate:
    """Testes para o schema de criação"""

    def test_valido_com_coercao_numerica(self, property_payload):
        prop = property_schema.PropertyCreate(**property_payload(capacity="6", rating="4.8"))
        assert prop.capacity == 6
        assert prop.rating == 4.8
        assert prop.category == "camping"

    @pytest.mark.parametrize("field", [
        "title", "description", "category", "location", "price", "price_note", "capacity",
    ])
    def test_campos_obrigatorios(self, property_payload, field):
        payload = property_payload()
        payload.pop(field)
        with pytest.raises(ValidationError):
            property_schema.PropertyCreate(**payload)

    @pytest.mark.parametrize("field", ["title", "description", "location", "price", "price_note"])
    def test_campos_obrigatorios_vazios(self, property_payload, field):
        with pytest.raises(ValidationError):
            property_schema.PropertyCreate(**property_payload(**{field: ""}))

    @pytest.mark.parametrize("overrides", [
        {"capacity": "many"},
        {"capacity": 0},
        {"rating": "excellent"},
        {"rating": 5.5},
        {"category": "hotel"},
    ])
    def test_valores_invalidos(self, property_payload, overrides):
        with pytest.raises(ValidationError):
            property_schema.PropertyCreate(**property_payload(**overrides))

    def test_listas_filtram_vazios(self, property_payload):
        prop = property_schema.PropertyCreate(
            **property_payload(policies=["No pets", "", "   "], images=["", "a.jpg"])
        )
        assert prop.policies == ["No pets"]
        assert prop.images == ["a.jpg"]


class TestPropertyUpdate:
    """Testes para o schema de atualização parcial"""

    def test_somente_campos_enviados(self):
        update = property_schema.PropertyUpdate(price="₹999")
        assert update.model_dump(exclude_unset=True) == {"price": "₹999"}
        assert "images" not in update.model_fields_set

    def test_lista_de_imagens_vazia_conta_como_enviada(self):
        update = property_schema.PropertyUpdate(images=[])
        assert "images" in update.model_fields_set
        assert update.images == []

    def test_null_explicito_rejeitado(self):
        with pytest.raises(ValidationError):
            property_schema.PropertyUpdate(title=None)


class TestPropertyOut:
    """Testes para a serialização de saída"""

    def test_listas_ausentes_viram_vazias(self):
        now = "2026-01-01T00:00:00"
        row = SimpleNamespace(
            id=1, title="T", slug="t", description="d", category="villa", location="l",
            rating=4.5, price="₹1", price_note="n", capacity=2, check_in_time="2:00 PM",
            check_out_time="11:00 AM", status="Verified", is_top_selling=False,
            is_active=True, is_available=True, contact=None,
            amenities=None, activities="", highlights='["Pool"]', policies=[],
            images=[], created_at=now, updated_at=now,
        )
        out = property_schema.PropertyOut.model_validate(row)
        assert out.amenities == []
        assert out.activities == []
        assert out.highlights == ["Pool"]
        assert out.policies == []


def test_envelope_de_resposta():
    body = ApiResponse.ok(data={"id": 1}, message="ok").model_dump()
    assert body == {"success": True, "message": "ok", "data": {"id": 1}}


def test_texto_malformado_vira_lista_vazia():
    now = "2026-01-01T00:00:00"
    row = SimpleNamespace(
        id=1, title="T", slug="t", description="d", category="camping", location="l",
        rating=4.5, price="₹1", price_note="n", capacity=2, check_in_time="2:00 PM",
        check_out_time="11:00 AM", status="Verified", is_top_selling=False,
        is_active=True, is_available=True, contact=None,
        amenities="[not json", activities='{"a": 1}', highlights=[], policies=[],
        images=[], created_at=now, updated_at=now,
    )
    out = property_schema.PropertyOut.model_validate(row)
    assert out.amenities == []
    assert out.activities == []


def test_envelope_de_upload():
    body = ApiResponse[UploadedImage].ok(
        data=UploadedImage(url="/api/images/a.png", filename="a.png"),
    ).model_dump()
    assert body["data"] == {"url": "/api/images/a.png", "filename": "a.png"}
