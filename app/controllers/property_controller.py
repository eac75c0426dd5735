from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_active_user, get_db
from app.models import user_model
from app.schemas import property_schema
from app.schemas.response_schema import ApiResponse
from app.services import property_service

router = APIRouter(
    prefix="/properties",
    tags=["Properties"],
)


def _to_out(properties) -> List[property_schema.PropertyOut]:
    return [property_schema.PropertyOut.model_validate(p) for p in properties]


# Rotas públicas

@router.get("/public-list", response_model=ApiResponse[List[property_schema.PropertyOut]])
def list_public_properties(db: Session = Depends(get_db)):
    """Propriedades ativas, top selling primeiro"""
    return ApiResponse.ok(data=_to_out(property_service.list_public_properties(db)))


@router.get("/public/{slug}", response_model=ApiResponse[property_schema.PropertyOut])
def get_public_property(slug: str, db: Session = Depends(get_db)):
    db_property = property_service.get_public_property_by_slug(db, slug)
    return ApiResponse.ok(data=property_schema.PropertyOut.model_validate(db_property))


# Rotas protegidas

@router.get("/list", response_model=ApiResponse[List[property_schema.PropertyOut]])
def list_properties(
    db: Session = Depends(get_db),
    _: user_model.User = Depends(get_current_active_user),
):
    return ApiResponse.ok(data=_to_out(property_service.list_properties(db)))


@router.post(
    "/create",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[property_schema.PropertyCreated],
)
def create_property(
    property_in: property_schema.PropertyCreate,
    db: Session = Depends(get_db),
    _: user_model.User = Depends(get_current_active_user),
):
    db_property = property_service.create_property(db, property_in)
    return ApiResponse.ok(
        data=property_schema.PropertyCreated(id=db_property.id, slug=db_property.slug),
        message="Property created successfully.",
    )


@router.put("/update/{property_id}", response_model=ApiResponse[None])
def update_property(
    property_in: property_schema.PropertyUpdate,
    property_id: int,
    db: Session = Depends(get_db),
    _: user_model.User = Depends(get_current_active_user),
):
    property_service.update_property(db, property_id, property_in)
    return ApiResponse.ok(message="Property updated successfully.")


@router.delete("/delete/{property_id}", response_model=ApiResponse[None])
def delete_property(
    property_id: int,
    db: Session = Depends(get_db),
    _: user_model.User = Depends(get_current_active_user),
):
    property_service.delete_property(db, property_id)
    return ApiResponse.ok(message="Property deleted successfully.")


@router.patch(
    "/toggle-status/{property_id}",
    response_model=ApiResponse[None],
    summary="Altera is_active, is_top_selling ou is_available",
)
def toggle_property_status(
    body: property_schema.ToggleStatusRequest,
    property_id: int,
    db: Session = Depends(get_db),
    _: user_model.User = Depends(get_current_active_user),
):
    property_service.toggle_property_status(db, property_id, body.field, body.value)
    return ApiResponse.ok(message="Property status updated successfully.")


# Deve ficar por último: "/{property_id}" casaria com "/list"
@router.get("/{property_id}", response_model=ApiResponse[property_schema.PropertyOut])
def get_property(
    property_id: int,
    db: Session = Depends(get_db),
    _: user_model.User = Depends(get_current_active_user),
):
    db_property = property_service.get_property(db, property_id)
    return ApiResponse.ok(data=property_schema.PropertyOut.model_validate(db_property))
