from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_active_user, get_db
from app.models import user_model
from app.models.property_model import PropertyCategory
from app.schemas import category_schema
from app.schemas.response_schema import ApiResponse
from app.services import category_service

router = APIRouter(
    prefix="/category-settings",
    tags=["Category settings"],
)


@router.get("", response_model=ApiResponse[List[category_schema.CategorySettingOut]])
def list_category_settings(db: Session = Depends(get_db)):
    settings_list = category_service.list_category_settings(db)
    return ApiResponse.ok(
        data=[category_schema.CategorySettingOut.model_validate(s) for s in settings_list]
    )


@router.put("/{category}", response_model=ApiResponse[category_schema.CategorySettingOut])
def update_category_setting(
    category: PropertyCategory,
    setting_in: category_schema.CategorySettingUpdate,
    db: Session = Depends(get_db),
    _: user_model.User = Depends(get_current_active_user),
):
    setting = category_service.update_category_setting(db, category, setting_in)
    return ApiResponse.ok(
        data=category_schema.CategorySettingOut.model_validate(setting),
        message="Category settings updated successfully.",
    )
