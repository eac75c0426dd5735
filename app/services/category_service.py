import logging
from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import ValidationFailedError
from app.models.category_setting_model import CategorySetting
from app.models.property_model import PropertyCategory
from app.schemas import category_schema

logger = logging.getLogger(__name__)


def list_category_settings(db: Session) -> List[CategorySetting]:
    """
    Uma entrada por categoria, na ordem do enum.
    Categorias sem registro aparecem abertas (nada é gravado aqui).
    """
    stored = {row.category: row for row in db.query(CategorySetting).all()}
    return [
        stored.get(category.value) or CategorySetting(category=category.value, is_closed=False)
        for category in PropertyCategory
    ]


def update_category_setting(
    db: Session,
    category: PropertyCategory,
    setting_in: category_schema.CategorySettingUpdate,
) -> CategorySetting:
    if setting_in.closed_from and setting_in.closed_to and setting_in.closed_from > setting_in.closed_to:
        raise ValidationFailedError("closed_from must not be after closed_to.", field="closed_from")

    key = PropertyCategory(category).value
    setting = db.query(CategorySetting).filter(CategorySetting.category == key).first()
    if setting is None:
        setting = CategorySetting(category=key)
        db.add(setting)

    for field, value in setting_in.model_dump().items():
        setattr(setting, field, value)

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(setting)

    state = f"fechada ({setting.closed_reason})" if setting.is_closed else "aberta"
    logger.info(f"Categoria '{key}' {state}")
    return setting
