from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CategorySettingUpdate(BaseModel):
    is_closed: bool
    closed_reason: Optional[str] = None
    closed_from: Optional[date] = None
    closed_to: Optional[date] = None


class CategorySettingOut(BaseModel):
    category: str
    is_closed: bool
    closed_reason: Optional[str] = None
    closed_from: Optional[date] = None
    closed_to: Optional[date] = None

    model_config = ConfigDict(from_attributes=True)
