import json
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.models.property_model import PropertyCategory

LIST_FIELDS = ("amenities", "activities", "highlights", "policies")


def clean_string_list(value):
    """Descarta entradas vazias preservando a ordem"""
    if not isinstance(value, (list, tuple)):
        return value
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


class PropertyImageOut(BaseModel):
    id: int
    image_url: str
    display_order: int

    model_config = ConfigDict(from_attributes=True)


class PropertyCreate(BaseModel):
    title:          str = Field(..., min_length=1, max_length=255)
    description:    str = Field(..., min_length=1)
    category:       PropertyCategory
    location:       str = Field(..., min_length=1, max_length=255)
    price:          str = Field(..., min_length=1, max_length=100)
    price_note:     str = Field(..., min_length=1, max_length=255)
    capacity:       int = Field(..., gt=0)
    rating:         float = Field(4.5, ge=0, le=5)
    check_in_time:  str = "2:00 PM"
    check_out_time: str = "11:00 AM"
    status:         str = "Verified"
    is_top_selling: bool = False
    is_active:      bool = True
    is_available:   bool = True
    contact:        Optional[str] = None
    amenities:      List[str] = Field(default_factory=list)
    activities:     List[str] = Field(default_factory=list)
    highlights:     List[str] = Field(default_factory=list)
    policies:       List[str] = Field(default_factory=list)
    images:         List[str] = Field(default_factory=list)

    model_config = ConfigDict(use_enum_values=True)

    @field_validator(*LIST_FIELDS, "images", mode="before")
    @classmethod
    def drop_empty_entries(cls, v):
        return clean_string_list(v)


class PropertyUpdate(BaseModel):
    """Atualização parcial: só os campos enviados são gravados"""
    title:          Optional[str] = Field(None, min_length=1, max_length=255)
    description:    Optional[str] = Field(None, min_length=1)
    category:       Optional[PropertyCategory] = None
    location:       Optional[str] = Field(None, min_length=1, max_length=255)
    price:          Optional[str] = Field(None, min_length=1, max_length=100)
    price_note:     Optional[str] = Field(None, min_length=1, max_length=255)
    capacity:       Optional[int] = Field(None, gt=0)
    rating:         Optional[float] = Field(None, ge=0, le=5)
    check_in_time:  Optional[str] = None
    check_out_time: Optional[str] = None
    status:         Optional[str] = None
    is_top_selling: Optional[bool] = None
    is_active:      Optional[bool] = None
    is_available:   Optional[bool] = None
    contact:        Optional[str] = None
    amenities:      Optional[List[str]] = None
    activities:     Optional[List[str]] = None
    highlights:     Optional[List[str]] = None
    policies:       Optional[List[str]] = None
    images:         Optional[List[str]] = None

    model_config = ConfigDict(extra="ignore", use_enum_values=True)

    @field_validator(*LIST_FIELDS, "images", mode="before")
    @classmethod
    def drop_empty_entries(cls, v):
        return clean_string_list(v)

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self


class PropertyOut(BaseModel):
    id: int
    title: str
    slug: str
    description: str
    category: str
    location: str
    rating: float
    price: str
    price_note: str
    capacity: int
    check_in_time: str
    check_out_time: str
    status: str
    is_top_selling: bool
    is_active: bool
    is_available: bool
    contact: Optional[str] = None
    amenities: List[str] = []
    activities: List[str] = []
    highlights: List[str] = []
    policies: List[str] = []
    images: List[PropertyImageOut] = []
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator(*LIST_FIELDS, mode="before")
    @classmethod
    def empty_when_missing(cls, v):
        # valores antigos podem ter sido gravados como texto JSON ou nulo
        if not v:
            return []
        if isinstance(v, str):
            try:
                v = json.loads(v)
            except ValueError:
                return []
        return v if isinstance(v, list) else []


class PropertyCreated(BaseModel):
    id: int
    slug: str


class ToggleStatusRequest(BaseModel):
    field: str = Field(..., min_length=1)
    value: bool
