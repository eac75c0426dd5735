from sqlalchemy import Boolean, Column, Date, DateTime, String, Text

from app.core.database import Base
from app.models.property_model import utcnow


class CategorySetting(Base):
    __tablename__ = "category_settings"

    category      = Column(String(20), primary_key=True)
    is_closed     = Column(Boolean, nullable=False, default=False)
    closed_reason = Column(Text, nullable=True)
    closed_from   = Column(Date, nullable=True)
    closed_to     = Column(Date, nullable=True)
    updated_at    = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
