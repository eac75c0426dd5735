import enum
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from app.core.database import Base

# JSONB no PostgreSQL, JSON genérico nos demais (SQLite nos testes)
JSONList = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PropertyCategory(str, enum.Enum):
    camping = "camping"
    cottage = "cottage"
    villa   = "villa"


class Property(Base):
    __tablename__ = "properties"

    id              = Column(Integer, primary_key=True, index=True)
    title           = Column(String(255), nullable=False)
    slug            = Column(String(255), unique=True, nullable=False, index=True)
    description     = Column(Text, nullable=False)
    category        = Column(String(20), nullable=False, index=True)
    location        = Column(String(255), nullable=False)
    rating          = Column(Numeric(2, 1, asdecimal=False), nullable=False, default=4.5)
    price           = Column(String(100), nullable=False)
    price_note      = Column(String(255), nullable=False)
    capacity        = Column(Integer, nullable=False)
    check_in_time   = Column(String(50), nullable=False, default="2:00 PM")
    check_out_time  = Column(String(50), nullable=False, default="11:00 AM")
    status          = Column(String(50), nullable=False, default="Verified")
    is_top_selling  = Column(Boolean, nullable=False, default=False)
    is_active       = Column(Boolean, nullable=False, default=True, index=True)
    is_available    = Column(Boolean, nullable=False, default=True)
    contact         = Column(String(100), nullable=True)
    amenities       = Column(JSONList, nullable=False, default=list)
    activities      = Column(JSONList, nullable=False, default=list)
    highlights      = Column(JSONList, nullable=False, default=list)
    policies        = Column(JSONList, nullable=False, default=list)
    created_at      = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at      = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_properties_rating"),
        CheckConstraint("capacity > 0", name="ck_properties_capacity"),
        # listagem pública: ativos, top selling primeiro, mais recentes
        Index("idx_properties_public", "is_active", "is_top_selling", "created_at"),
    )

    images = relationship(
        "PropertyImage",
        back_populates="property",
        cascade="all, delete-orphan",
        order_by="[PropertyImage.display_order, PropertyImage.id]",
    )


class PropertyImage(Base):
    __tablename__ = "property_images"

    id            = Column(Integer, primary_key=True, index=True)
    property_id   = Column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    image_url     = Column(Text, nullable=False)
    display_order = Column(Integer, nullable=False, default=0)
    created_at    = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    property = relationship("Property", back_populates="images")
