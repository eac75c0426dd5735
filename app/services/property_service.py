"""
Repositório de propriedades: leitura, criação, atualização parcial,
remoção e alternância de status, com as imagens gravadas na mesma transação
"""
import logging
import re
from typing import Any, Iterable, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.core.config import settings
from app.core.exceptions import DuplicateTitleError, PropertyNotFoundError, ValidationFailedError
from app.models.property_model import Property, PropertyImage, utcnow
from app.schemas import property_schema

logger = logging.getLogger(__name__)

TOGGLEABLE_FIELDS = ("is_active", "is_top_selling", "is_available")

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def generate_slug(title: str) -> str:
    """
    Gera o slug público a partir do título

    "Luxury Dome Resort!!" -> "luxury-dome-resort"
    """
    return _NON_ALNUM.sub("-", title.lower()).strip("-")


def _slug_for(title: str) -> str:
    slug = generate_slug(title)
    if not slug:
        raise ValidationFailedError("Title must contain at least one letter or digit.", field="title")
    return slug


def _build_images(image_urls: Iterable[str]) -> List[PropertyImage]:
    return [
        PropertyImage(image_url=url, display_order=position)
        for position, url in enumerate(image_urls)
    ]


def _is_duplicate_slug(exc: IntegrityError) -> bool:
    orig = getattr(exc, "orig", None)
    # 23505 = unique_violation no PostgreSQL
    if getattr(orig, "pgcode", None) == "23505":
        return True
    message = str(orig or exc).lower()
    return "unique constraint failed" in message or "duplicate key" in message


def _commit(db: Session) -> None:
    """Confirma a transação; qualquer falha desfaz tudo antes de propagar"""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if _is_duplicate_slug(exc):
            raise DuplicateTitleError() from exc
        raise
    except Exception:
        db.rollback()
        raise


def _base_query(db: Session):
    return db.query(Property).options(selectinload(Property.images))


# Leitura

def list_properties(db: Session) -> List[Property]:
    return (
        _base_query(db)
        .order_by(Property.created_at.desc(), Property.id.desc())
        .all()
    )


def list_public_properties(db: Session) -> List[Property]:
    return (
        _base_query(db)
        .filter(Property.is_active.is_(True))
        .order_by(Property.is_top_selling.desc(), Property.created_at.desc(), Property.id.desc())
        .all()
    )


def get_property(db: Session, property_id: int) -> Property:
    db_property = _base_query(db).filter(Property.id == property_id).first()
    if not db_property:
        raise PropertyNotFoundError()
    return db_property


def get_public_property_by_slug(db: Session, slug: str) -> Property:
    db_property = (
        _base_query(db)
        .filter(Property.slug == slug, Property.is_active.is_(True))
        .first()
    )
    if not db_property:
        raise PropertyNotFoundError()
    return db_property


# Escrita

def create_property(db: Session, property_in: property_schema.PropertyCreate) -> Property:
    slug = _slug_for(property_in.title)

    data = property_in.model_dump(exclude={"images"})
    if not data.get("contact"):
        data["contact"] = settings.DEFAULT_CONTACT

    now = utcnow()
    db_property = Property(slug=slug, created_at=now, updated_at=now, **data)
    # imagens entram no mesmo flush da propriedade, em ordem de envio
    db_property.images = _build_images(property_in.images)
    db.add(db_property)

    try:
        _commit(db)
    except DuplicateTitleError:
        logger.warning(f"Título duplicado ao criar propriedade: slug '{slug}' já existe")
        raise

    db.refresh(db_property)
    logger.info(
        f"Propriedade {db_property.id} criada (slug={db_property.slug}, "
        f"{len(property_in.images)} imagens)"
    )
    return db_property


def update_property(
    db: Session,
    property_id: int,
    property_in: property_schema.PropertyUpdate,
) -> Property:
    db_property = get_property(db, property_id)

    update_data = property_in.model_dump(exclude_unset=True, exclude={"images"})
    if "title" in update_data:
        update_data["slug"] = _slug_for(update_data["title"])

    for field, value in update_data.items():
        setattr(db_property, field, value)
    db_property.updated_at = utcnow()

    # lista presente (mesmo vazia) substitui o conjunto anterior por completo
    if "images" in property_in.model_fields_set:
        db_property.images = _build_images(property_in.images or [])

    try:
        _commit(db)
    except DuplicateTitleError:
        logger.warning(f"Título duplicado ao atualizar propriedade {property_id}")
        raise

    db.refresh(db_property)
    logger.info(f"Propriedade {property_id} atualizada (campos: {sorted(property_in.model_fields_set)})")
    return db_property


def delete_property(db: Session, property_id: int) -> None:
    db_property = db.query(Property).filter(Property.id == property_id).first()
    if not db_property:
        raise PropertyNotFoundError()

    db.delete(db_property)
    _commit(db)
    logger.info(f"Propriedade {property_id} removida")


def toggle_property_status(db: Session, property_id: int, field: str, value: Any) -> Property:
    """
    Altera um único flag booleano da propriedade.

    Só is_active, is_top_selling e is_available são aceitos; qualquer outro
    campo é rejeitado antes de tocar o banco.
    """
    if field not in TOGGLEABLE_FIELDS:
        raise ValidationFailedError(
            "Invalid field. Only is_active, is_top_selling and is_available can be toggled.",
            field=field,
        )
    if not isinstance(value, bool):
        raise ValidationFailedError(f"Value for '{field}' must be a boolean.", field=field)

    db_property = db.query(Property).filter(Property.id == property_id).first()
    if not db_property:
        raise PropertyNotFoundError()

    setattr(db_property, field, value)
    db_property.updated_at = utcnow()
    _commit(db)
    db.refresh(db_property)
    logger.info(f"Propriedade {property_id}: {field}={value}")
    return db_property
