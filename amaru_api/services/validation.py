"""Validation shared by every service: id format, existence, uniqueness, enums."""
from datetime import datetime, timezone
from typing import Any, Iterable, Optional, Type, Union

from sqlalchemy.orm import Session

from ..database import Base
from ..utils.errors import BadRequestError, ConflictError, NotFoundError

# upper bound of the Integer primary key columns
MAX_ID = 2**31 - 1


def parse_id(raw_id: Union[int, str], label: str = "ID") -> int:
    """Return ``raw_id`` as a positive int within the key range or raise BadRequestError."""
    if isinstance(raw_id, bool):
        raise BadRequestError(f"{label} {raw_id} no es válido")
    if isinstance(raw_id, int):
        value = raw_id
    else:
        text = str(raw_id).strip()
        if not (text.isascii() and text.isdigit()) or len(text) > len(str(MAX_ID)):
            raise BadRequestError(f"{label} {raw_id} no es válido")
        value = int(text)
    if value <= 0 or value > MAX_ID:
        raise BadRequestError(f"{label} {raw_id} no es válido")
    return value


def try_parse_id(raw_id: Optional[Union[int, str]]) -> Optional[int]:
    """Like parse_id, but returns None for missing or malformed ids (used by filters)."""
    if raw_id is None or raw_id == "":
        return None
    try:
        return parse_id(raw_id)
    except BadRequestError:
        return None


def get_or_404(db: Session, model: Type[Base], raw_id: Union[int, str], nombre: str, femenino: bool = False):
    """Validate the id format, then load the row or raise NotFoundError.

    ``nombre`` is the human label used in messages ("Taller", "Categoría").
    """
    entity_id = parse_id(raw_id)
    obj = db.get(model, entity_id)
    if obj is None:
        sufijo = "no encontrada" if femenino else "no encontrado"
        raise NotFoundError(f"{nombre} con ID {entity_id} {sufijo}")
    return obj


def ensure_reference(db: Session, model: Type[Base], raw_id: Union[int, str], mensaje: str):
    """Load a referenced row; a missing reference is a bad request, not a 404."""
    entity_id = parse_id(raw_id)
    obj = db.get(model, entity_id)
    if obj is None:
        raise BadRequestError(mensaje)
    return obj


def ensure_unique(
    db: Session,
    model: Type[Base],
    field: str,
    value: Any,
    mensaje: str,
    exclude_id: Optional[int] = None,
    **scope: Any,
) -> None:
    """Raise ConflictError when another row already uses ``value`` for ``field``.

    Extra keyword arguments narrow the check (e.g. ``id_categoria=3`` for names
    unique within a parent).
    """
    q = db.query(model).filter(getattr(model, field) == value)
    for column, scoped_value in scope.items():
        q = q.filter(getattr(model, column) == scoped_value)
    if exclude_id is not None:
        q = q.filter(model.id != exclude_id)
    if q.first() is not None:
        raise ConflictError(mensaje)


def ensure_choice(value: str, allowed: Iterable[str], campo: str = "Estado") -> str:
    allowed = list(allowed)
    if value not in allowed:
        raise BadRequestError(f"{campo} debe ser: {', '.join(allowed)}")
    return value


def update_payload(data, nullable: Iterable[str] = ()) -> dict:
    """Fields explicitly sent in a partial update.

    An explicit ``null`` is only honoured for columns listed in ``nullable``;
    for required columns it means "leave unchanged".
    """
    nullable = set(nullable)
    return {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if value is not None or field in nullable
    }


def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Columns store naive UTC datetimes; normalise aware input before comparing."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_fecha(raw: Optional[str]) -> Optional[datetime]:
    """Parse an ISO date/datetime filter value; malformed values yield None."""
    if not raw:
        return None
    text = raw.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return as_naive_utc(datetime.fromisoformat(text))
    except ValueError:
        return None


def delete_row(db: Session, obj, *relations: str):
    """Delete ``obj`` and return it so the caller can echo the removed record.

    ``relations`` are loaded before the commit; the instance is detached afterwards.
    """
    for name in relations:
        getattr(obj, name)
    db.delete(obj)
    db.commit()
    return obj
