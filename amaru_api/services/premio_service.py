from typing import List

from sqlalchemy.orm import Session

from ..models.premio import Premio
from ..schemas.premio import PremioCreate, PremioUpdate
from ..utils.errors import service_operation
from .validation import delete_row, get_or_404, update_payload


def _get(db: Session, premio_id) -> Premio:
    return get_or_404(db, Premio, premio_id, "Premio")


@service_operation
def crear_premio(db: Session, data: PremioCreate) -> Premio:
    premio = Premio(**data.model_dump())
    db.add(premio)
    db.commit()
    db.refresh(premio)
    return premio


def listar_premios(db: Session) -> List[Premio]:
    """Most recent first: by prize date, then by creation time."""
    return (
        db.query(Premio)
        .order_by(Premio.fecha.desc(), Premio.creado_en.desc(), Premio.id.desc())
        .all()
    )


def obtener_premio(db: Session, premio_id) -> Premio:
    return _get(db, premio_id)


@service_operation
def actualizar_premio(db: Session, premio_id, data: PremioUpdate) -> Premio:
    premio = _get(db, premio_id)
    for field, value in update_payload(data, nullable=("descripcion", "url_imagen")).items():
        setattr(premio, field, value)
    db.add(premio)
    db.commit()
    db.refresh(premio)
    return premio


@service_operation
def eliminar_premio(db: Session, premio_id) -> Premio:
    premio = _get(db, premio_id)
    return delete_row(db, premio)
