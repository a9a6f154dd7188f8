from typing import List

from sqlalchemy.orm import Session

from ..models.actividad import Actividad
from ..models.festival import Festival
from ..schemas.actividad import ActividadCreate, ActividadUpdate
from ..utils.errors import BadRequestError, service_operation
from .validation import delete_row, get_or_404, update_payload


def _get(db: Session, actividad_id) -> Actividad:
    return get_or_404(db, Actividad, actividad_id, "Actividad", femenino=True)


@service_operation
def crear_actividad(db: Session, data: ActividadCreate) -> Actividad:
    actividad = Actividad(**data.model_dump())
    db.add(actividad)
    db.commit()
    db.refresh(actividad)
    return actividad


def listar_actividades(db: Session) -> List[Actividad]:
    return db.query(Actividad).order_by(Actividad.creado_en.desc(), Actividad.id.desc()).all()


def obtener_actividad(db: Session, actividad_id) -> Actividad:
    return _get(db, actividad_id)


@service_operation
def actualizar_actividad(db: Session, actividad_id, data: ActividadUpdate) -> Actividad:
    actividad = _get(db, actividad_id)
    for field, value in update_payload(data, nullable=("descripcion",)).items():
        setattr(actividad, field, value)
    db.add(actividad)
    db.commit()
    db.refresh(actividad)
    return actividad


@service_operation
def eliminar_actividad(db: Session, actividad_id) -> Actividad:
    actividad = _get(db, actividad_id)
    if db.query(Festival).filter(Festival.id_actividad == actividad.id).count():
        raise BadRequestError("No puedes eliminar una actividad con festivales asociados")
    return delete_row(db, actividad)
