from typing import List

from sqlalchemy.orm import Session

from ..models.profesor import Profesor
from ..models.taller import Taller
from ..schemas.profesor import ProfesorCreate, ProfesorUpdate
from ..utils.errors import BadRequestError, service_operation
from .validation import delete_row, get_or_404, update_payload


def _get(db: Session, profesor_id) -> Profesor:
    return get_or_404(db, Profesor, profesor_id, "Profesor")


@service_operation
def crear_profesor(db: Session, data: ProfesorCreate) -> Profesor:
    profesor = Profesor(**data.model_dump())
    db.add(profesor)
    db.commit()
    db.refresh(profesor)
    return profesor


def listar_profesores(db: Session) -> List[Profesor]:
    return db.query(Profesor).order_by(Profesor.creado_en.desc(), Profesor.id.desc()).all()


def obtener_profesor(db: Session, profesor_id) -> Profesor:
    return _get(db, profesor_id)


@service_operation
def actualizar_profesor(db: Session, profesor_id, data: ProfesorUpdate) -> Profesor:
    profesor = _get(db, profesor_id)
    payload = update_payload(data, nullable=("descripcion", "especialidad", "imagen_url"))
    for field, value in payload.items():
        setattr(profesor, field, value)
    db.add(profesor)
    db.commit()
    db.refresh(profesor)
    return profesor


@service_operation
def eliminar_profesor(db: Session, profesor_id) -> Profesor:
    profesor = _get(db, profesor_id)
    if db.query(Taller).filter(Taller.id_profesor == profesor.id).count():
        raise BadRequestError("No puedes eliminar un profesor con talleres asignados")
    return delete_row(db, profesor)
