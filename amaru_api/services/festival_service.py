from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from ..models.actividad import Actividad
from ..models.enums import ESTADOS_REGISTRO, EstadoRegistro
from ..models.festival import Festival
from ..schemas.festival import FestivalCreate, FestivalUpdate
from ..utils.errors import BadRequestError, service_operation
from .validation import (
    as_naive_utc,
    delete_row,
    ensure_choice,
    ensure_reference,
    get_or_404,
    parse_id,
    update_payload,
)


def _get(db: Session, festival_id) -> Festival:
    return get_or_404(db, Festival, festival_id, "Festival")


def _check_fechas(fecha_inicio: datetime, fecha_fin: datetime) -> None:
    if fecha_fin < fecha_inicio:
        raise BadRequestError("La fecha de fin no puede ser anterior a la fecha de inicio")


def _activos(db: Session):
    return db.query(Festival).filter(Festival.estado == EstadoRegistro.activo.value)


@service_operation
def crear_festival(db: Session, data: FestivalCreate) -> Festival:
    payload = data.model_dump()
    payload["fecha_inicio"] = as_naive_utc(payload["fecha_inicio"])
    payload["fecha_fin"] = as_naive_utc(payload["fecha_fin"])
    _check_fechas(payload["fecha_inicio"], payload["fecha_fin"])
    ensure_reference(db, Actividad, data.id_actividad, f"La actividad con ID {data.id_actividad} no existe")

    festival = Festival(**payload)
    db.add(festival)
    db.commit()
    db.refresh(festival)
    return festival


def listar_festivales(db: Session) -> List[Festival]:
    return db.query(Festival).order_by(Festival.fecha_inicio.desc()).all()


def listar_activos(db: Session) -> List[Festival]:
    return _activos(db).order_by(Festival.fecha_inicio.asc()).all()


def listar_proximos(db: Session) -> List[Festival]:
    return (
        _activos(db)
        .filter(Festival.fecha_inicio >= datetime.utcnow())
        .order_by(Festival.fecha_inicio.asc())
        .all()
    )


def listar_por_tipo(db: Session, tipo: str) -> List[Festival]:
    return (
        _activos(db)
        .filter(Festival.tipo.ilike(f"%{tipo.strip()}%"))
        .order_by(Festival.fecha_inicio.asc())
        .all()
    )


def listar_por_actividad(db: Session, actividad_id) -> List[Festival]:
    return (
        db.query(Festival)
        .filter(Festival.id_actividad == parse_id(actividad_id))
        .order_by(Festival.fecha_inicio.asc())
        .all()
    )


def obtener_festival(db: Session, festival_id) -> Festival:
    return _get(db, festival_id)


@service_operation
def actualizar_festival(db: Session, festival_id, data: FestivalUpdate) -> Festival:
    festival = _get(db, festival_id)
    payload = update_payload(data, nullable=("descripcion", "imagen_url"))
    for campo in ("fecha_inicio", "fecha_fin"):
        if campo in payload:
            payload[campo] = as_naive_utc(payload[campo])
    _check_fechas(
        payload.get("fecha_inicio", festival.fecha_inicio),
        payload.get("fecha_fin", festival.fecha_fin),
    )
    if "id_actividad" in payload:
        ensure_reference(db, Actividad, payload["id_actividad"],
                         f"La actividad con ID {payload['id_actividad']} no existe")

    for field, value in payload.items():
        setattr(festival, field, value)
    db.add(festival)
    db.commit()
    db.refresh(festival)
    return festival


@service_operation
def cambiar_estado(db: Session, festival_id, estado: str) -> Festival:
    ensure_choice(estado, ESTADOS_REGISTRO)
    festival = _get(db, festival_id)
    festival.estado = estado
    db.add(festival)
    db.commit()
    db.refresh(festival)
    return festival


@service_operation
def eliminar_festival(db: Session, festival_id) -> Festival:
    festival = _get(db, festival_id)
    return delete_row(db, festival, "actividad")
