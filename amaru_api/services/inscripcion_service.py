import logging
from datetime import datetime
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..config import settings
from ..models.enums import ESTADOS_INSCRIPCION, EstadoInscripcion
from ..models.inscripcion import Inscripcion
from ..models.usuario_sin_password import UsuarioSinPassword
from ..schemas.inscripcion import InscripcionCreate, InscripcionUpdate
from ..utils.errors import service_operation
from .validation import delete_row, ensure_choice, ensure_reference, get_or_404, parse_id, update_payload

logger = logging.getLogger(__name__)


def _get(db: Session, inscripcion_id) -> Inscripcion:
    return get_or_404(db, Inscripcion, inscripcion_id, "Inscripción", femenino=True)


def calcular_total(db: Session, id_usuario: int):
    """Amount owed for a registration.

    Flat fee for now; returns ``(total, moneda)``.
    """
    return settings.PRECIO_INSCRIPCION, settings.MONEDA_INSCRIPCION


@service_operation
def crear_inscripcion(db: Session, data: InscripcionCreate) -> Inscripcion:
    estado = data.estado or EstadoInscripcion.pendiente.value
    ensure_choice(estado, ESTADOS_INSCRIPCION)
    ensure_reference(db, UsuarioSinPassword, data.id_usuario, f"El usuario con ID {data.id_usuario} no existe")

    total, moneda = calcular_total(db, data.id_usuario)
    inscripcion = Inscripcion(
        id_usuario=data.id_usuario,
        email=data.email,
        estado=estado,
        total=total,
        moneda=moneda,
        fecha_inscripcion=datetime.utcnow(),
    )
    db.add(inscripcion)
    db.commit()
    db.refresh(inscripcion)
    logger.info("Inscripción %s creada para el usuario %s", inscripcion.id, inscripcion.id_usuario)
    return inscripcion


def listar_inscripciones(db: Session) -> List[Inscripcion]:
    return db.query(Inscripcion).order_by(Inscripcion.fecha_inscripcion.desc()).all()


def obtener_inscripcion(db: Session, inscripcion_id) -> Inscripcion:
    return _get(db, inscripcion_id)


@service_operation
def actualizar_inscripcion(db: Session, inscripcion_id, data: InscripcionUpdate) -> Inscripcion:
    inscripcion = _get(db, inscripcion_id)
    payload = update_payload(data)
    if "estado" in payload:
        ensure_choice(payload["estado"], ESTADOS_INSCRIPCION)
    for field, value in payload.items():
        setattr(inscripcion, field, value)
    db.add(inscripcion)
    db.commit()
    db.refresh(inscripcion)
    return inscripcion


@service_operation
def eliminar_inscripcion(db: Session, inscripcion_id) -> Inscripcion:
    inscripcion = _get(db, inscripcion_id)
    return delete_row(db, inscripcion, "usuario")


def listar_por_usuario(db: Session, usuario_id) -> List[Inscripcion]:
    return (
        db.query(Inscripcion)
        .filter(Inscripcion.id_usuario == parse_id(usuario_id))
        .order_by(Inscripcion.fecha_inscripcion.desc())
        .all()
    )


def listar_por_estado(db: Session, estado: str) -> List[Inscripcion]:
    ensure_choice(estado, ESTADOS_INSCRIPCION)
    return (
        db.query(Inscripcion)
        .filter(Inscripcion.estado == estado)
        .order_by(Inscripcion.fecha_inscripcion.desc())
        .all()
    )


@service_operation
def cambiar_estado(db: Session, inscripcion_id, estado: str) -> Inscripcion:
    parse_id(inscripcion_id)
    ensure_choice(estado, ESTADOS_INSCRIPCION)
    inscripcion = _get(db, inscripcion_id)
    inscripcion.estado = estado
    db.add(inscripcion)
    db.commit()
    db.refresh(inscripcion)
    logger.info("Inscripción %s -> %s", inscripcion.id, estado)
    return inscripcion


def estadisticas(db: Session) -> dict:
    total = db.query(func.count(Inscripcion.id)).scalar() or 0
    por_estado = {estado: 0 for estado in ESTADOS_INSCRIPCION}
    for estado, count in db.query(Inscripcion.estado, func.count(Inscripcion.id)).group_by(Inscripcion.estado):
        por_estado[estado] = count
    ingresos = (
        db.query(func.coalesce(func.sum(Inscripcion.total), 0))
        .filter(Inscripcion.estado == EstadoInscripcion.aprobado.value)
        .scalar()
    )
    return {"total": total, "por_estado": por_estado, "ingresos_totales": float(ingresos or 0)}
