import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.categoria import Categoria
from ..models.enums import ESTADOS_REGISTRO, EstadoRegistro
from ..models.profesor import Profesor
from ..models.subcategoria import Subcategoria
from ..models.taller import Taller
from ..schemas.taller import TallerCreate, TallerUpdate
from ..utils.errors import BadRequestError, service_operation
from .validation import (
    as_naive_utc,
    delete_row,
    ensure_choice,
    ensure_reference,
    get_or_404,
    parse_fecha,
    parse_id,
    try_parse_id,
    update_payload,
)

logger = logging.getLogger(__name__)

DIAS_PROXIMOS = 7


def _get(db: Session, taller_id) -> Taller:
    return get_or_404(db, Taller, taller_id, "Taller")


def _check_fechas(fecha_inicio: datetime, fecha_fin: datetime) -> None:
    if fecha_fin <= fecha_inicio:
        raise BadRequestError("La fecha de fin debe ser posterior a la fecha de inicio")


def _check_referencias(db: Session, payload: dict) -> None:
    if "id_categoria" in payload:
        ensure_reference(db, Categoria, payload["id_categoria"],
                         f"La categoría con ID {payload['id_categoria']} no existe")
    if "id_subcategoria" in payload:
        ensure_reference(db, Subcategoria, payload["id_subcategoria"],
                         f"La subcategoría con ID {payload['id_subcategoria']} no existe")
    if "id_profesor" in payload:
        ensure_reference(db, Profesor, payload["id_profesor"],
                         f"El profesor con ID {payload['id_profesor']} no existe")


@service_operation
def crear_taller(db: Session, data: TallerCreate) -> Taller:
    payload = data.model_dump()
    payload["fecha_inicio"] = as_naive_utc(payload["fecha_inicio"])
    payload["fecha_fin"] = as_naive_utc(payload["fecha_fin"])
    _check_fechas(payload["fecha_inicio"], payload["fecha_fin"])
    _check_referencias(db, payload)

    taller = Taller(**payload, cupo_disponible=payload["cupo_total"])
    db.add(taller)
    db.commit()
    db.refresh(taller)
    return taller


def listar_talleres(db: Session) -> List[Taller]:
    return db.query(Taller).order_by(Taller.fecha_inicio.asc()).all()


def listar_activos(db: Session) -> List[Taller]:
    return (
        db.query(Taller)
        .filter(Taller.estado == EstadoRegistro.activo.value)
        .order_by(Taller.fecha_inicio.asc())
        .all()
    )


def listar_proximos(db: Session) -> List[Taller]:
    """Active talleres starting within the next week that still have free places."""
    ahora = datetime.utcnow()
    limite = ahora + timedelta(days=DIAS_PROXIMOS)
    return (
        db.query(Taller)
        .filter(
            Taller.estado == EstadoRegistro.activo.value,
            Taller.fecha_inicio >= ahora,
            Taller.fecha_inicio <= limite,
            Taller.cupo_disponible > 0,
        )
        .order_by(Taller.fecha_inicio.asc())
        .all()
    )


def obtener_taller(db: Session, taller_id) -> Taller:
    return _get(db, taller_id)


@service_operation
def actualizar_taller(db: Session, taller_id, data: TallerUpdate) -> Taller:
    taller = _get(db, taller_id)
    payload = update_payload(data, nullable=("descripcion", "imagen_url"))
    for campo in ("fecha_inicio", "fecha_fin"):
        if campo in payload:
            payload[campo] = as_naive_utc(payload[campo])

    _check_fechas(
        payload.get("fecha_inicio", taller.fecha_inicio),
        payload.get("fecha_fin", taller.fecha_fin),
    )
    _check_referencias(db, payload)

    if "cupo_total" in payload and payload["cupo_total"] != taller.cupo_total:
        nuevo_total = payload["cupo_total"]
        disponible = taller.cupo_disponible + (nuevo_total - taller.cupo_total)
        payload["cupo_disponible"] = min(max(disponible, 0), nuevo_total)

    for field, value in payload.items():
        setattr(taller, field, value)
    db.add(taller)
    db.commit()
    db.refresh(taller)
    return taller


@service_operation
def eliminar_taller(db: Session, taller_id) -> Taller:
    taller = _get(db, taller_id)
    return delete_row(db, taller, "categoria", "subcategoria", "profesor")


@service_operation
def cambiar_estado(db: Session, taller_id, estado: str) -> Taller:
    ensure_choice(estado, ESTADOS_REGISTRO)
    taller = _get(db, taller_id)
    taller.estado = estado
    db.add(taller)
    db.commit()
    db.refresh(taller)
    return taller


@service_operation
def actualizar_cupo(db: Session, taller_id, cupos_reservados: int) -> Taller:
    """Reserve (positive) or release (negative) places on a taller."""
    taller = _get(db, taller_id)
    nuevo = taller.cupo_disponible - cupos_reservados
    if nuevo < 0:
        raise BadRequestError("No hay cupos disponibles suficientes")
    if nuevo > taller.cupo_total:
        raise BadRequestError("El cupo disponible no puede superar el cupo total")
    taller.cupo_disponible = nuevo
    db.add(taller)
    db.commit()
    db.refresh(taller)
    logger.info("Taller %s: cupo disponible %d/%d", taller.id, taller.cupo_disponible, taller.cupo_total)
    return taller


def filtrar_talleres(
    db: Session,
    id_categoria: Optional[str] = None,
    id_subcategoria: Optional[str] = None,
    estado: Optional[str] = None,
    fecha_inicio: Optional[str] = None,
    fecha_fin: Optional[str] = None,
) -> List[Taller]:
    q = db.query(Taller)
    categoria_id = try_parse_id(id_categoria)
    if categoria_id is not None:
        q = q.filter(Taller.id_categoria == categoria_id)
    subcategoria_id = try_parse_id(id_subcategoria)
    if subcategoria_id is not None:
        q = q.filter(Taller.id_subcategoria == subcategoria_id)
    if estado and estado.lower() in ESTADOS_REGISTRO:
        q = q.filter(Taller.estado == estado.lower())
    # both bounds apply to the start date
    desde = parse_fecha(fecha_inicio)
    if desde is not None:
        q = q.filter(Taller.fecha_inicio >= desde)
    hasta = parse_fecha(fecha_fin)
    if hasta is not None:
        q = q.filter(Taller.fecha_inicio <= hasta)
    return q.order_by(Taller.fecha_inicio.asc()).all()


def listar_por_subcategoria(db: Session, subcategoria_id) -> List[Taller]:
    return (
        db.query(Taller)
        .filter(Taller.id_subcategoria == parse_id(subcategoria_id))
        .order_by(Taller.fecha_inicio.asc())
        .all()
    )


def listar_por_profesor(db: Session, profesor_id) -> List[Taller]:
    return (
        db.query(Taller)
        .filter(Taller.id_profesor == parse_id(profesor_id))
        .order_by(Taller.fecha_inicio.asc())
        .all()
    )
