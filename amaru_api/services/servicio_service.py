from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.categoria import Categoria
from ..models.enums import ESTADOS_REGISTRO, EstadoRegistro
from ..models.servicio import Servicio
from ..models.subcategoria import Subcategoria
from ..schemas.servicio import ServicioCreate, ServicioUpdate
from ..utils.errors import service_operation
from .validation import ensure_choice, ensure_reference, get_or_404, parse_id, try_parse_id, update_payload


def _get(db: Session, servicio_id) -> Servicio:
    return get_or_404(db, Servicio, servicio_id, "Servicio")


def _check_referencias(db: Session, payload: dict) -> None:
    if payload.get("id_categoria") is not None:
        ensure_reference(db, Categoria, payload["id_categoria"],
                         f"La categoría con ID {payload['id_categoria']} no existe")
    if payload.get("id_subcategoria") is not None:
        ensure_reference(db, Subcategoria, payload["id_subcategoria"],
                         f"La subcategoría con ID {payload['id_subcategoria']} no existe")


def _base_query(db: Session):
    return db.query(Servicio).order_by(Servicio.creado_en.desc(), Servicio.id.desc())


@service_operation
def crear_servicio(db: Session, data: ServicioCreate) -> Servicio:
    # unset fields fall back to the column defaults (titulo, descripcion, imagen_url, estado)
    payload = data.model_dump(exclude_none=True)
    _check_referencias(db, payload)
    servicio = Servicio(**payload)
    db.add(servicio)
    db.commit()
    db.refresh(servicio)
    return servicio


def listar_servicios(db: Session) -> List[Servicio]:
    return _base_query(db).all()


def listar_activos(db: Session) -> List[Servicio]:
    return _base_query(db).filter(Servicio.estado == EstadoRegistro.activo.value).all()


def obtener_servicio(db: Session, servicio_id) -> Servicio:
    return _get(db, servicio_id)


@service_operation
def actualizar_servicio(db: Session, servicio_id, data: ServicioUpdate) -> Servicio:
    servicio = _get(db, servicio_id)
    payload = update_payload(data, nullable=("id_categoria", "id_subcategoria", "descripcion"))
    _check_referencias(db, payload)
    for field, value in payload.items():
        setattr(servicio, field, value)
    db.add(servicio)
    db.commit()
    db.refresh(servicio)
    return servicio


@service_operation
def eliminar_servicio(db: Session, servicio_id) -> None:
    servicio = _get(db, servicio_id)
    db.delete(servicio)
    db.commit()


@service_operation
def cambiar_estado(db: Session, servicio_id, estado: str) -> Servicio:
    ensure_choice(estado, ESTADOS_REGISTRO)
    servicio = _get(db, servicio_id)
    servicio.estado = estado
    db.add(servicio)
    db.commit()
    db.refresh(servicio)
    return servicio


def filtrar_servicios(
    db: Session,
    id_categoria: Optional[str] = None,
    id_subcategoria: Optional[str] = None,
    estado: Optional[str] = None,
) -> List[Servicio]:
    """Filters that are malformed or unknown are ignored rather than rejected."""
    q = _base_query(db)
    categoria_id = try_parse_id(id_categoria)
    if categoria_id is not None:
        q = q.filter(Servicio.id_categoria == categoria_id)
    subcategoria_id = try_parse_id(id_subcategoria)
    if subcategoria_id is not None:
        q = q.filter(Servicio.id_subcategoria == subcategoria_id)
    if estado and estado.lower() in ESTADOS_REGISTRO:
        q = q.filter(Servicio.estado == estado.lower())
    return q.all()


def listar_por_categoria(db: Session, categoria_id) -> List[Servicio]:
    return _base_query(db).filter(Servicio.id_categoria == parse_id(categoria_id)).all()


def listar_por_subcategoria(db: Session, subcategoria_id) -> List[Servicio]:
    return _base_query(db).filter(Servicio.id_subcategoria == parse_id(subcategoria_id)).all()
