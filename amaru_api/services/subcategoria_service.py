import logging
from typing import List

from sqlalchemy.orm import Session

from ..models.categoria import Categoria
from ..models.enums import ESTADOS_REGISTRO, EstadoRegistro
from ..models.servicio import Servicio
from ..models.subcategoria import Subcategoria
from ..models.taller import Taller
from ..schemas.subcategoria import SubcategoriaCreate, SubcategoriaUpdate
from ..utils.errors import BadRequestError, service_operation
from .validation import delete_row, ensure_choice, ensure_reference, ensure_unique, get_or_404, update_payload

logger = logging.getLogger(__name__)


def _get(db: Session, subcategoria_id) -> Subcategoria:
    return get_or_404(db, Subcategoria, subcategoria_id, "Subcategoría", femenino=True)


def _categoria_activa(db: Session, categoria_id) -> Categoria:
    categoria = ensure_reference(db, Categoria, categoria_id, f"La categoría con ID {categoria_id} no existe")
    if categoria.estado != EstadoRegistro.activo.value:
        raise BadRequestError(f"La categoría '{categoria.nombre}' está inactiva")
    return categoria


@service_operation
def crear_subcategoria(db: Session, data: SubcategoriaCreate) -> Subcategoria:
    categoria = _categoria_activa(db, data.id_categoria)
    ensure_unique(
        db, Subcategoria, "nombre", data.nombre,
        f"Ya existe una subcategoría '{data.nombre}' en la categoría '{categoria.nombre}'",
        id_categoria=categoria.id,
    )
    subcategoria = Subcategoria(**data.model_dump())
    db.add(subcategoria)
    db.commit()
    db.refresh(subcategoria)
    return subcategoria


def listar_subcategorias(db: Session) -> List[Subcategoria]:
    return db.query(Subcategoria).order_by(Subcategoria.nombre.asc()).all()


def listar_activas(db: Session) -> List[Subcategoria]:
    return (
        db.query(Subcategoria)
        .filter(Subcategoria.estado == EstadoRegistro.activo.value)
        .order_by(Subcategoria.nombre.asc())
        .all()
    )


def listar_por_categoria(db: Session, categoria_id) -> List[Subcategoria]:
    categoria = get_or_404(db, Categoria, categoria_id, "Categoría", femenino=True)
    return (
        db.query(Subcategoria)
        .filter(Subcategoria.id_categoria == categoria.id)
        .order_by(Subcategoria.nombre.asc())
        .all()
    )


def obtener_subcategoria(db: Session, subcategoria_id) -> Subcategoria:
    return _get(db, subcategoria_id)


@service_operation
def actualizar_subcategoria(db: Session, subcategoria_id, data: SubcategoriaUpdate) -> Subcategoria:
    subcategoria = _get(db, subcategoria_id)
    payload = update_payload(data, nullable=("descripcion",))

    id_categoria = payload.get("id_categoria") or subcategoria.id_categoria
    if id_categoria != subcategoria.id_categoria:
        _categoria_activa(db, id_categoria)
    nombre = payload.get("nombre") or subcategoria.nombre
    if nombre != subcategoria.nombre or id_categoria != subcategoria.id_categoria:
        ensure_unique(
            db, Subcategoria, "nombre", nombre,
            f"Ya existe una subcategoría '{nombre}' en esa categoría",
            exclude_id=subcategoria.id,
            id_categoria=id_categoria,
        )

    for field, value in payload.items():
        setattr(subcategoria, field, value)
    db.add(subcategoria)
    db.commit()
    db.refresh(subcategoria)
    return subcategoria


@service_operation
def cambiar_estado(db: Session, subcategoria_id, estado: str) -> Subcategoria:
    ensure_choice(estado, ESTADOS_REGISTRO)
    subcategoria = _get(db, subcategoria_id)
    subcategoria.estado = estado
    db.add(subcategoria)
    db.commit()
    db.refresh(subcategoria)
    return subcategoria


def _cambiar_estado_por_categoria(db: Session, categoria_id, estado: str) -> dict:
    categoria = get_or_404(db, Categoria, categoria_id, "Categoría", femenino=True)
    count = (
        db.query(Subcategoria)
        .filter(Subcategoria.id_categoria == categoria.id)
        .update({Subcategoria.estado: estado}, synchronize_session=False)
    )
    db.commit()
    logger.info("Subcategorías de la categoría %s -> %s (%d)", categoria.id, estado, count)
    verbo = "activadas" if estado == EstadoRegistro.activo.value else "desactivadas"
    return {"message": f"{count} subcategorías {verbo}", "count": count}


@service_operation
def activar_todas_por_categoria(db: Session, categoria_id) -> dict:
    return _cambiar_estado_por_categoria(db, categoria_id, EstadoRegistro.activo.value)


@service_operation
def desactivar_todas_por_categoria(db: Session, categoria_id) -> dict:
    return _cambiar_estado_por_categoria(db, categoria_id, EstadoRegistro.inactivo.value)


@service_operation
def eliminar_subcategoria(db: Session, subcategoria_id) -> Subcategoria:
    subcategoria = _get(db, subcategoria_id)
    en_uso = (
        db.query(Taller).filter(Taller.id_subcategoria == subcategoria.id).count()
        + db.query(Servicio).filter(Servicio.id_subcategoria == subcategoria.id).count()
    )
    if en_uso:
        raise BadRequestError("No puedes eliminar una subcategoría con talleres o servicios asociados")
    return delete_row(db, subcategoria, "categoria")
