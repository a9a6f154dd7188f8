import logging
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from ..models.categoria import Categoria
from ..models.enums import ESTADOS_REGISTRO, EstadoRegistro, TipoCategoria
from ..models.servicio import Servicio
from ..models.subcategoria import Subcategoria
from ..models.taller import Taller
from ..schemas.categoria import CategoriaCreate, CategoriaUpdate
from ..utils.errors import BadRequestError, service_operation
from .validation import as_naive_utc, ensure_choice, ensure_unique, get_or_404, update_payload

logger = logging.getLogger(__name__)


def _get(db: Session, categoria_id) -> Categoria:
    return get_or_404(db, Categoria, categoria_id, "Categoría", femenino=True)


@service_operation
def crear_categoria(db: Session, data: CategoriaCreate) -> Categoria:
    ensure_unique(db, Categoria, "nombre", data.nombre, f"Ya existe una categoría con el nombre '{data.nombre}'")
    categoria = Categoria(**data.model_dump())
    db.add(categoria)
    db.commit()
    db.refresh(categoria)
    return categoria


def listar_categorias(db: Session) -> List[Categoria]:
    return db.query(Categoria).order_by(Categoria.nombre.asc()).all()


def listar_activas(db: Session) -> List[Categoria]:
    return listar_por_estado(db, EstadoRegistro.activo.value)


def listar_por_estado(db: Session, estado: str) -> List[Categoria]:
    ensure_choice(estado, ESTADOS_REGISTRO)
    return db.query(Categoria).filter(Categoria.estado == estado).order_by(Categoria.nombre.asc()).all()


def listar_por_tipo(db: Session, tipo: str) -> List[Categoria]:
    ensure_choice(tipo, [t.value for t in TipoCategoria], campo="Tipo")
    return (
        db.query(Categoria)
        .filter(Categoria.tipo == tipo, Categoria.estado == EstadoRegistro.activo.value)
        .order_by(Categoria.nombre.asc())
        .all()
    )


def listar_por_rango_fechas(db: Session, desde: datetime, hasta: datetime) -> List[Categoria]:
    desde, hasta = as_naive_utc(desde), as_naive_utc(hasta)
    if hasta < desde:
        raise BadRequestError("La fecha final debe ser posterior a la fecha inicial")
    return (
        db.query(Categoria)
        .filter(Categoria.creado_en >= desde, Categoria.creado_en <= hasta)
        .order_by(Categoria.creado_en.asc())
        .all()
    )


def obtener_categoria(db: Session, categoria_id) -> Categoria:
    return _get(db, categoria_id)


@service_operation
def actualizar_categoria(db: Session, categoria_id, data: CategoriaUpdate) -> Categoria:
    categoria = _get(db, categoria_id)
    payload = update_payload(data, nullable=("descripcion",))
    if payload.get("nombre") and payload["nombre"] != categoria.nombre:
        ensure_unique(
            db, Categoria, "nombre", payload["nombre"],
            f"Ya existe una categoría con el nombre '{payload['nombre']}'",
            exclude_id=categoria.id,
        )
    for field, value in payload.items():
        setattr(categoria, field, value)
    db.add(categoria)
    db.commit()
    db.refresh(categoria)
    return categoria


def _cambiar_estado_en_cascada(db: Session, categoria_id, estado: str):
    categoria = _get(db, categoria_id)
    categoria.estado = estado
    db.add(categoria)
    # category and children are committed together
    afectadas = (
        db.query(Subcategoria)
        .filter(Subcategoria.id_categoria == categoria.id)
        .update({Subcategoria.estado: estado}, synchronize_session=False)
    )
    db.commit()
    db.refresh(categoria)
    logger.info("Categoría %s -> %s (%d subcategorías)", categoria.id, estado, afectadas)
    return categoria, afectadas


@service_operation
def desactivar_categoria(db: Session, categoria_id):
    """Soft delete: marks the category and all its subcategories as inactivo."""
    return _cambiar_estado_en_cascada(db, categoria_id, EstadoRegistro.inactivo.value)


@service_operation
def activar_categoria(db: Session, categoria_id):
    return _cambiar_estado_en_cascada(db, categoria_id, EstadoRegistro.activo.value)


@service_operation
def eliminar_categoria(db: Session, categoria_id) -> None:
    categoria = _get(db, categoria_id)
    hijos = db.query(Subcategoria).filter(Subcategoria.id_categoria == categoria.id).count()
    if hijos:
        raise BadRequestError("No puedes eliminar una categoría con subcategorías asociadas")
    en_uso = (
        db.query(Taller).filter(Taller.id_categoria == categoria.id).count()
        + db.query(Servicio).filter(Servicio.id_categoria == categoria.id).count()
    )
    if en_uso:
        raise BadRequestError("No puedes eliminar una categoría con talleres o servicios asociados")
    db.delete(categoria)
    db.commit()
