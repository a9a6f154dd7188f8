from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.common import ConteoResponse, EstadoUpdate
from ..schemas.subcategoria import SubcategoriaCreate, SubcategoriaResponse, SubcategoriaUpdate
from ..services import subcategoria_service
from ..utils.dependencies import require_admin
from ..utils.responses import EnvelopeRoute

router = APIRouter(prefix="/api/subcategorias", tags=["subcategorias"], route_class=EnvelopeRoute)


def _out(rows) -> List[SubcategoriaResponse]:
    return [SubcategoriaResponse.model_validate(s) for s in rows]


@router.post("", response_model=SubcategoriaResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_admin)])
def crear_subcategoria(data: SubcategoriaCreate, db: Session = Depends(get_db)):
    return SubcategoriaResponse.model_validate(subcategoria_service.crear_subcategoria(db, data))


@router.get("", response_model=List[SubcategoriaResponse])
def listar_subcategorias(db: Session = Depends(get_db)):
    return _out(subcategoria_service.listar_subcategorias(db))


@router.get("/activos", response_model=List[SubcategoriaResponse])
def listar_activas(db: Session = Depends(get_db)):
    return _out(subcategoria_service.listar_activas(db))


@router.get("/categoria/{categoria_id}", response_model=List[SubcategoriaResponse])
def listar_por_categoria(categoria_id: str, db: Session = Depends(get_db)):
    return _out(subcategoria_service.listar_por_categoria(db, categoria_id))


@router.patch("/categoria/{categoria_id}/activar", response_model=ConteoResponse,
              dependencies=[Depends(require_admin)])
def activar_por_categoria(categoria_id: str, db: Session = Depends(get_db)):
    return subcategoria_service.activar_todas_por_categoria(db, categoria_id)


@router.patch("/categoria/{categoria_id}/desactivar", response_model=ConteoResponse,
              dependencies=[Depends(require_admin)])
def desactivar_por_categoria(categoria_id: str, db: Session = Depends(get_db)):
    return subcategoria_service.desactivar_todas_por_categoria(db, categoria_id)


@router.get("/{subcategoria_id}", response_model=SubcategoriaResponse)
def obtener_subcategoria(subcategoria_id: str, db: Session = Depends(get_db)):
    return SubcategoriaResponse.model_validate(subcategoria_service.obtener_subcategoria(db, subcategoria_id))


@router.patch("/{subcategoria_id}", response_model=SubcategoriaResponse, dependencies=[Depends(require_admin)])
def actualizar_subcategoria(subcategoria_id: str, data: SubcategoriaUpdate, db: Session = Depends(get_db)):
    return SubcategoriaResponse.model_validate(
        subcategoria_service.actualizar_subcategoria(db, subcategoria_id, data)
    )


@router.patch("/{subcategoria_id}/estado", response_model=SubcategoriaResponse,
              dependencies=[Depends(require_admin)])
def cambiar_estado(subcategoria_id: str, data: EstadoUpdate, db: Session = Depends(get_db)):
    return SubcategoriaResponse.model_validate(
        subcategoria_service.cambiar_estado(db, subcategoria_id, data.estado)
    )


@router.delete("/{subcategoria_id}", response_model=SubcategoriaResponse,
               dependencies=[Depends(require_admin)])
def eliminar_subcategoria(subcategoria_id: str, db: Session = Depends(get_db)):
    return SubcategoriaResponse.model_validate(subcategoria_service.eliminar_subcategoria(db, subcategoria_id))
