from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.categoria import (
    CategoriaCascadaResponse,
    CategoriaCreate,
    CategoriaResponse,
    CategoriaUpdate,
)
from ..services import categoria_service
from ..utils.dependencies import require_admin
from ..utils.responses import EnvelopeRoute

router = APIRouter(prefix="/api/categorias", tags=["categorias"], route_class=EnvelopeRoute)


def _cascada(resultado) -> CategoriaCascadaResponse:
    categoria, afectadas = resultado
    return CategoriaCascadaResponse(
        categoria=CategoriaResponse.model_validate(categoria),
        subcategorias_actualizadas=afectadas,
    )


@router.post("", response_model=CategoriaResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_admin)])
def crear_categoria(data: CategoriaCreate, db: Session = Depends(get_db)):
    return CategoriaResponse.model_validate(categoria_service.crear_categoria(db, data))


@router.get("", response_model=List[CategoriaResponse])
def listar_categorias(db: Session = Depends(get_db)):
    return [CategoriaResponse.model_validate(c) for c in categoria_service.listar_categorias(db)]


@router.get("/activos", response_model=List[CategoriaResponse])
def listar_activas(db: Session = Depends(get_db)):
    return [CategoriaResponse.model_validate(c) for c in categoria_service.listar_activas(db)]


@router.get("/estado/{estado}", response_model=List[CategoriaResponse])
def listar_por_estado(estado: str, db: Session = Depends(get_db)):
    return [CategoriaResponse.model_validate(c) for c in categoria_service.listar_por_estado(db, estado)]


@router.get("/tipo/{tipo}", response_model=List[CategoriaResponse])
def listar_por_tipo(tipo: str, db: Session = Depends(get_db)):
    return [CategoriaResponse.model_validate(c) for c in categoria_service.listar_por_tipo(db, tipo)]


@router.get("/rango-fechas", response_model=List[CategoriaResponse])
def listar_por_rango_fechas(desde: datetime, hasta: datetime, db: Session = Depends(get_db)):
    return [
        CategoriaResponse.model_validate(c)
        for c in categoria_service.listar_por_rango_fechas(db, desde, hasta)
    ]


@router.get("/{categoria_id}", response_model=CategoriaResponse)
def obtener_categoria(categoria_id: str, db: Session = Depends(get_db)):
    return CategoriaResponse.model_validate(categoria_service.obtener_categoria(db, categoria_id))


@router.patch("/{categoria_id}", response_model=CategoriaResponse, dependencies=[Depends(require_admin)])
def actualizar_categoria(categoria_id: str, data: CategoriaUpdate, db: Session = Depends(get_db)):
    return CategoriaResponse.model_validate(categoria_service.actualizar_categoria(db, categoria_id, data))


@router.patch("/{categoria_id}/desactivar", response_model=CategoriaCascadaResponse,
              dependencies=[Depends(require_admin)])
def desactivar_categoria(categoria_id: str, db: Session = Depends(get_db)):
    """Deactivates the category and every subcategory under it."""
    return _cascada(categoria_service.desactivar_categoria(db, categoria_id))


@router.patch("/{categoria_id}/activar", response_model=CategoriaCascadaResponse,
              dependencies=[Depends(require_admin)])
def activar_categoria(categoria_id: str, db: Session = Depends(get_db)):
    return _cascada(categoria_service.activar_categoria(db, categoria_id))


@router.delete("/{categoria_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_admin)])
def eliminar_categoria(categoria_id: str, db: Session = Depends(get_db)):
    categoria_service.eliminar_categoria(db, categoria_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
