from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.common import EstadoUpdate
from ..schemas.servicio import ServicioCreate, ServicioResponse, ServicioUpdate
from ..services import servicio_service
from ..utils.dependencies import require_admin
from ..utils.responses import EnvelopeRoute

router = APIRouter(prefix="/api/servicios", tags=["servicios"], route_class=EnvelopeRoute)


def _out(rows) -> List[ServicioResponse]:
    return [ServicioResponse.model_validate(s) for s in rows]


@router.post("", response_model=ServicioResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_admin)])
def crear_servicio(data: ServicioCreate, db: Session = Depends(get_db)):
    return ServicioResponse.model_validate(servicio_service.crear_servicio(db, data))


@router.get("", response_model=List[ServicioResponse])
def listar_servicios(db: Session = Depends(get_db)):
    return _out(servicio_service.listar_servicios(db))


@router.get("/activos", response_model=List[ServicioResponse])
def listar_activos(db: Session = Depends(get_db)):
    return _out(servicio_service.listar_activos(db))


@router.get("/filtrar", response_model=List[ServicioResponse])
def filtrar_servicios(
    id_categoria: Optional[str] = None,
    id_subcategoria: Optional[str] = None,
    estado: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return _out(servicio_service.filtrar_servicios(db, id_categoria, id_subcategoria, estado))


@router.get("/categoria/{categoria_id}", response_model=List[ServicioResponse])
def listar_por_categoria(categoria_id: str, db: Session = Depends(get_db)):
    return _out(servicio_service.listar_por_categoria(db, categoria_id))


@router.get("/subcategoria/{subcategoria_id}", response_model=List[ServicioResponse])
def listar_por_subcategoria(subcategoria_id: str, db: Session = Depends(get_db)):
    return _out(servicio_service.listar_por_subcategoria(db, subcategoria_id))


@router.get("/{servicio_id}", response_model=ServicioResponse)
def obtener_servicio(servicio_id: str, db: Session = Depends(get_db)):
    return ServicioResponse.model_validate(servicio_service.obtener_servicio(db, servicio_id))


@router.patch("/{servicio_id}", response_model=ServicioResponse, dependencies=[Depends(require_admin)])
def actualizar_servicio(servicio_id: str, data: ServicioUpdate, db: Session = Depends(get_db)):
    return ServicioResponse.model_validate(servicio_service.actualizar_servicio(db, servicio_id, data))


@router.patch("/{servicio_id}/estado", response_model=ServicioResponse, dependencies=[Depends(require_admin)])
def cambiar_estado(servicio_id: str, data: EstadoUpdate, db: Session = Depends(get_db)):
    return ServicioResponse.model_validate(servicio_service.cambiar_estado(db, servicio_id, data.estado))


@router.delete("/{servicio_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_admin)])
def eliminar_servicio(servicio_id: str, db: Session = Depends(get_db)):
    servicio_service.eliminar_servicio(db, servicio_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
