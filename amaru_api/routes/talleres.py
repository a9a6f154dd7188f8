from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.common import EstadoUpdate
from ..schemas.taller import TallerCreate, TallerCupoUpdate, TallerResponse, TallerUpdate
from ..services import taller_service
from ..utils.dependencies import require_admin
from ..utils.responses import EnvelopeRoute

router = APIRouter(prefix="/api/talleres", tags=["talleres"], route_class=EnvelopeRoute)


def _out(rows) -> List[TallerResponse]:
    return [TallerResponse.model_validate(t) for t in rows]


@router.post("", response_model=TallerResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_admin)])
def crear_taller(data: TallerCreate, db: Session = Depends(get_db)):
    return TallerResponse.model_validate(taller_service.crear_taller(db, data))


@router.get("", response_model=List[TallerResponse])
def listar_talleres(db: Session = Depends(get_db)):
    return _out(taller_service.listar_talleres(db))


@router.get("/activos", response_model=List[TallerResponse])
def listar_activos(db: Session = Depends(get_db)):
    return _out(taller_service.listar_activos(db))


@router.get("/proximos", response_model=List[TallerResponse])
def listar_proximos(db: Session = Depends(get_db)):
    return _out(taller_service.listar_proximos(db))


@router.get("/filtrar", response_model=List[TallerResponse])
def filtrar_talleres(
    id_categoria: Optional[str] = None,
    id_subcategoria: Optional[str] = None,
    estado: Optional[str] = None,
    fecha_inicio: Optional[str] = None,
    fecha_fin: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return _out(taller_service.filtrar_talleres(db, id_categoria, id_subcategoria, estado, fecha_inicio, fecha_fin))


@router.get("/subcategoria/{subcategoria_id}", response_model=List[TallerResponse])
def listar_por_subcategoria(subcategoria_id: str, db: Session = Depends(get_db)):
    return _out(taller_service.listar_por_subcategoria(db, subcategoria_id))


@router.get("/profesor/{profesor_id}", response_model=List[TallerResponse])
def listar_por_profesor(profesor_id: str, db: Session = Depends(get_db)):
    return _out(taller_service.listar_por_profesor(db, profesor_id))


@router.get("/{taller_id}", response_model=TallerResponse)
def obtener_taller(taller_id: str, db: Session = Depends(get_db)):
    return TallerResponse.model_validate(taller_service.obtener_taller(db, taller_id))


@router.patch("/{taller_id}", response_model=TallerResponse, dependencies=[Depends(require_admin)])
def actualizar_taller(taller_id: str, data: TallerUpdate, db: Session = Depends(get_db)):
    return TallerResponse.model_validate(taller_service.actualizar_taller(db, taller_id, data))


@router.patch("/{taller_id}/estado", response_model=TallerResponse, dependencies=[Depends(require_admin)])
def cambiar_estado(taller_id: str, data: EstadoUpdate, db: Session = Depends(get_db)):
    return TallerResponse.model_validate(taller_service.cambiar_estado(db, taller_id, data.estado))


@router.patch("/{taller_id}/cupo", response_model=TallerResponse, dependencies=[Depends(require_admin)])
def actualizar_cupo(taller_id: str, data: TallerCupoUpdate, db: Session = Depends(get_db)):
    return TallerResponse.model_validate(taller_service.actualizar_cupo(db, taller_id, data.cupos_reservados))


@router.delete("/{taller_id}", response_model=TallerResponse, dependencies=[Depends(require_admin)])
def eliminar_taller(taller_id: str, db: Session = Depends(get_db)):
    return TallerResponse.model_validate(taller_service.eliminar_taller(db, taller_id))
