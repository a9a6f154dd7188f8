from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.common import EstadoUpdate
from ..schemas.festival import FestivalCreate, FestivalResponse, FestivalUpdate
from ..services import festival_service
from ..utils.dependencies import require_admin
from ..utils.responses import EnvelopeRoute

router = APIRouter(prefix="/api/festivales", tags=["festivales"], route_class=EnvelopeRoute)


def _out(rows) -> List[FestivalResponse]:
    return [FestivalResponse.model_validate(f) for f in rows]


@router.post("", response_model=FestivalResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_admin)])
def crear_festival(data: FestivalCreate, db: Session = Depends(get_db)):
    return FestivalResponse.model_validate(festival_service.crear_festival(db, data))


@router.get("", response_model=List[FestivalResponse])
def listar_festivales(db: Session = Depends(get_db)):
    return _out(festival_service.listar_festivales(db))


@router.get("/activos", response_model=List[FestivalResponse])
def listar_activos(db: Session = Depends(get_db)):
    return _out(festival_service.listar_activos(db))


@router.get("/proximos", response_model=List[FestivalResponse])
def listar_proximos(db: Session = Depends(get_db)):
    return _out(festival_service.listar_proximos(db))


@router.get("/tipo/{tipo}", response_model=List[FestivalResponse])
def listar_por_tipo(tipo: str, db: Session = Depends(get_db)):
    return _out(festival_service.listar_por_tipo(db, tipo))


@router.get("/actividad/{actividad_id}", response_model=List[FestivalResponse])
def listar_por_actividad(actividad_id: str, db: Session = Depends(get_db)):
    return _out(festival_service.listar_por_actividad(db, actividad_id))


@router.get("/{festival_id}", response_model=FestivalResponse)
def obtener_festival(festival_id: str, db: Session = Depends(get_db)):
    return FestivalResponse.model_validate(festival_service.obtener_festival(db, festival_id))


@router.patch("/{festival_id}", response_model=FestivalResponse, dependencies=[Depends(require_admin)])
def actualizar_festival(festival_id: str, data: FestivalUpdate, db: Session = Depends(get_db)):
    return FestivalResponse.model_validate(festival_service.actualizar_festival(db, festival_id, data))


@router.patch("/{festival_id}/estado", response_model=FestivalResponse, dependencies=[Depends(require_admin)])
def cambiar_estado(festival_id: str, data: EstadoUpdate, db: Session = Depends(get_db)):
    return FestivalResponse.model_validate(festival_service.cambiar_estado(db, festival_id, data.estado))


@router.delete("/{festival_id}", response_model=FestivalResponse, dependencies=[Depends(require_admin)])
def eliminar_festival(festival_id: str, db: Session = Depends(get_db)):
    return FestivalResponse.model_validate(festival_service.eliminar_festival(db, festival_id))
