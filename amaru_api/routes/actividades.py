from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.actividad import ActividadCreate, ActividadResponse, ActividadUpdate
from ..services import actividad_service
from ..utils.dependencies import require_admin
from ..utils.responses import EnvelopeRoute

router = APIRouter(prefix="/api/actividades", tags=["actividades"], route_class=EnvelopeRoute)


@router.post("", response_model=ActividadResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_admin)])
def crear_actividad(data: ActividadCreate, db: Session = Depends(get_db)):
    return ActividadResponse.model_validate(actividad_service.crear_actividad(db, data))


@router.get("", response_model=List[ActividadResponse])
def listar_actividades(db: Session = Depends(get_db)):
    return [ActividadResponse.model_validate(a) for a in actividad_service.listar_actividades(db)]


@router.get("/{actividad_id}", response_model=ActividadResponse)
def obtener_actividad(actividad_id: str, db: Session = Depends(get_db)):
    return ActividadResponse.model_validate(actividad_service.obtener_actividad(db, actividad_id))


@router.patch("/{actividad_id}", response_model=ActividadResponse, dependencies=[Depends(require_admin)])
def actualizar_actividad(actividad_id: str, data: ActividadUpdate, db: Session = Depends(get_db)):
    return ActividadResponse.model_validate(actividad_service.actualizar_actividad(db, actividad_id, data))


@router.delete("/{actividad_id}", response_model=ActividadResponse, dependencies=[Depends(require_admin)])
def eliminar_actividad(actividad_id: str, db: Session = Depends(get_db)):
    return ActividadResponse.model_validate(actividad_service.eliminar_actividad(db, actividad_id))
