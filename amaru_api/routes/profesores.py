from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.profesor import ProfesorCreate, ProfesorResponse, ProfesorUpdate
from ..services import profesor_service
from ..utils.dependencies import require_admin
from ..utils.responses import EnvelopeRoute

router = APIRouter(prefix="/api/profesores", tags=["profesores"], route_class=EnvelopeRoute)


@router.post("", response_model=ProfesorResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_admin)])
def crear_profesor(data: ProfesorCreate, db: Session = Depends(get_db)):
    return ProfesorResponse.model_validate(profesor_service.crear_profesor(db, data))


@router.get("", response_model=List[ProfesorResponse])
def listar_profesores(db: Session = Depends(get_db)):
    return [ProfesorResponse.model_validate(p) for p in profesor_service.listar_profesores(db)]


@router.get("/{profesor_id}", response_model=ProfesorResponse)
def obtener_profesor(profesor_id: str, db: Session = Depends(get_db)):
    return ProfesorResponse.model_validate(profesor_service.obtener_profesor(db, profesor_id))


@router.patch("/{profesor_id}", response_model=ProfesorResponse, dependencies=[Depends(require_admin)])
def actualizar_profesor(profesor_id: str, data: ProfesorUpdate, db: Session = Depends(get_db)):
    return ProfesorResponse.model_validate(profesor_service.actualizar_profesor(db, profesor_id, data))


@router.delete("/{profesor_id}", response_model=ProfesorResponse, dependencies=[Depends(require_admin)])
def eliminar_profesor(profesor_id: str, db: Session = Depends(get_db)):
    return ProfesorResponse.model_validate(profesor_service.eliminar_profesor(db, profesor_id))
