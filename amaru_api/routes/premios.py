from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.premio import PremioCreate, PremioResponse, PremioUpdate
from ..services import premio_service
from ..utils.dependencies import require_admin
from ..utils.responses import EnvelopeRoute

router = APIRouter(prefix="/api/premios", tags=["premios"], route_class=EnvelopeRoute)


@router.post("", response_model=PremioResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_admin)])
def crear_premio(data: PremioCreate, db: Session = Depends(get_db)):
    return PremioResponse.model_validate(premio_service.crear_premio(db, data))


@router.get("", response_model=List[PremioResponse])
def listar_premios(db: Session = Depends(get_db)):
    return [PremioResponse.model_validate(p) for p in premio_service.listar_premios(db)]


@router.get("/{premio_id}", response_model=PremioResponse)
def obtener_premio(premio_id: str, db: Session = Depends(get_db)):
    return PremioResponse.model_validate(premio_service.obtener_premio(db, premio_id))


@router.patch("/{premio_id}", response_model=PremioResponse, dependencies=[Depends(require_admin)])
def actualizar_premio(premio_id: str, data: PremioUpdate, db: Session = Depends(get_db)):
    return PremioResponse.model_validate(premio_service.actualizar_premio(db, premio_id, data))


@router.delete("/{premio_id}", response_model=PremioResponse, dependencies=[Depends(require_admin)])
def eliminar_premio(premio_id: str, db: Session = Depends(get_db)):
    return PremioResponse.model_validate(premio_service.eliminar_premio(db, premio_id))
