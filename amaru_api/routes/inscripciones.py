from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.common import EstadoUpdate
from ..schemas.inscripcion import (
    InscripcionCreate,
    InscripcionEstadisticas,
    InscripcionResponse,
    InscripcionUpdate,
)
from ..services import inscripcion_service
from ..services.notification_service import schedule_estado_actualizado, schedule_inscripcion_creada
from ..utils.dependencies import require_admin
from ..utils.responses import EnvelopeRoute

router = APIRouter(prefix="/api/inscripciones", tags=["inscripciones"], route_class=EnvelopeRoute)


def _out(rows) -> List[InscripcionResponse]:
    return [InscripcionResponse.model_validate(i) for i in rows]


@router.post("", response_model=InscripcionResponse, status_code=status.HTTP_201_CREATED)
def crear_inscripcion(data: InscripcionCreate, background_tasks: BackgroundTasks, db: Session = Depends(get_db)):
    inscripcion = inscripcion_service.crear_inscripcion(db, data)
    # email is sent after the response (non-blocking)
    schedule_inscripcion_creada(background_tasks, inscripcion.email, inscripcion.estado, inscripcion.id)
    return InscripcionResponse.model_validate(inscripcion)


@router.get("", response_model=List[InscripcionResponse])
def listar_inscripciones(db: Session = Depends(get_db)):
    return _out(inscripcion_service.listar_inscripciones(db))


@router.get("/estadisticas", response_model=InscripcionEstadisticas)
def estadisticas(db: Session = Depends(get_db)):
    return inscripcion_service.estadisticas(db)


@router.get("/usuario/{usuario_id}", response_model=List[InscripcionResponse])
def listar_por_usuario(usuario_id: str, db: Session = Depends(get_db)):
    return _out(inscripcion_service.listar_por_usuario(db, usuario_id))


@router.get("/estado/{estado}", response_model=List[InscripcionResponse])
def listar_por_estado(estado: str, db: Session = Depends(get_db)):
    return _out(inscripcion_service.listar_por_estado(db, estado))


@router.get("/{inscripcion_id}", response_model=InscripcionResponse)
def obtener_inscripcion(inscripcion_id: str, db: Session = Depends(get_db)):
    return InscripcionResponse.model_validate(inscripcion_service.obtener_inscripcion(db, inscripcion_id))


@router.patch("/{inscripcion_id}", response_model=InscripcionResponse, dependencies=[Depends(require_admin)])
def actualizar_inscripcion(inscripcion_id: str, data: InscripcionUpdate, db: Session = Depends(get_db)):
    return InscripcionResponse.model_validate(
        inscripcion_service.actualizar_inscripcion(db, inscripcion_id, data)
    )


@router.patch("/{inscripcion_id}/estado", response_model=InscripcionResponse,
              dependencies=[Depends(require_admin)])
def cambiar_estado(
    inscripcion_id: str,
    data: EstadoUpdate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    inscripcion = inscripcion_service.cambiar_estado(db, inscripcion_id, data.estado)
    schedule_estado_actualizado(background_tasks, inscripcion.email, inscripcion.estado, inscripcion.id)
    return InscripcionResponse.model_validate(inscripcion)


@router.delete("/{inscripcion_id}", response_model=InscripcionResponse,
               dependencies=[Depends(require_admin)])
def eliminar_inscripcion(inscripcion_id: str, db: Session = Depends(get_db)):
    return InscripcionResponse.model_validate(inscripcion_service.eliminar_inscripcion(db, inscripcion_id))
