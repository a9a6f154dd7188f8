from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr


class InscripcionCreate(BaseModel):
    """total y moneda no se reciben: se calculan al crear la inscripción."""
    id_usuario: int
    email: EmailStr
    estado: Optional[str] = None


class InscripcionUpdate(BaseModel):
    email: Optional[EmailStr] = None
    estado: Optional[str] = None


class UsuarioResumen(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    apellido: str
    email: str


class InscripcionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    id_usuario: int
    usuario: Optional[UsuarioResumen] = None
    email: str
    estado: str
    total: float
    moneda: str
    fecha_inscripcion: datetime
    creado_en: Optional[datetime] = None
    actualizado_en: Optional[datetime] = None


class InscripcionEstadisticas(BaseModel):
    total: int
    por_estado: Dict[str, int]
    ingresos_totales: float
