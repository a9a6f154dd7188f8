from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.enums import EstadoRegistro
from .actividad import ActividadResumen


class FestivalCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    titulo: str = Field(min_length=1, max_length=250)
    descripcion: Optional[str] = None
    fecha_inicio: datetime
    fecha_fin: datetime
    lugar: str = Field(min_length=1, max_length=250)
    organizador: str = Field(min_length=1, max_length=250)
    tipo: str = Field(min_length=1, max_length=100)
    id_actividad: int
    estado: EstadoRegistro = EstadoRegistro.activo.value
    imagen_url: Optional[str] = Field(default=None, max_length=500)


class FestivalUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    titulo: Optional[str] = Field(default=None, min_length=1, max_length=250)
    descripcion: Optional[str] = None
    fecha_inicio: Optional[datetime] = None
    fecha_fin: Optional[datetime] = None
    lugar: Optional[str] = Field(default=None, min_length=1, max_length=250)
    organizador: Optional[str] = Field(default=None, min_length=1, max_length=250)
    tipo: Optional[str] = Field(default=None, min_length=1, max_length=100)
    id_actividad: Optional[int] = None
    estado: Optional[EstadoRegistro] = None
    imagen_url: Optional[str] = Field(default=None, max_length=500)


class FestivalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    titulo: str
    descripcion: Optional[str] = None
    fecha_inicio: datetime
    fecha_fin: datetime
    lugar: str
    organizador: str
    tipo: str
    id_actividad: int
    actividad: Optional[ActividadResumen] = None
    estado: str
    imagen_url: Optional[str] = None
    creado_en: Optional[datetime] = None
    actualizado_en: Optional[datetime] = None
