from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.enums import EstadoRegistro
from .categoria import CategoriaResumen
from .profesor import ProfesorResumen
from .subcategoria import SubcategoriaResumen


class TallerCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    nombre: str = Field(min_length=1, max_length=250)
    descripcion: Optional[str] = None
    id_categoria: int
    id_subcategoria: int
    id_profesor: int
    fecha_inicio: datetime
    fecha_fin: datetime
    cupo_total: int = Field(ge=0)
    estado: EstadoRegistro = EstadoRegistro.activo.value
    imagen_url: Optional[str] = Field(default=None, max_length=500)


class TallerUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    nombre: Optional[str] = Field(default=None, min_length=1, max_length=250)
    descripcion: Optional[str] = None
    id_categoria: Optional[int] = None
    id_subcategoria: Optional[int] = None
    id_profesor: Optional[int] = None
    fecha_inicio: Optional[datetime] = None
    fecha_fin: Optional[datetime] = None
    cupo_total: Optional[int] = Field(default=None, ge=0)
    estado: Optional[EstadoRegistro] = None
    imagen_url: Optional[str] = Field(default=None, max_length=500)


class TallerCupoUpdate(BaseModel):
    cupos_reservados: int


class TallerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    descripcion: Optional[str] = None
    id_categoria: int
    id_subcategoria: int
    id_profesor: int
    categoria: Optional[CategoriaResumen] = None
    subcategoria: Optional[SubcategoriaResumen] = None
    profesor: Optional[ProfesorResumen] = None
    fecha_inicio: datetime
    fecha_fin: datetime
    cupo_total: int
    cupo_disponible: int
    estado: str
    imagen_url: Optional[str] = None
    creado_en: Optional[datetime] = None
    actualizado_en: Optional[datetime] = None
