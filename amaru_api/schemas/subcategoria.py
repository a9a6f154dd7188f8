from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.enums import EstadoRegistro
from .categoria import CategoriaResumen


class SubcategoriaCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    nombre: str = Field(min_length=1, max_length=150)
    descripcion: Optional[str] = None
    estado: EstadoRegistro = EstadoRegistro.activo.value
    id_categoria: int


class SubcategoriaUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    nombre: Optional[str] = Field(default=None, min_length=1, max_length=150)
    descripcion: Optional[str] = None
    estado: Optional[EstadoRegistro] = None
    id_categoria: Optional[int] = None


class SubcategoriaResumen(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    estado: str
    id_categoria: int


class SubcategoriaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    descripcion: Optional[str] = None
    estado: str
    id_categoria: int
    categoria: Optional[CategoriaResumen] = None
    creado_en: Optional[datetime] = None
    actualizado_en: Optional[datetime] = None
