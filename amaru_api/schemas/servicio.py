from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.enums import EstadoRegistro
from .categoria import CategoriaResumen
from .subcategoria import SubcategoriaResumen


class ServicioCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    titulo: Optional[str] = Field(default=None, max_length=250)
    descripcion: Optional[str] = None
    id_categoria: Optional[int] = None
    id_subcategoria: Optional[int] = None
    estado: Optional[EstadoRegistro] = None
    imagen_url: Optional[str] = Field(default=None, max_length=500)


class ServicioUpdate(ServicioCreate):
    pass


class ServicioResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    titulo: str
    descripcion: Optional[str] = None
    id_categoria: Optional[int] = None
    id_subcategoria: Optional[int] = None
    categoria: Optional[CategoriaResumen] = None
    subcategoria: Optional[SubcategoriaResumen] = None
    estado: str
    imagen_url: Optional[str] = None
    creado_en: Optional[datetime] = None
    actualizado_en: Optional[datetime] = None
