from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.enums import EstadoRegistro, TipoCategoria


class CategoriaCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    nombre: str = Field(min_length=1, max_length=150)
    tipo: TipoCategoria
    descripcion: Optional[str] = None
    estado: EstadoRegistro = EstadoRegistro.activo.value


class CategoriaUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    nombre: Optional[str] = Field(default=None, min_length=1, max_length=150)
    tipo: Optional[TipoCategoria] = None
    descripcion: Optional[str] = None
    estado: Optional[EstadoRegistro] = None


class CategoriaResumen(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    tipo: str
    estado: str


class CategoriaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    tipo: str
    descripcion: Optional[str] = None
    estado: str
    creado_en: Optional[datetime] = None
    actualizado_en: Optional[datetime] = None


class CategoriaCascadaResponse(BaseModel):
    """Categoría tras activar/desactivar, con el número de subcategorías afectadas."""
    categoria: CategoriaResponse
    subcategorias_actualizadas: int
