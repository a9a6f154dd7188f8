from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfesorCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    nombre: str = Field(min_length=1, max_length=200)
    descripcion: Optional[str] = None
    especialidad: Optional[str] = Field(default=None, max_length=200)
    imagen_url: Optional[str] = Field(default=None, max_length=500)


class ProfesorUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    nombre: Optional[str] = Field(default=None, min_length=1, max_length=200)
    descripcion: Optional[str] = None
    especialidad: Optional[str] = Field(default=None, max_length=200)
    imagen_url: Optional[str] = Field(default=None, max_length=500)


class ProfesorResumen(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    especialidad: Optional[str] = None


class ProfesorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    descripcion: Optional[str] = None
    especialidad: Optional[str] = None
    imagen_url: Optional[str] = None
    creado_en: Optional[datetime] = None
    actualizado_en: Optional[datetime] = None
