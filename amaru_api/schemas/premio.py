from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PremioCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    titulo: str = Field(min_length=1, max_length=250)
    fecha: date
    descripcion: Optional[str] = None
    url_imagen: Optional[str] = Field(default=None, max_length=500)


class PremioUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    titulo: Optional[str] = Field(default=None, min_length=1, max_length=250)
    fecha: Optional[date] = None
    descripcion: Optional[str] = None
    url_imagen: Optional[str] = Field(default=None, max_length=500)


class PremioResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    titulo: str
    fecha: date
    descripcion: Optional[str] = None
    url_imagen: Optional[str] = None
    creado_en: Optional[datetime] = None
    actualizado_en: Optional[datetime] = None
