from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8)
    nombre: str = Field(min_length=1, max_length=100)
    apellido: Optional[str] = Field(default=None, max_length=100)


class LoginSinPasswordRequest(BaseModel):
    email: EmailStr


class RegisterSinPasswordRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    nombre: str = Field(min_length=1, max_length=100)
    apellido: str = Field(min_length=1, max_length=100)
    dni: str = Field(min_length=1, max_length=20)
    email: EmailStr
    telefono: Optional[str] = Field(default=None, max_length=30)
    direccion: Optional[str] = Field(default=None, max_length=255)


class RolResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str


class UsuarioSinPasswordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    apellido: str
    dni: str
    email: str
    telefono: Optional[str] = None
    direccion: Optional[str] = None
    rol: Optional[RolResponse] = None
    activo: bool
    creado_en: Optional[datetime] = None
    actualizado_en: Optional[datetime] = None


class AdminResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    nombre: str
    apellido: Optional[str] = None
    rol: Optional[RolResponse] = None
    activo: bool


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    tipo: str
    user: dict
