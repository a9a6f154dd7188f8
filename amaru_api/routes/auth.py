from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.usuario import Usuario
from ..schemas.auth import (
    AdminResponse,
    LoginRequest,
    LoginSinPasswordRequest,
    RegisterRequest,
    RegisterSinPasswordRequest,
    TokenResponse,
    UsuarioSinPasswordResponse,
)
from ..services import auth_service
from ..utils.dependencies import get_current_user, get_optional_user, require_admin
from ..utils.responses import EnvelopeRoute

router = APIRouter(prefix="/api/auth", tags=["auth"], route_class=EnvelopeRoute)


def _perfil(usuario) -> dict:
    if isinstance(usuario, Usuario):
        return AdminResponse.model_validate(usuario).model_dump(mode="json")
    return UsuarioSinPasswordResponse.model_validate(usuario).model_dump(mode="json")


@router.post("/register", response_model=AdminResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db: Session = Depends(get_db), solicitante=Depends(get_optional_user)):
    return AdminResponse.model_validate(auth_service.register_admin(db, data, solicitante))


@router.post("/login", response_model=TokenResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    usuario, token = auth_service.login_admin(db, data)
    return TokenResponse(access_token=token, tipo=auth_service.TOKEN_ADMIN, user=_perfil(usuario))


@router.post("/register-sin-password", response_model=UsuarioSinPasswordResponse,
             status_code=status.HTTP_201_CREATED)
def register_sin_password(data: RegisterSinPasswordRequest, db: Session = Depends(get_db)):
    return UsuarioSinPasswordResponse.model_validate(auth_service.register_sin_password(db, data))


@router.post("/login-sin-password", response_model=TokenResponse)
def login_sin_password(data: LoginSinPasswordRequest, db: Session = Depends(get_db)):
    usuario, token = auth_service.login_sin_password(db, data.email)
    return TokenResponse(access_token=token, tipo=auth_service.TOKEN_SIN_PASSWORD, user=_perfil(usuario))


@router.get("/usuarios-sin-password", response_model=List[UsuarioSinPasswordResponse],
            dependencies=[Depends(require_admin)])
def listar_usuarios_sin_password(db: Session = Depends(get_db)):
    return [
        UsuarioSinPasswordResponse.model_validate(u)
        for u in auth_service.listar_usuarios_sin_password(db)
    ]


@router.get("/usuarios-sin-password/activos", response_model=List[UsuarioSinPasswordResponse],
            dependencies=[Depends(require_admin)])
def listar_usuarios_sin_password_activos(db: Session = Depends(get_db)):
    return [
        UsuarioSinPasswordResponse.model_validate(u)
        for u in auth_service.listar_usuarios_sin_password_activos(db)
    ]


@router.get("/me")
def me(current_user=Depends(get_current_user)):
    return _perfil(current_user)
