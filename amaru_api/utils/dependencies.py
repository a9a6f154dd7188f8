from typing import Optional, Union

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from ..database import get_db
from ..models.usuario import Usuario
from ..models.usuario_sin_password import UsuarioSinPassword
from .jwt_handler import decode_access_token
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()

_MODEL_BY_TIPO = {
    "admin": Usuario,
    "sin_password": UsuarioSinPassword,
}


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> Union[Usuario, UsuarioSinPassword]:
    token = credentials.credentials
    payload = decode_access_token(token)

    if payload is None:
        # do not log the token value
        logger.warning(
            "Authentication failed while decoding token (scheme=%s, token_len=%d)",
            credentials.scheme,
            len(token) if token else 0,
        )
        raise _unauthorized("Token inválido o expirado")

    model = _MODEL_BY_TIPO.get(payload.get("tipo"))
    if model is None:
        logger.warning("Token with unknown 'tipo' claim: %s", payload.get("tipo"))
        raise _unauthorized("Credenciales de autenticación inválidas")

    raw_sub = payload.get("sub")
    try:
        user_id = int(raw_sub)
    except (TypeError, ValueError):
        logger.warning("Token 'sub' claim is not an integer: %s", raw_sub)
        raise _unauthorized("Credenciales de autenticación inválidas")

    user = db.get(model, user_id)
    if user is None or not user.activo:
        logger.warning("User referenced in token not found or inactive (tipo=%s, user_id=%s)", payload.get("tipo"), user_id)
        raise _unauthorized("Usuario no encontrado")

    return user


def require_admin(current_user=Depends(get_current_user)) -> Usuario:
    if not isinstance(current_user, Usuario) or current_user.rol is None or current_user.rol.nombre != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Se requiere acceso de administrador"
        )
    return current_user


optional_security = HTTPBearer(auto_error=False)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
    db: Session = Depends(get_db)
):
    """Like get_current_user, but anonymous requests yield None."""
    if credentials is None:
        return None
    return get_current_user(credentials, db)
