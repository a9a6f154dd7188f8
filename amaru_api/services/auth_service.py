import logging
from typing import List

from sqlalchemy.orm import Session

from ..models.rol import Rol
from ..models.usuario import Usuario
from ..models.usuario_sin_password import UsuarioSinPassword
from ..schemas.auth import LoginRequest, RegisterRequest, RegisterSinPasswordRequest
from ..utils.errors import ForbiddenError, UnauthorizedError, service_operation
from ..utils.jwt_handler import create_access_token
from ..utils.password_handler import get_password_hash, verify_password
from .validation import ensure_unique

logger = logging.getLogger(__name__)

ROL_ADMIN = "admin"
ROL_USER = "user"
TOKEN_ADMIN = "admin"
TOKEN_SIN_PASSWORD = "sin_password"

ROLES_INICIALES = {
    ROL_ADMIN: "Administrador del panel",
    ROL_USER: "Usuario inscrito sin contraseña",
}


def seed_roles(db: Session) -> None:
    """Create the base roles if they are missing."""
    existentes = {nombre for (nombre,) in db.query(Rol.nombre).all()}
    faltantes = [n for n in ROLES_INICIALES if n not in existentes]
    for nombre in faltantes:
        db.add(Rol(nombre=nombre, descripcion=ROLES_INICIALES[nombre]))
    if faltantes:
        db.commit()
        logger.info("Roles creados: %s", ", ".join(faltantes))


def _rol(db: Session, nombre: str) -> Rol:
    rol = db.query(Rol).filter(Rol.nombre == nombre).first()
    if rol is None:
        seed_roles(db)
        rol = db.query(Rol).filter(Rol.nombre == nombre).first()
    return rol


def _token(user_id: int, tipo: str) -> str:
    return create_access_token({"sub": user_id, "tipo": tipo})


@service_operation
def register_admin(db: Session, data: RegisterRequest, solicitante=None) -> Usuario:
    """Register an administrator.

    The first account can be created anonymously; after that only an existing
    administrator may register new ones.
    """
    if db.query(Usuario).count():
        if solicitante is None:
            raise UnauthorizedError("Se requiere autenticación de administrador")
        if not isinstance(solicitante, Usuario) or solicitante.rol is None or solicitante.rol.nombre != ROL_ADMIN:
            raise ForbiddenError("Se requiere acceso de administrador")
    email = data.email.lower()
    ensure_unique(db, Usuario, "email", email, "El email ya está registrado")
    usuario = Usuario(
        email=email,
        password_hash=get_password_hash(data.password),
        nombre=data.nombre,
        apellido=data.apellido,
        id_rol=_rol(db, ROL_ADMIN).id,
    )
    db.add(usuario)
    db.commit()
    db.refresh(usuario)
    return usuario


def login_admin(db: Session, data: LoginRequest):
    """Return ``(usuario, token)`` for valid credentials."""
    usuario = db.query(Usuario).filter(Usuario.email == data.email.lower()).first()
    if usuario is None or not verify_password(data.password, usuario.password_hash):
        logger.warning("Login fallido para %s", data.email)
        raise UnauthorizedError("Credenciales inválidas")
    if not usuario.activo:
        raise UnauthorizedError("Usuario inactivo")
    return usuario, _token(usuario.id, TOKEN_ADMIN)


@service_operation
def register_sin_password(db: Session, data: RegisterSinPasswordRequest) -> UsuarioSinPassword:
    email = data.email.lower()
    ensure_unique(db, UsuarioSinPassword, "email", email, "El email ya está registrado")
    ensure_unique(db, UsuarioSinPassword, "dni", data.dni, "El DNI ya está registrado")
    usuario = UsuarioSinPassword(**data.model_dump(exclude={"email"}), email=email, id_rol=_rol(db, ROL_USER).id)
    db.add(usuario)
    db.commit()
    db.refresh(usuario)
    return usuario


def login_sin_password(db: Session, email: str):
    usuario = db.query(UsuarioSinPassword).filter(UsuarioSinPassword.email == email.lower()).first()
    if usuario is None or not usuario.activo:
        logger.warning("Login sin contraseña rechazado para %s", email)
        raise UnauthorizedError("Usuario no encontrado o inactivo")
    return usuario, _token(usuario.id, TOKEN_SIN_PASSWORD)


def listar_usuarios_sin_password(db: Session) -> List[UsuarioSinPassword]:
    return db.query(UsuarioSinPassword).order_by(UsuarioSinPassword.creado_en.desc(), UsuarioSinPassword.id.desc()).all()


def listar_usuarios_sin_password_activos(db: Session) -> List[UsuarioSinPassword]:
    return (
        db.query(UsuarioSinPassword)
        .filter(UsuarioSinPassword.activo.is_(True))
        .order_by(UsuarioSinPassword.creado_en.desc(), UsuarioSinPassword.id.desc())
        .all()
    )
