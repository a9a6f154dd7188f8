from . import (
    actividad,
    categoria,
    festival,
    inscripcion,
    premio,
    profesor,
    rol,
    servicio,
    subcategoria,
    taller,
    usuario,
    usuario_sin_password,
)
from .actividad import Actividad
from .categoria import Categoria
from .festival import Festival
from .inscripcion import Inscripcion
from .premio import Premio
from .profesor import Profesor
from .rol import Rol
from .servicio import Servicio
from .subcategoria import Subcategoria
from .taller import Taller
from .usuario import Usuario
from .usuario_sin_password import UsuarioSinPassword
