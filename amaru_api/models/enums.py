import enum


class EstadoRegistro(str, enum.Enum):
    activo = "activo"
    inactivo = "inactivo"


class TipoCategoria(str, enum.Enum):
    taller = "taller"
    servicio = "servicio"


class EstadoInscripcion(str, enum.Enum):
    pendiente = "pendiente"
    aprobado = "aprobado"
    rechazado = "rechazado"


ESTADOS_REGISTRO = [e.value for e in EstadoRegistro]
ESTADOS_INSCRIPCION = [e.value for e in EstadoInscripcion]
