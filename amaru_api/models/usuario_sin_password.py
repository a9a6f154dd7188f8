from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from ..database import Base

class UsuarioSinPassword(Base):
    __tablename__ = "usuario_sin_password"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
    apellido = Column(String(100), nullable=False)
    dni = Column(String(20), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    telefono = Column(String(30))
    direccion = Column(String(255))
    id_rol = Column(Integer, ForeignKey("rol.id"), nullable=False)
    activo = Column(Boolean, nullable=False, default=True)
    creado_en = Column(TIMESTAMP, server_default=func.current_timestamp())
    actualizado_en = Column(TIMESTAMP, server_default=func.current_timestamp(), onupdate=func.current_timestamp())

    rol = relationship("Rol")
    inscripciones = relationship("Inscripcion", back_populates="usuario")
