from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from ..database import Base

class Inscripcion(Base):
    __tablename__ = "inscripcion"

    id = Column(Integer, primary_key=True, index=True)
    id_usuario = Column(Integer, ForeignKey("usuario_sin_password.id"), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    estado = Column(String(20), nullable=False, default="pendiente", index=True)
    total = Column(Numeric(10, 2), nullable=False, default=0)
    moneda = Column(String(3), nullable=False, default="PEN")
    fecha_inscripcion = Column(DateTime, nullable=False)
    creado_en = Column(TIMESTAMP, server_default=func.current_timestamp())
    actualizado_en = Column(TIMESTAMP, server_default=func.current_timestamp(), onupdate=func.current_timestamp())

    usuario = relationship("UsuarioSinPassword", back_populates="inscripciones")
