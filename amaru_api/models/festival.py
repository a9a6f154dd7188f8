from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from ..database import Base

class Festival(Base):
    __tablename__ = "festival"

    id = Column(Integer, primary_key=True, index=True)
    titulo = Column(String(250), nullable=False)
    descripcion = Column(Text)
    fecha_inicio = Column(DateTime, nullable=False, index=True)
    fecha_fin = Column(DateTime, nullable=False)
    lugar = Column(String(250), nullable=False)
    organizador = Column(String(250), nullable=False)
    tipo = Column(String(100), nullable=False, index=True)
    id_actividad = Column(Integer, ForeignKey("actividad.id"), nullable=False, index=True)
    estado = Column(String(20), nullable=False, default="activo", index=True)
    imagen_url = Column(String(500))
    creado_en = Column(TIMESTAMP, server_default=func.current_timestamp())
    actualizado_en = Column(TIMESTAMP, server_default=func.current_timestamp(), onupdate=func.current_timestamp())

    actividad = relationship("Actividad", back_populates="festivales")
