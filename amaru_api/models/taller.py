from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, TIMESTAMP, CheckConstraint, func
from sqlalchemy.orm import relationship
from ..database import Base

class Taller(Base):
    __tablename__ = "taller"
    __table_args__ = (
        CheckConstraint("fecha_fin > fecha_inicio", name="ck_taller_fechas"),
        CheckConstraint("cupo_disponible >= 0 AND cupo_disponible <= cupo_total", name="ck_taller_cupo"),
    )

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(250), nullable=False)
    descripcion = Column(Text)
    id_categoria = Column(Integer, ForeignKey("categoria.id"), nullable=False, index=True)
    id_subcategoria = Column(Integer, ForeignKey("subcategoria.id"), nullable=False, index=True)
    id_profesor = Column(Integer, ForeignKey("profesor.id"), nullable=False, index=True)
    fecha_inicio = Column(DateTime, nullable=False, index=True)
    fecha_fin = Column(DateTime, nullable=False)
    cupo_total = Column(Integer, nullable=False)
    cupo_disponible = Column(Integer, nullable=False)
    estado = Column(String(20), nullable=False, default="activo", index=True)
    imagen_url = Column(String(500))
    creado_en = Column(TIMESTAMP, server_default=func.current_timestamp())
    actualizado_en = Column(TIMESTAMP, server_default=func.current_timestamp(), onupdate=func.current_timestamp())

    categoria = relationship("Categoria")
    subcategoria = relationship("Subcategoria")
    profesor = relationship("Profesor", back_populates="talleres")
