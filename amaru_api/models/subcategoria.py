from sqlalchemy import Column, Integer, String, Text, ForeignKey, TIMESTAMP, UniqueConstraint, func
from sqlalchemy.orm import relationship
from ..database import Base

class Subcategoria(Base):
    __tablename__ = "subcategoria"
    __table_args__ = (
        UniqueConstraint("id_categoria", "nombre", name="uq_subcategoria_categoria_nombre"),
    )

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(150), nullable=False)
    descripcion = Column(Text)
    estado = Column(String(20), nullable=False, default="activo", index=True)
    id_categoria = Column(Integer, ForeignKey("categoria.id"), nullable=False, index=True)
    creado_en = Column(TIMESTAMP, server_default=func.current_timestamp())
    actualizado_en = Column(TIMESTAMP, server_default=func.current_timestamp(), onupdate=func.current_timestamp())

    categoria = relationship("Categoria", back_populates="subcategorias")
