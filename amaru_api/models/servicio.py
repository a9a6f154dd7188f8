from sqlalchemy import Column, Integer, String, Text, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from ..database import Base

class Servicio(Base):
    __tablename__ = "servicio"

    id = Column(Integer, primary_key=True, index=True)
    titulo = Column(String(250), nullable=False, default="Servicio sin título")
    descripcion = Column(Text, default="")
    # category/subcategory are optional on servicios
    id_categoria = Column(Integer, ForeignKey("categoria.id"), nullable=True, index=True)
    id_subcategoria = Column(Integer, ForeignKey("subcategoria.id"), nullable=True, index=True)
    estado = Column(String(20), nullable=False, default="activo", index=True)
    imagen_url = Column(String(500), default="")
    creado_en = Column(TIMESTAMP, server_default=func.current_timestamp())
    actualizado_en = Column(TIMESTAMP, server_default=func.current_timestamp(), onupdate=func.current_timestamp())

    categoria = relationship("Categoria")
    subcategoria = relationship("Subcategoria")
