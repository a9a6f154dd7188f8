from sqlalchemy import Column, Integer, String, Text, Date, TIMESTAMP, func
from ..database import Base

class Premio(Base):
    __tablename__ = "premio"

    id = Column(Integer, primary_key=True, index=True)
    titulo = Column(String(250), nullable=False)
    fecha = Column(Date, nullable=False)
    descripcion = Column(Text)
    url_imagen = Column(String(500))
    creado_en = Column(TIMESTAMP, server_default=func.current_timestamp())
    actualizado_en = Column(TIMESTAMP, server_default=func.current_timestamp(), onupdate=func.current_timestamp())
