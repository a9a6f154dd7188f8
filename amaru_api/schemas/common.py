from pydantic import BaseModel


class EstadoUpdate(BaseModel):
    estado: str


class ConteoResponse(BaseModel):
    message: str
    count: int
