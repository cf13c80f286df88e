from pydantic import BaseModel


class Segment(BaseModel):
    """Tramo registrado: nombre, longitud en km y estado libre."""
    name: str
    length_km: float
    status: str
