# carrilbici/registry/segment_registry.py
from types import MappingProxyType
from typing import Dict, List, Mapping

from carrilbici.logging import get_logger
from .errors import InvalidSegmentError, SegmentNotFoundError
from .models import Segment

logger = get_logger("carrilbici.registry")

DEFAULT_STATUS = "En servicio"
DEFAULT_REGION = "Bahía de Cádiz"
REPORT_RULE = "==========================================="


class SegmentRegistry:
    """
    Gestiona los tramos de carril bici de una ciudad o región.

    Un único mapa nombre -> Segment, en orden de inserción. Volver a añadir
    un nombre existente sobrescribe longitud y estado sin cambiar su posición.
    """

    def __init__(self, region: str = DEFAULT_REGION):
        self.region = region
        self._segments: Dict[str, Segment] = {}

    def __len__(self) -> int:
        return len(self._segments)

    def __contains__(self, name: object) -> bool:
        return name in self._segments

    def add_segment(self, name: str, length_km: float) -> None:
        """
        Añade (o sobrescribe) un tramo con estado inicial "En servicio".

        Lanza InvalidSegmentError si el nombre está vacío o la longitud <= 0.
        """
        if name is None or not str(name).strip():
            raise InvalidSegmentError("El nombre del tramo no puede estar vacío")
        if length_km is None or not length_km > 0:
            raise InvalidSegmentError("La longitud debe ser mayor que cero")

        self._segments[name] = Segment(name=name, length_km=float(length_km), status=DEFAULT_STATUS)
        logger.debug("segment_added", segment=name, length_km=float(length_km))

    def set_status(self, name: str, status: str) -> None:
        """Actualiza el estado de un tramo existente; no se valida el contenido."""
        segment = self._segments.get(name)
        if segment is None:
            raise SegmentNotFoundError(name, f"El tramo indicado no existe: {name}")
        segment.status = status
        logger.debug("segment_status_changed", segment=name, status=status)

    def change_status(self, name: str, status: str) -> None:
        """Alias de set_status."""
        self.set_status(name, status)

    def get_status(self, name: str) -> str:
        segment = self._segments.get(name)
        if segment is None:
            raise SegmentNotFoundError(name)
        return segment.status

    def total_length(self) -> float:
        """Suma de longitudes en km (0.0 si no hay tramos)."""
        return float(sum(s.length_km for s in self._segments.values()))

    def list_segments(self) -> Mapping[str, float]:
        """Vista de solo lectura nombre -> longitud, desacoplada del registro."""
        return MappingProxyType({name: s.length_km for name, s in self._segments.items()})

    def segments(self) -> List[Segment]:
        return [s.model_copy() for s in self._segments.values()]

    def generate_report(self) -> str:
        """
        Informe en texto: cabecera, una línea por tramo y la longitud total.

        Las longitudes se escriben con str(float) (3.5, 4.0); fuera de
        magnitudes habituales difiere del formato de Java (1e7 sale como
        10000000.0, no 1.0E7).
        """
        lines = [f"INFORME DE CARRILES BICI - {self.region}", REPORT_RULE]
        for s in self._segments.values():
            lines.append(f"- {s.name} ({s.length_km} km): {s.status}")
        lines.append(f"Longitud total: {self.total_length()} km")
        return "\n".join(lines) + "\n"
