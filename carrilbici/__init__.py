"""
carrilbici: registro en memoria de tramos de carril bici e informes.

Los subpaquetes (`registry`, `inventory`, `report`, `evidence`, `cli`) se
importan como `carrilbici.<subpkg>`.
"""
from carrilbici.registry.errors import (
    CarrilBiciError,
    InvalidSegmentError,
    SegmentNotFoundError,
    InventoryError,
)
from carrilbici.registry.segment_registry import SegmentRegistry, DEFAULT_STATUS

__all__ = [
    "SegmentRegistry",
    "DEFAULT_STATUS",
    "CarrilBiciError",
    "InvalidSegmentError",
    "SegmentNotFoundError",
    "InventoryError",
]
