# carrilbici/registry/errors.py


class CarrilBiciError(Exception):
    """Base de todos los errores del paquete."""


class InvalidSegmentError(CarrilBiciError, ValueError):
    """Nombre vacío o longitud no positiva al añadir un tramo."""


class SegmentNotFoundError(CarrilBiciError, LookupError):
    def __init__(self, name: str, message: str = "El tramo indicado no existe"):
        super().__init__(message)
        self.name = name


class InventoryError(CarrilBiciError, ValueError):
    """Fichero de inventario vacío, mal formado o fuera de esquema."""
