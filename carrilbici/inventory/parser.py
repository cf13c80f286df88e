import json
from pathlib import Path
from typing import Any, Dict

import yaml
from jsonschema import Draft7Validator
from pydantic import ValidationError

from carrilbici.logging import get_logger
from carrilbici.registry.errors import InventoryError
from carrilbici.registry.segment_registry import SegmentRegistry, DEFAULT_REGION
from .models import NetworkInventory

logger = get_logger("carrilbici.inventory")


def _load_schema() -> Dict[str, Any]:
    schema_path = Path(__file__).with_name("inventory_schema.json")
    with schema_path.open("r", encoding="utf-8") as f:
        return json.load(f)


SCHEMA = _load_schema()
VALIDATOR = Draft7Validator(SCHEMA)


def load_raw(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    # utf-8-sig tolera BOM
    try:
        text = p.read_text(encoding="utf-8-sig").strip()
    except (UnicodeDecodeError, OSError) as e:
        raise InventoryError(f"unreadable_document: {e}") from e

    if not text:
        raise InventoryError("schema_violation: empty_or_null_document")

    try:
        if p.suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise InventoryError(f"malformed_document: {e}") from e

    if data is None:
        raise InventoryError("schema_violation: empty_or_null_document")
    if not isinstance(data, dict):
        raise InventoryError(f"schema_violation: root_must_be_object_got_{type(data).__name__}")

    return data


def validate_schema(raw: Dict[str, Any]) -> None:
    errors = sorted(VALIDATOR.iter_errors(raw), key=lambda e: [str(p) for p in e.path])
    if errors:
        msgs = "; ".join([
            (f"{'/'.join(map(str, e.path)) or '<root>'}: {e.message}")
            for e in errors
        ])
        raise InventoryError(f"schema_violation: {msgs}")


def to_inventory(raw: Dict[str, Any]) -> NetworkInventory:
    try:
        return NetworkInventory.model_validate(raw)
    except ValidationError as e:
        raise InventoryError(f"schema_violation: {e}") from e


def build_registry(inventory: NetworkInventory) -> SegmentRegistry:
    """Vuelca el inventario en un SegmentRegistry nuevo; un estado explícito pisa el de por defecto."""
    registry = SegmentRegistry(region=inventory.region or DEFAULT_REGION)
    for entry in inventory.segments:
        if entry.name in registry:
            logger.warning("duplicate_segment_overwritten", network=inventory.network_id, segment=entry.name)
        registry.add_segment(entry.name, entry.length_km)
        if entry.status is not None:
            registry.set_status(entry.name, entry.status)
    logger.info("inventory_loaded", network=inventory.network_id, segments=len(registry))
    return registry


def load_inventory(path: str) -> NetworkInventory:
    raw = load_raw(path)
    validate_schema(raw)
    return to_inventory(raw)


def load_registry(path: str) -> SegmentRegistry:
    return build_registry(load_inventory(path))
