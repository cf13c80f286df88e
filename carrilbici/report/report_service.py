# carrilbici/report/report_service.py
import json
import os
from time import perf_counter
from typing import Any, Dict, Optional

from carrilbici.evidence.evidence import append_report_snapshot, iso_utc
from carrilbici.inventory.parser import build_registry, load_inventory
from carrilbici.logging import get_logger
from carrilbici.registry.errors import CarrilBiciError

logger = get_logger("carrilbici.report")

EVIDENCE_ENABLE = os.getenv("CARRILBICI_EVIDENCE_ENABLE", "1") == "1"


def report_file(path: str,
                status_updates: Optional[Dict[str, str]] = None,
                evidence_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Genera el informe de un inventario (carga -> estados -> informe) y
    devuelve el resultado estructurado. Cada resultado se añade al
    fichero de evidencias salvo que CARRILBICI_EVIDENCE_ENABLE sea "0".
    """
    t0 = perf_counter()
    ts0 = iso_utc()

    try:
        inventory = load_inventory(path)
        registry = build_registry(inventory)
        for name, status in (status_updates or {}).items():
            registry.set_status(name, status)
    except (CarrilBiciError, FileNotFoundError) as e:
        ts_end = iso_utc()
        total_ms = (perf_counter() - t0) * 1000.0
        logger.info("report_failed", path=path, reason=str(e))

        failure_payload: Dict[str, Any] = {
            "ok": False,
            "network_id": None,
            "report": "",
            "segments": [],
            "total_length_km": None,
            "reasons": [str(e)],
            "timestamps": {
                "start_utc": ts0,
                "load_end_utc": ts_end,
                "end_utc": ts_end,
            },
            "timings_ms": {
                "load_ms": total_ms,
                "report_ms": 0.0,
                "total_ms": total_ms,
            },
        }
        if EVIDENCE_ENABLE:
            append_report_snapshot(path, failure_payload, out_path=evidence_path)
        return failure_payload

    t_load_end = perf_counter()
    ts_load_end = iso_utc()

    report = registry.generate_report()
    segments = [s.model_dump() for s in registry.segments()]
    total_length_km = registry.total_length()

    t_end = perf_counter()
    ts_end = iso_utc()

    load_ms = (t_load_end - t0) * 1000.0
    total_ms = (t_end - t0) * 1000.0

    result: Dict[str, Any] = {
        "ok": True,
        "network_id": inventory.network_id,
        "report": report,
        "segments": segments,
        "total_length_km": total_length_km,
        "reasons": [],
        "timestamps": {
            "start_utc": ts0,
            "load_end_utc": ts_load_end,
            "end_utc": ts_end,
        },
        "timings_ms": {
            "load_ms": load_ms,
            "report_ms": max(0.0, total_ms - load_ms),
            "total_ms": total_ms,
        },
    }

    if EVIDENCE_ENABLE:
        append_report_snapshot(path, result, out_path=evidence_path)
    return result


def report_file_json(path: str,
                     status_updates: Optional[Dict[str, str]] = None,
                     evidence_path: Optional[str] = None) -> str:
    """Igual que report_file, pero como cadena JSON lista para imprimir."""
    res = report_file(path, status_updates=status_updates, evidence_path=evidence_path)
    return json.dumps(res, ensure_ascii=False, indent=2)
