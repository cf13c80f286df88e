# carrilbici/evidence/evidence.py

"""Histórico de informes generados (NDJSON, una línea por informe).

Cada línea guarda la red, el estado de cada tramo, la longitud total y el
sha256 del texto del informe, de modo que dos informes iguales se
reconocen sin guardar el texto.

CARRILBICI_EVIDENCE_FILE cambia la ruta (por defecto
evidence/report_snapshots.ndjson), CARRILBICI_RUN_ID fija el identificador
de ejecución y CARRILBICI_LABEL etiqueta todos los registros del proceso."""

import hashlib
import json
import os
import uuid
from pathlib import Path
from datetime import datetime, timezone
from typing import Any, Dict, Optional

EVIDENCE_FILE = os.getenv("CARRILBICI_EVIDENCE_FILE", "evidence/report_snapshots.ndjson")
RUN_ID = os.getenv("CARRILBICI_RUN_ID", uuid.uuid4().hex[:12])
DEFAULT_LABEL = os.getenv("CARRILBICI_LABEL")


def iso_utc() -> str:
    """Marca UTC con milisegundos, p. ej. 2025-11-17T15:32:10.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def report_digest(report: str) -> Optional[str]:
    if not report:
        return None
    return hashlib.sha256(report.encode("utf-8")).hexdigest()


def append_report_snapshot(input_path: str, result: Dict[str, Any],
                           label: Optional[str] = None,
                           out_path: Optional[str] = None) -> str:
    """
    Añade el resumen de un informe al histórico y devuelve la ruta del fichero.
    - input_path: inventario del que se generó
    - result: dict devuelto por report_file(...)
    - label: etiqueta opcional (por defecto CARRILBICI_LABEL)
    - out_path: fichero de salida (por defecto EVIDENCE_FILE)
    """
    rec = {
        "run_id": RUN_ID,
        "ts_utc": iso_utc(),
        "label": label or DEFAULT_LABEL,
        "inventory": str(input_path),
        "network_id": result.get("network_id"),
        "ok": result.get("ok"),
        "reason_top": (result.get("reasons") or [None])[0],
        "segments": [
            {"name": s.get("name"), "status": s.get("status")}
            for s in (result.get("segments") or [])
        ],
        "total_length_km": result.get("total_length_km"),
        "report_sha256": report_digest(result.get("report") or ""),
        "timings_ms": result.get("timings_ms"),
    }

    out = Path(out_path or EVIDENCE_FILE)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("a", encoding="utf-8") as f:
        f.write(json.dumps(rec, ensure_ascii=False) + "\n")
    return str(out)
