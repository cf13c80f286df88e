# tests/test_cli.py
from pathlib import Path

import pytest

from carrilbici.cli.carrilbici_cli import main
from carrilbici.evidence import evidence

BASE = Path(__file__).resolve().parents[1]
YAML_INV = str(BASE / "examples" / "red-bahia-cadiz.yaml")
JSON_INV = str(BASE / "examples" / "red-san-fernando.json")


@pytest.fixture(autouse=True)
def evidence_to_tmp(tmp_path, monkeypatch):
    monkeypatch.setattr(evidence, "EVIDENCE_FILE", str(tmp_path / "snapshots.ndjson"))


def test_report_text(capsys):
    main(["report", "-f", YAML_INV])
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "INFORME DE CARRILES BICI - Bahía de Cádiz"
    assert out.endswith("Longitud total: 7.5 km\n")


def test_report_with_status_override(capsys):
    main(["report", "-f", YAML_INV, "--set", "Puente Carranza=Cerrado"])
    assert "- Puente Carranza (1.75 km): Cerrado\n" in capsys.readouterr().out


def test_report_json(capsys):
    main(["report", "-f", JSON_INV, "--json"])
    out = capsys.readouterr().out
    assert '"ok": true' in out
    assert '"network_id": "san-fernando"' in out


def test_report_bad_set_argument(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["report", "-f", YAML_INV, "--set", "sin-igual"])
    assert exc.value.code == 1
    assert "NOMBRE=ESTADO" in capsys.readouterr().err


def test_report_unknown_segment_override(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["report", "-f", YAML_INV, "--set", "Inexistente=Cerrado"])
    assert exc.value.code == 1
    assert "Inexistente" in capsys.readouterr().err


def test_status(capsys):
    main(["status", "-f", YAML_INV, "-n", "Avenida de Andalucía"])
    assert capsys.readouterr().out == "En obras\n"


def test_status_not_found(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["status", "-f", YAML_INV, "-n", "Inexistente"])
    assert exc.value.code == 1
    assert "no existe" in capsys.readouterr().err


def test_total(capsys):
    main(["total", "-f", JSON_INV])
    assert capsys.readouterr().out == "5.5 km\n"


def test_list(capsys):
    main(["list", "-f", JSON_INV])
    assert capsys.readouterr().out == "Calle Real\t4.0\nCamino de los Ingleses\t1.5\n"


def test_missing_file(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["total", "-f", str(BASE / "examples" / "no-existe.yaml")])
    assert exc.value.code == 1
    assert "no-existe.yaml" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1
    assert "usage: carrilbici" in capsys.readouterr().out


def test_non_utf8_file(tmp_path, capsys):
    p = tmp_path / "latin1.yaml"
    p.write_bytes("network_id: x\nsegments:\n  - name: Bahía\n    length_km: 1\n".encode("latin-1"))
    with pytest.raises(SystemExit) as exc:
        main(["report", "-f", str(p)])
    assert exc.value.code == 1
    assert "unreadable_document" in capsys.readouterr().err


def test_directory_path_json(tmp_path, capsys):
    main(["report", "-f", str(tmp_path), "--json"])
    out = capsys.readouterr().out
    assert '"ok": false' in out
    assert "unreadable_document" in out


def test_directory_path_total(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["total", "-f", str(tmp_path)])
    assert exc.value.code == 1
    assert "unreadable_document" in capsys.readouterr().err


def test_json_bad_set_argument_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["report", "-f", YAML_INV, "--json", "--set", "sin-igual"])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "NOMBRE=ESTADO" in captured.err
