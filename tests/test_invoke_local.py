from __future__ import annotations

import importlib.util
import json
import sys
from pathlib import Path

from fakes import sample_job_payload


MODULE_PATH = Path(__file__).resolve().parents[1] / "scripts" / "invoke_local.py"
SPEC = importlib.util.spec_from_file_location("invoke_local", MODULE_PATH)
assert SPEC and SPEC.loader
invoke_local = importlib.util.module_from_spec(SPEC)
sys.modules[SPEC.name] = invoke_local
SPEC.loader.exec_module(invoke_local)


def test_load_event_wraps_bare_job(tmp_path: Path) -> None:
    path = tmp_path / "job.json"
    path.write_text(json.dumps(sample_job_payload()), encoding="utf-8")
    event = invoke_local.load_event(path)
    assert list(event.keys()) == ["CodePipeline.job"]


def test_load_event_keeps_full_event(tmp_path: Path) -> None:
    path = tmp_path / "event.json"
    path.write_text(json.dumps({"CodePipeline.job": sample_job_payload()}), encoding="utf-8")
    assert invoke_local.load_event(path)["CodePipeline.job"]["id"] == sample_job_payload()["id"]


def test_main_prints_result(tmp_path: Path, monkeypatch, capsys) -> None:
    path = tmp_path / "event.json"
    path.write_text(json.dumps({"CodePipeline.job": sample_job_payload()}), encoding="utf-8")

    class _Handler:
        def handle(self, event, context):
            assert context.aws_request_id == "req-local"
            return {"jobId": event["CodePipeline.job"]["id"], "status": "succeeded"}

    monkeypatch.setattr(invoke_local, "build_handler", lambda settings: _Handler())
    monkeypatch.setattr(sys, "argv", ["invoke_local.py", str(path), "--request-id", "req-local"])

    assert invoke_local.main() == 0
    assert '"status": "succeeded"' in capsys.readouterr().out


def test_main_rejects_missing_file(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["invoke_local.py", str(tmp_path / "missing.json")])
    assert invoke_local.main() == 2
    assert "ERROR" in capsys.readouterr().err
