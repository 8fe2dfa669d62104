from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from plannergen.errors import CompileError
from plannergen.pipeline.compile import compile_pdf


def test_missing_engine(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr("plannergen.pipeline.compile.shutil.which", lambda name: None)
    with pytest.raises(CompileError):
        compile_pdf(tmp_path / "planner.tex")


def test_runs_engine_twice(monkeypatch, tmp_path: Path) -> None:
    calls = []

    def fake_run(cmd, cwd=None, check=False, capture_output=False):  # noqa: ANN001 - test helper
        calls.append(cmd)
        (Path(cwd) / "planner.pdf").write_bytes(b"%PDF")
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr("plannergen.pipeline.compile.shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr("plannergen.pipeline.compile.subprocess.run", fake_run)
    pdf_path = compile_pdf(tmp_path / "planner.tex")
    assert pdf_path == tmp_path / "planner.pdf"
    assert len(calls) == 2
    assert calls[0][0] == "/usr/bin/pdflatex"
    assert calls[0][-1] == "planner.tex"


def test_engine_failure(monkeypatch, tmp_path: Path) -> None:
    def fake_run(cmd, cwd=None, check=False, capture_output=False):  # noqa: ANN001 - test helper
        raise subprocess.CalledProcessError(1, cmd, output=b"! Undefined control sequence.")

    monkeypatch.setattr("plannergen.pipeline.compile.shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr("plannergen.pipeline.compile.subprocess.run", fake_run)
    with pytest.raises(CompileError, match="Undefined control sequence"):
        compile_pdf(tmp_path / "planner.tex")
