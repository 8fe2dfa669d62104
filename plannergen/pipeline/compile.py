from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from .. import config
from ..errors import CompileError


logger = logging.getLogger(__name__)


def compile_pdf(tex_path: Path, engine: str = config.LATEX_ENGINE, runs: int = config.LATEX_RUNS) -> Path:
    engine_path = shutil.which(engine)
    if engine_path is None:
        raise CompileError(f"{engine} not found in PATH; compile manually: {engine} {tex_path.name}")

    out_dir = tex_path.parent
    cmd = [
        engine_path,
        "-interaction=nonstopmode",
        "-halt-on-error",
        f"-output-directory={out_dir}",
        tex_path.name,
    ]
    # second pass resolves hyperlink targets
    for attempt in range(1, runs + 1):
        logger.info("Compiling %s (pass %d/%d)", tex_path.name, attempt, runs)
        try:
            subprocess.run(cmd, cwd=out_dir, check=True, capture_output=True)
        except subprocess.CalledProcessError as exc:
            log_tail = (exc.stdout or b"").decode("utf-8", errors="replace")[-2000:]
            raise CompileError(f"{engine} failed on {tex_path.name}:\n{log_tail}") from exc

    pdf_path = tex_path.with_suffix(".pdf")
    if not pdf_path.exists():
        raise CompileError(f"{engine} finished but {pdf_path.name} was not produced")
    return pdf_path
