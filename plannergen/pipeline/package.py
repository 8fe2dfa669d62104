from __future__ import annotations

from pathlib import Path
from typing import Iterable
import zipfile

from ..storage import artifact_path


def create_bundle(files: Iterable[Path], base_dir: Path | None = None) -> Path:
    """
    Zip the generated planner for distribution.

    Expected contents: planner.tex, every section .tex in config order, and
    planner.pdf plus previews when the run compiled them.
    """
    bundle_path = artifact_path("bundle", base_dir=base_dir)
    required_files = list(files)

    # Fail fast if any artifact is missing
    missing = [p for p in required_files if not p.exists()]
    if missing:
        missing_list = ", ".join(str(p) for p in missing)
        raise FileNotFoundError(f"bundle inputs missing: {missing_list}")

    # Deterministic order in the zip
    with zipfile.ZipFile(bundle_path, "w", compression=zipfile.ZIP_DEFLATED) as bundle:
        for p in required_files:
            bundle.write(p, arcname=p.name)

    return bundle_path
