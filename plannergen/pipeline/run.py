from __future__ import annotations

from pathlib import Path
import logging
from typing import List, Optional

from ..models import PlannerConfig, TextDocument
from ..registry import ComponentRegistry, build_registry
from ..section import Section
from ..storage import artifact_path, output_dir, write_document
from .compile import compile_pdf
from .document import build_root_document
from .package import create_bundle
from .render_preview import render_previews
from .resolve import Sectioner


logger = logging.getLogger(__name__)


def _write_errors(errors: List[str], base_dir: Path) -> None:
    error_path = artifact_path("error", base_dir=base_dir)
    if errors:
        error_path.write_text("\n".join(errors), encoding="utf-8")
    else:
        error_path.unlink(missing_ok=True)


def _discard_previous(section: Section, out_dir: Path) -> None:
    # a failed section must not leave an earlier run's file behind
    stale = out_dir / f"{section.name}.{section.extension}"
    if stale.exists():
        logger.info("Removing stale %s", stale)
        stale.unlink()


def run_planner(
    planner_config: PlannerConfig,
    registry: Optional[ComponentRegistry] = None,
    base_dir: Path | None = None,
    with_pdf: bool = False,
) -> dict[str, list[str]]:
    """
    Generate every enabled section and write the planner.

    Resolution problems (unknown family or section) stop the run before any
    file is written. A section that fails while generating is logged and
    listed under FAILED; the other sections are still written.
    """
    registry = registry if registry is not None else build_registry()
    out_dir = output_dir(base_dir)
    sections = Sectioner(planner_config, registry).sections()

    results: dict[str, list[str]] = {"READY": [], "FAILED": [], "ARTIFACTS": []}
    documents: List[TextDocument] = []
    files: List[Path] = []
    errors: List[str] = []

    for section in sections:
        try:
            document = section.generate()
            path = write_document(document, base_dir=out_dir)
        except Exception as exc:
            logger.exception("Section error for %s", section.name)
            errors.append(f"{section.name}: {exc}")
            results["FAILED"].append(section.name)
            _discard_previous(section, out_dir)
            continue
        files.append(path)
        documents.append(document)
        results["READY"].append(section.name)

    root_path = write_document(build_root_document(planner_config, documents), base_dir=out_dir)
    files.insert(0, root_path)
    _write_errors(errors, out_dir)

    if with_pdf and documents:
        pdf_path = compile_pdf(root_path)
        files.append(pdf_path)
        files.extend(render_previews(pdf_path, base_dir=out_dir))

    files.append(create_bundle(files, base_dir=out_dir))
    results["ARTIFACTS"] = [path.name for path in files]
    return results
