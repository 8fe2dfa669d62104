from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from slugify import slugify

from . import config
from .models import TextDocument


logger = logging.getLogger(__name__)

ARTIFACT_NAMES = {
    "root": config.ROOT_DOCUMENT,
    "pdf": Path(config.ROOT_DOCUMENT).with_suffix(".pdf").name,
    "bundle": "bundle.zip",
    "error": "error.log",
}


def output_dir(base_dir: Path | None = None) -> Path:
    path = base_dir or config.OUT_DIR
    path.mkdir(parents=True, exist_ok=True)
    return path


def artifact_path(artifact_type: str, base_dir: Path | None = None) -> Path:
    return output_dir(base_dir) / ARTIFACT_NAMES[artifact_type]


def safe_document_name(name: str) -> str:
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        raise ValueError(f"Document name needs an extension: {name!r}")
    if ".." in name or "/" in name or "\\" in name:
        raise ValueError(f"Invalid document name: {name!r}")
    if slugify(stem, separator="_", lowercase=False) != stem:
        raise ValueError(f"Invalid document name: {name!r}")
    return name


def write_document(document: TextDocument, base_dir: Path | None = None) -> Path:
    path = output_dir(base_dir) / safe_document_name(document.name)
    path.write_text(document.content, encoding="utf-8")
    logger.info("Wrote %s", path)
    return path


def write_documents(documents: Iterable[TextDocument], base_dir: Path | None = None) -> List[Path]:
    return [write_document(document, base_dir=base_dir) for document in documents]
