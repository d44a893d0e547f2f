"""YAML file helpers shared by the recipe and plan repositories."""
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, List

import yaml

from averse.domain.errors import DeserializeError, NotFoundError, StorageError
from averse.utilities.constants import FILE_EXTENSION

logger = logging.getLogger(__name__)


def with_extension(directory: Path, stem: str) -> Path:
    return Path(directory) / f"{stem}.{FILE_EXTENSION}"


def read_document(path: Path) -> Any:
    """Load one YAML document, mapping every failure onto the storage error taxonomy."""
    path = Path(path)
    if not path.is_file():
        raise NotFoundError(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        raise StorageError(path, e) from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DeserializeError(path, str(e)) from e


def write_document(path: Path, data: Any) -> Path:
    """Write a YAML document through a temporary file so a failed write leaves no partial file."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}_", suffix=f".{FILE_EXTENSION}")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                yaml.safe_dump(data, tmp, sort_keys=False, allow_unicode=True, default_flow_style=False)
            shutil.move(tmp_path, path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
    except OSError as e:
        raise StorageError(path, e) from e
    logger.debug(f"Wrote {path}")
    return path


def list_documents(directory: Path) -> List[Path]:
    """All stored documents in a directory, sorted by file name. Hidden temp files are skipped."""
    directory = Path(directory)
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise StorageError(directory, e) from e
    return [p for p in entries
            if p.is_file() and p.suffix == f".{FILE_EXTENSION}" and not p.name.startswith('.')]
