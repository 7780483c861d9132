"""Reading external references from JSON or JSONL files."""
import json
from pathlib import Path
from typing import Any


class ReferenceFileError(ValueError):
    """The references file is missing or not in a supported format."""


def load_external_refs(file_path: Path) -> list[dict[str, Any]]:
    """
    Load SPDX `externalRefs` entries.

    Accepted formats:
    - a JSON array of objects with referenceType / referenceLocator
    - JSONL, one such object per line

    Raises:
        ReferenceFileError if the file is missing, empty or malformed
    """
    if not file_path.exists():
        raise ReferenceFileError(f"File does not exist: {file_path}")

    if not file_path.is_file():
        raise ReferenceFileError(f"Not a file: {file_path}")

    text = file_path.read_text(encoding='utf-8')
    if not text.strip():
        raise ReferenceFileError(f"File is empty: {file_path}")

    if text.lstrip().startswith('['):
        try:
            entries = json.loads(text)
        except json.JSONDecodeError as e:
            raise ReferenceFileError(f"Invalid JSON in {file_path}: {e}")
    else:
        entries = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                entries.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise ReferenceFileError(
                    f"Invalid JSON on line {line_number} of {file_path}: {e}",
                )

    not_objects = [entry for entry in entries if not isinstance(entry, dict)]
    if not_objects:
        raise ReferenceFileError(
            f"Expected JSON objects in {file_path}, found {type(not_objects[0]).__name__}",
        )
    return entries
