"""
Output writers.

Both writers render the whole document in memory and move it into place
with a single os.replace, so a failed run never leaves a partial file.
"""
from __future__ import annotations

import csv
import io
import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, Sequence, Union

from ..errors import OutputWriteError
from .logger import get_logger

log = get_logger(__name__)

PathLike = Union[str, Path]


def render_csv(records: Iterable[Dict[str, Any]], fields: Sequence[str]) -> str:
    """Render records as CSV with exactly ``fields`` as columns, in order."""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(fields), extrasaction="ignore", lineterminator="\n")
    writer.writeheader()
    for record in records:
        writer.writerow({name: ("" if record.get(name) is None else record.get(name)) for name in fields})
    return buffer.getvalue()


def render_json(document: Any) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def _target_mode(path: Path) -> int:
    """Mode of the file being replaced, or the umask default for a new one."""
    if path.exists():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_atomic(path: PathLike, content: str) -> Path:
    """Write ``content`` to ``path`` via a temporary file in the same directory."""
    path = Path(path)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", newline="", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise OutputWriteError(str(path), e.strerror or str(e))
    log.debug("Wrote %d characters to %s", len(content), path)
    return path


def write_csv(path: PathLike, records: Iterable[Dict[str, Any]], fields: Sequence[str]) -> Path:
    return write_atomic(path, render_csv(records, fields))


def write_json(path: PathLike, document: Any) -> Path:
    return write_atomic(path, render_json(document))
