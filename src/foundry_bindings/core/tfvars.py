"""Terraform variables file output."""

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def write_tfvars(path: Path, variables: dict[str, Any]) -> None:
    """Write *variables* as a ``.tfvars.json`` file.

    - Keys are sorted so repeated runs produce identical files
    - Writes atomically (temp file + rename)
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(variables, indent=2, sort_keys=True) + "\n"

    fd, tmp_path = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    tmp_file = Path(tmp_path)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        tmp_file.replace(path)
    finally:
        with contextlib.suppress(FileNotFoundError):
            tmp_file.unlink()
    logger.debug("Variables written to %s", path)


def load_tfvars(path: Path) -> dict[str, Any]:
    """Read a variables file written by :func:`write_tfvars`."""
    return json.loads(Path(path).read_text(encoding="utf-8"))
