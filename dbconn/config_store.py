"""
config_store.py

load/save the connection list (dbConnections.json).

the file holds one top-level json array. a missing, empty or truncated file
reads as an empty list; anything else that fails to parse is an error.
writes replace the whole file via a temp file + os.replace. an existing file
keeps its permission bits; a new file is created 0600 since it holds passwords.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from .settings import CONNECTIONS_PATH


logger = logging.getLogger(__name__)


def _is_end_of_input(err: json.JSONDecodeError) -> bool:
    # decoder ran out of text before the document was complete
    return err.pos >= len(err.doc.rstrip())


class ConfigFileStore:
    def __init__(self, path: Path | str = CONNECTIONS_PATH):
        self.path = Path(path)

    def read(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            logger.debug("connections file %s does not exist, treating as empty", self.path)
            return []

        text = self.path.read_text(encoding="utf-8-sig")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as err:
            if not _is_end_of_input(err):
                raise
            logger.debug("connections file %s is empty or truncated, treating as empty", self.path)
            return []

        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError(f"connections file {self.path} must hold a json array, got {type(data).__name__}")
        return data

    def write(self, records: list[dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            if self.path.exists():
                os.chmod(tmp, stat.S_IMODE(self.path.stat().st_mode))
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
