from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Mapping, Sequence

from app.domain.ports.diagnostics import DiagnosticRecorderPort

logger = logging.getLogger(__name__)


class FileDiagnosticRecorder(DiagnosticRecorderPort):
    """
    Keeps the last rejected submission in a single JSON file.
    Each call overwrites the previous record.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def record(
        self, endpoint: str, fields: Mapping[str, str], errors: Sequence[str]
    ) -> None:
        payload = {
            "endpoint": endpoint,
            "body": dict(fields),
            "errors": list(errors),
        }
        try:
            self._path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except OSError as e:
            logger.warning(
                "could not write diagnostic record",
                extra={"path": str(self._path), "error": str(e)},
            )
