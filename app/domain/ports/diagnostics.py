from __future__ import annotations

from typing import Mapping, Protocol, Sequence


class DiagnosticRecorderPort(Protocol):
    def record(
        self, endpoint: str, fields: Mapping[str, str], errors: Sequence[str]
    ) -> None:
        """
        Persist a rejected submission for operator inspection.
        Best-effort: implementations must not raise.
        """
