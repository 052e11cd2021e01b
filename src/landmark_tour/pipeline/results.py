"""Pipeline step results and diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class StepReport:
    name: str
    ok: bool
    message: Optional[str] = None
    elapsed_ms: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "ok": self.ok,
            "message": self.message,
            "elapsed_ms": round(self.elapsed_ms, 3) if self.elapsed_ms is not None else None,
        }
