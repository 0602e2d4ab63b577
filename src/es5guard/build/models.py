"""Build data models — the host build's view of a finished compilation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Compilation:
    """Emitted assets of one build plus its error and warning channels.

    Anything appended to ``errors`` fails the build; ``warnings`` are
    reported without blocking it.
    """

    output_path: Path
    assets: list[str] = field(default_factory=list)
    errors: list[Exception] = field(default_factory=list)
    warnings: list[Exception] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return bool(self.errors)
