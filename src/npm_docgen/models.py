from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GenerationArtifacts:
    """Outcome of one generator run."""

    output_path: str
    prompt: str
    used_placeholder: bool = False
    docs_path: str | None = None
    docs_found: bool | None = None
