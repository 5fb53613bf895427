from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BUNDLED_PROMPTS_DIR = Path(__file__).resolve().parent / "prompts"


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(slots=True)
class AppConfig:
    """
    Runtime configuration for the npm documentation and test generators.

    Users can override defaults through environment variables:
      - ``GEMINI_API_KEY``: Credential for the Gemini API.
      - ``GEMINI_MODEL``: Gemini model identifier.
      - ``DOCS_DIR``: Folder where generated documentation is written.
      - ``TESTS_DIR``: Folder where generated test suites are written.
      - ``PROMPTS_DIR``: Folder holding ``prompt_docs.txt`` and ``prompt_tests.txt``.
      - ``GEMINI_CACHE``: Set truthy to enable DSPy's LM cache.
    """
    api_key: str | None = field(default_factory=lambda: os.getenv("GEMINI_API_KEY"))
    model: str = field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.0-flash-001")
    )
    docs_dir: Path = field(default_factory=lambda: Path(os.getenv("DOCS_DIR", "docs")))
    tests_dir: Path = field(default_factory=lambda: Path(os.getenv("TESTS_DIR", "tests")))
    prompts_dir: Path = field(
        default_factory=lambda: Path(os.getenv("PROMPTS_DIR") or BUNDLED_PROMPTS_DIR)
    )
    lm_cache: bool = field(default_factory=lambda: _env_flag("GEMINI_CACHE", False))


def ensure_output_dir(path: Path) -> Path:
    """Return ``path`` and create it if missing."""
    path.mkdir(parents=True, exist_ok=True)
    return path
