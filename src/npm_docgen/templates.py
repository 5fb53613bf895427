from __future__ import annotations

from pathlib import Path

PACKAGE_LINK_TOKEN = "${packageLink}"
PACKAGE_DOCS_TOKEN = "${packageDocs}"

DOCS_TEMPLATE = "prompt_docs.txt"
TESTS_TEMPLATE = "prompt_tests.txt"


def load_template(path: Path) -> str:
    """Read a prompt template; a missing file raises ``FileNotFoundError``."""
    return path.read_text(encoding="utf-8")


def fill_placeholder(template: str, token: str, value: str) -> str:
    # Only the first occurrence is substituted, and ``value`` is inserted literally.
    return template.replace(token, value, 1)
