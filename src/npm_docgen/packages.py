from __future__ import annotations

import re

NPM_PACKAGE_BASE_URL = "https://www.npmjs.com/package/"

_UNSAFE_FILENAME_CHARS_RE = re.compile(r"[@/\\]")


def package_link(package_name: str) -> str:
    """Return the npmjs.com page for ``package_name``; the name is not encoded."""
    return f"{NPM_PACKAGE_BASE_URL}{package_name}"


def sanitize_package_name(package_name: str) -> str:
    """Replace ``@``, ``/`` and ``\\`` with ``-`` so the name can be used as a file stem.

    ``@rescui/use-glow-hover`` becomes ``-rescui-use-glow-hover``.
    """
    return _UNSAFE_FILENAME_CHARS_RE.sub("-", package_name)
