from __future__ import annotations

import logging
from pathlib import Path

from .config import AppConfig, ensure_output_dir
from .lm import configure_gemini_lm, generate_text
from .models import GenerationArtifacts
from .packages import package_link, sanitize_package_name
from .templates import (
    DOCS_TEMPLATE,
    PACKAGE_DOCS_TOKEN,
    PACKAGE_LINK_TOKEN,
    TESTS_TEMPLATE,
    fill_placeholder,
    load_template,
)

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_PLACEHOLDER = "No content generated"
MISSING_DOCS_PLACEHOLDER = "does not exist"


def _write_text(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


def _output_path(output_dir: Path, package_name: str) -> Path:
    return output_dir / f"{sanitize_package_name(package_name)}.md"


def _request_generation(prompt: str, config: AppConfig, cache_lm: bool) -> tuple[str, bool]:
    lm = configure_gemini_lm(config, cache=cache_lm)
    text = generate_text(lm, prompt)
    if not text:
        logger.warning("Gemini returned no content; writing placeholder text.")
        return EMPTY_RESPONSE_PLACEHOLDER, True
    return text, False


def read_package_docs(package_name: str, docs_dir: Path) -> tuple[str, Path, bool]:
    """Return previously generated docs for ``package_name``, or the missing-docs marker."""
    docs_path = _output_path(docs_dir, package_name)
    if docs_path.is_file():
        return docs_path.read_text(encoding="utf-8", errors="replace"), docs_path, True
    logger.warning("Documentation file not found at %s.", docs_path)
    return MISSING_DOCS_PLACEHOLDER, docs_path, False


def run_docs_generation(
    package_name: str,
    config: AppConfig,
    *,
    cache_lm: bool = False,
    template_path: Path | None = None,
) -> GenerationArtifacts:
    template = load_template(template_path or config.prompts_dir / DOCS_TEMPLATE)
    prompt = fill_placeholder(template, PACKAGE_LINK_TOKEN, package_link(package_name))

    logger.debug("Requesting documentation for %s", package_name)
    text, used_placeholder = _request_generation(prompt, config, cache_lm)

    output_path = _output_path(ensure_output_dir(config.docs_dir), package_name)
    _write_text(output_path, text)
    logger.info("Documentation saved to %s", output_path)

    return GenerationArtifacts(
        output_path=str(output_path),
        prompt=prompt,
        used_placeholder=used_placeholder,
    )


def run_tests_generation(
    package_name: str,
    config: AppConfig,
    *,
    cache_lm: bool = False,
    template_path: Path | None = None,
) -> GenerationArtifacts:
    template = load_template(template_path or config.prompts_dir / TESTS_TEMPLATE)
    prompt = fill_placeholder(template, PACKAGE_LINK_TOKEN, package_link(package_name))

    package_docs, docs_path, docs_found = read_package_docs(package_name, config.docs_dir)
    prompt = fill_placeholder(prompt, PACKAGE_DOCS_TOKEN, package_docs)

    logger.debug("Requesting test suite for %s", package_name)
    text, used_placeholder = _request_generation(prompt, config, cache_lm)

    output_path = _output_path(ensure_output_dir(config.tests_dir), package_name)
    _write_text(output_path, text)
    logger.info("Test suite saved to %s", output_path)

    return GenerationArtifacts(
        output_path=str(output_path),
        prompt=prompt,
        used_placeholder=used_placeholder,
        docs_path=str(docs_path),
        docs_found=docs_found,
    )
