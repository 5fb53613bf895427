import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

from .config import AppConfig
from .errors import GenerationError
from .models import GenerationArtifacts
from .pipeline import run_docs_generation, run_tests_generation

logger = logging.getLogger(__name__)

_EXAMPLE_PACKAGE = "@rescui/use-glow-hover"


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "package",
        help=f"npm package name, e.g. {_EXAMPLE_PACKAGE}",
    )
    parser.add_argument(
        "--model",
        help="Gemini model identifier (overrides GEMINI_MODEL).",
    )
    parser.add_argument(
        "--api-key",
        help="Gemini API key (overrides GEMINI_API_KEY).",
    )
    parser.add_argument(
        "--template",
        type=Path,
        help="Prompt template file to use instead of the bundled one.",
    )
    parser.add_argument(
        "--cache-lm",
        action="store_true",
        help="Enable DSPy's LM cache (useful for repeated experiments).",
    )


def build_docs_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generate",
        description="Generate Markdown documentation for an npm package using Gemini.",
        epilog=f'Example: generate -- {_EXAMPLE_PACKAGE}',
    )
    _add_common_arguments(parser)
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory where documentation is written (default: DOCS_DIR or ./docs).",
    )
    return parser


def build_tests_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generate-tests",
        description="Generate a test suite for an npm package using Gemini and its generated docs.",
        epilog=f'Example: generate-tests -- {_EXAMPLE_PACKAGE}',
    )
    _add_common_arguments(parser)
    parser.add_argument(
        "--docs-dir",
        type=Path,
        help="Directory holding previously generated documentation (default: DOCS_DIR or ./docs).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory where the test suite is written (default: TESTS_DIR or ./tests).",
    )
    return parser


def _config_from_args(args: argparse.Namespace) -> AppConfig:
    config = AppConfig()
    if args.model:
        config.model = args.model
    if args.api_key:
        config.api_key = args.api_key
    return config


def _run(
    runner: Callable[..., GenerationArtifacts],
    package: str,
    config: AppConfig,
    args: argparse.Namespace,
) -> int:
    try:
        artifacts = runner(
            package,
            config,
            cache_lm=bool(args.cache_lm),
            template_path=args.template,
        )
    except FileNotFoundError as exc:
        logger.error("Prompt template not found: %s", exc.filename or exc)
        return 1
    except (GenerationError, OSError) as exc:
        logger.error("Error: %s", exc)
        return 1

    print(artifacts.output_path)
    return 0


def main_docs(argv: list[str] | None = None) -> int:
    _configure_logging()
    parser = build_docs_parser()
    args = parser.parse_args(argv)
    if not args.package:
        parser.error("a package name is required")

    config = _config_from_args(args)
    if args.output_dir:
        config.docs_dir = args.output_dir

    return _run(run_docs_generation, args.package, config, args)


def main_tests(argv: list[str] | None = None) -> int:
    _configure_logging()
    parser = build_tests_parser()
    args = parser.parse_args(argv)
    if not args.package:
        parser.error("a package name is required")

    config = _config_from_args(args)
    if args.docs_dir:
        config.docs_dir = args.docs_dir
    if args.output_dir:
        config.tests_dir = args.output_dir

    return _run(run_tests_generation, args.package, config, args)


if __name__ == "__main__":
    sys.exit(main_docs())
