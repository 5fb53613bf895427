"""Gemini-powered documentation and test-suite generator for npm packages."""

from .config import AppConfig
from .errors import ErrorClass, GenerationError
from .models import GenerationArtifacts
from .packages import package_link, sanitize_package_name
from .pipeline import run_docs_generation, run_tests_generation

__all__ = [
    "AppConfig",
    "ErrorClass",
    "GenerationArtifacts",
    "GenerationError",
    "package_link",
    "run_docs_generation",
    "run_tests_generation",
    "sanitize_package_name",
]
