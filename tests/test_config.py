from pathlib import Path

from npm_docgen.config import BUNDLED_PROMPTS_DIR, AppConfig, ensure_output_dir


_ENV_KEYS = [
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "DOCS_DIR",
    "TESTS_DIR",
    "PROMPTS_DIR",
    "GEMINI_CACHE",
]


def _clear_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_app_config_defaults(monkeypatch):
    _clear_env(monkeypatch)
    config = AppConfig()

    assert config.api_key is None
    assert config.model == "gemini-2.0-flash-001"
    assert config.docs_dir == Path("docs")
    assert config.tests_dir == Path("tests")
    assert config.prompts_dir == BUNDLED_PROMPTS_DIR
    assert config.lm_cache is False


def test_app_config_env_overrides(monkeypatch, tmp_path):
    _clear_env(monkeypatch)
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-pro")
    monkeypatch.setenv("DOCS_DIR", str(tmp_path / "d"))
    monkeypatch.setenv("TESTS_DIR", str(tmp_path / "t"))
    monkeypatch.setenv("PROMPTS_DIR", str(tmp_path / "p"))
    monkeypatch.setenv("GEMINI_CACHE", "yes")

    config = AppConfig()

    assert config.api_key == "secret"
    assert config.model == "gemini-2.5-pro"
    assert config.docs_dir == tmp_path / "d"
    assert config.tests_dir == tmp_path / "t"
    assert config.prompts_dir == tmp_path / "p"
    assert config.lm_cache is True


def test_bundled_prompts_have_placeholders():
    docs = (BUNDLED_PROMPTS_DIR / "prompt_docs.txt").read_text(encoding="utf-8")
    tests = (BUNDLED_PROMPTS_DIR / "prompt_tests.txt").read_text(encoding="utf-8")

    assert "${packageLink}" in docs
    assert "${packageLink}" in tests
    assert "${packageDocs}" in tests


def test_ensure_output_dir_creates_nested(tmp_path):
    target = tmp_path / "a" / "b"
    assert ensure_output_dir(target) == target
    assert target.is_dir()
    # Existing directories are accepted.
    assert ensure_output_dir(target) == target
