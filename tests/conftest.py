import json
import sys
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from url_redirector.constants import ROOT_ENVVAR  # noqa: E402
from url_redirector.rules.repository import RulesRepository  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv(ROOT_ENVVAR, raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def app_root(tmp_path: Path) -> Path:
    return tmp_path / ".config" / "url-redirector"


@pytest.fixture
def repository(app_root: Path) -> RulesRepository:
    return RulesRepository(app_root)


@pytest.fixture
def write_rules(app_root: Path):
    def _write(rules: list[dict]) -> Path:
        path = app_root / "rules.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(rules), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault("COLUMNS", "240")
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
