import sys
from pathlib import Path
from typing import Callable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_root_env(monkeypatch) -> None:
    monkeypatch.delenv("STEERING_RULES_ROOT", raising=False)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def steering_dir(project_root: Path) -> Path:
    path = project_root / ".kiro" / "steering"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def hooks_dir(project_root: Path) -> Path:
    path = project_root / ".kiro" / "hooks"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_rule() -> Callable[..., Path]:
    def _write(directory: Path, name: str, text: str) -> Path:
        path = directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_rules(steering_dir: Path, write_rule) -> Path:
    write_rule(
        steering_dir,
        "code-style.md",
        "---\ntitle: Coding style\ninclusionMode: always\n---\nKeep functions small.\n",
    )
    write_rule(
        steering_dir,
        "go-conventions.md",
        "---\n"
        "title: Go conventions\n"
        "inclusionMode: fileMatch\n"
        'fileMatchPattern: "**/*.go, go.mod"\n'
        "---\n"
        "Run gofmt before committing.\n",
    )
    write_rule(
        steering_dir,
        "terraform.md",
        "---\n"
        "title: Terraform\n"
        "inclusionMode: fileMatch\n"
        'fileMatchPattern: "**/*.{tf,tfvars}"\n'
        "---\n"
        "Pin provider versions.\n",
    )
    write_rule(
        steering_dir,
        "cloud-cli.md",
        "---\ntitle: Cloud CLI usage\ninclusionMode: manual\n---\nPrefer --output json.\n",
    )
    return steering_dir


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
