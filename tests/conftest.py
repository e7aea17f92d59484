from pathlib import Path
from typing import Dict, Iterable, Optional

import pytest
from fastapi.testclient import TestClient
from git import Actor, Repo

from branch_compare.config.settings import Settings
from branch_compare.main import create_app
from branch_compare.services import GitGateway, RepositoryRegistry

ACTOR = Actor("Test User", "test@example.com")

TEN_LINES = "".join(f"line {i}\n" for i in range(1, 11))


def commit_files(
    repo: Repo,
    message: str,
    files: Optional[Dict[str, str]] = None,
    removed: Iterable[str] = (),
) -> None:
    """Write, stage and commit files; `removed` paths are deleted."""
    files = files or {}
    root = Path(repo.working_tree_dir)
    for rel_path, content in files.items():
        target = root / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    if files:
        repo.index.add(list(files))
    removed = list(removed)
    if removed:
        repo.index.remove(removed, working_tree=True)
    repo.index.commit(message, author=ACTOR, committer=ACTOR)


def init_repo(path: Path) -> Repo:
    path.mkdir(parents=True, exist_ok=True)
    return Repo.init(path)


@pytest.fixture
def scenario_repo(tmp_path) -> Path:
    """`main` with a README; `feature` adds a.txt with ten lines."""
    repo = init_repo(tmp_path / "scenario")
    commit_files(repo, "initial", {"README.md": "hello\n"})
    repo.git.branch("-M", "main")
    repo.create_head("feature").checkout()
    commit_files(repo, "add a.txt", {"a.txt": TEN_LINES})
    repo.heads.main.checkout()
    repo.close()
    return tmp_path / "scenario"


@pytest.fixture
def git_repo(tmp_path) -> Path:
    """
    Repository whose `feature` branch adds, modifies and deletes files.

    `main` also moves on after the branch point (main_only.txt), which must
    not show up in a three-dot comparison main...feature.
    """
    repo = init_repo(tmp_path / "project")
    commit_files(
        repo,
        "initial",
        {
            "README.md": "# Project\n",
            "app.py": "def main():\n    return 1\n",
            "legacy.txt": "one\ntwo\nthree\n",
        },
    )
    repo.git.branch("-M", "main")

    repo.create_head("feature").checkout()
    commit_files(
        repo,
        "feature work",
        {"a.txt": TEN_LINES, "app.py": "def main():\n    return 2\n"},
        removed=["legacy.txt"],
    )

    repo.heads.main.checkout()
    commit_files(repo, "main moves on", {"main_only.txt": "only on main\n"})
    repo.close()
    return tmp_path / "project"


@pytest.fixture
def registry() -> RepositoryRegistry:
    return RepositoryRegistry()


@pytest.fixture
def gateway() -> GitGateway:
    return GitGateway()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(BROWSE_ROOT=str(tmp_path), DEBUG=False)


@pytest.fixture
def client(settings, registry, gateway):
    app = create_app(settings=settings, registry=registry, git_gateway=gateway)
    with TestClient(app) as test_client:
        yield test_client


BINARY_BYTES = b"\x89PNG\r\n\x1a\n\xff\xfe\x00\x01"
LATIN1_BYTES = "café\n".encode("latin-1")


@pytest.fixture
def encoded_repo(tmp_path) -> Path:
    """`feature` adds a non-ASCII filename, a binary file and a Latin-1 file."""
    path = tmp_path / "encoded"
    repo = init_repo(path)
    commit_files(repo, "initial", {"README.md": "hello\n"})
    repo.git.branch("-M", "main")
    repo.create_head("feature").checkout()
    (path / "logo.bin").write_bytes(BINARY_BYTES)
    (path / "latin1.txt").write_bytes(LATIN1_BYTES)
    commit_files(repo, "add encoded files", {"café.txt": "bonjour\n"})
    repo.index.add(["logo.bin", "latin1.txt"])
    repo.index.commit("add binary and latin-1", author=ACTOR, committer=ACTOR)
    repo.heads.main.checkout()
    repo.close()
    return path
