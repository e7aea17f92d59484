"""Mock implementation of GitGatewayProtocol for development and testing."""

import difflib
from pathlib import Path
from typing import Dict, List, Optional

from branch_compare.exceptions import DestinationExistsError, GitOperationError
from branch_compare.models import DiffStat, DiffSummary
from branch_compare.schemas import FileContent

MOCK_TREES: Dict[str, Dict[str, str]] = {
    "main": {
        "README.md": "# Demo\n\nA sample repository.\n",
        "app.py": "def main():\n    print('hello')\n",
        "legacy.txt": "old\ncontent\n",
    },
    "feature": {
        "README.md": "# Demo\n\nA sample repository.\n",
        "app.py": "def main():\n    print('hello, world')\n    return 0\n",
        "notes.txt": "first\nsecond\nthird\n",
    },
}


class MockGitGateway:
    """Serves a fixed two-branch repository from memory, for any path."""

    def __init__(self, trees: Optional[Dict[str, Dict[str, str]]] = None):
        self._trees = trees or MOCK_TREES

    async def verify_repository(self, path: str) -> None:
        return None

    async def is_repository(self, path: str) -> bool:
        return True

    async def clone(self, url: str, dest_path: str) -> None:
        dest = Path(dest_path)
        if dest.exists():
            raise DestinationExistsError(f"Destination already exists: {dest_path}")
        dest.mkdir(parents=True)

    async def list_branches(self, path: str) -> List[str]:
        return list(self._trees)

    def _tree(self, ref: str) -> Dict[str, str]:
        if ref not in self._trees:
            raise GitOperationError("Failed to compare branches", detail=f"unknown ref {ref}")
        return self._trees[ref]

    def _diff_lines(self, old: str, new: str, path: str) -> List[str]:
        return list(
            difflib.unified_diff(
                old.splitlines(keepends=True),
                new.splitlines(keepends=True),
                fromfile=f"a/{path}",
                tofile=f"b/{path}",
            )
        )

    async def diff_summary(self, path: str, source_ref: str, target_ref: str) -> DiffSummary:
        source, target = self._tree(source_ref), self._tree(target_ref)
        stats = []
        for file_path in sorted(set(source) | set(target)):
            lines = self._diff_lines(
                source.get(file_path, ""), target.get(file_path, ""), file_path
            )
            if not lines:
                continue
            body = lines[2:]
            stats.append(
                DiffStat(
                    path=file_path,
                    insertions=sum(1 for line in body if line.startswith("+")),
                    deletions=sum(1 for line in body if line.startswith("-")),
                )
            )
        return DiffSummary(files=stats)

    async def show_file(self, path: str, ref: str, file_path: str) -> FileContent:
        tree = self._trees.get(ref, {})
        if file_path not in tree:
            return FileContent(content="", exists=False)
        return FileContent(content=tree[file_path], exists=True)

    async def file_diff(
        self, path: str, source_ref: str, target_ref: str, file_path: str
    ) -> str:
        source, target = self._tree(source_ref), self._tree(target_ref)
        return "".join(
            self._diff_lines(
                source.get(file_path, ""), target.get(file_path, ""), file_path
            )
        )
