"""Tests for DirectoryBrowser."""

import pytest

from branch_compare.exceptions import DirectoryBrowseError
from branch_compare.services import DirectoryBrowser

pytestmark = pytest.mark.integration


class TestDirectoryBrowser:
    @pytest.mark.asyncio
    async def test_lists_directories_and_flags_repositories(self, gateway, git_repo, tmp_path):
        (tmp_path / "plain").mkdir()
        (tmp_path / ".hidden").mkdir()
        (tmp_path / "file.txt").write_text("not a directory")
        browser = DirectoryBrowser(git_gateway=gateway)

        result = await browser.browse(str(tmp_path))

        assert result.current_path == str(tmp_path)
        assert result.parent == str(tmp_path.parent)
        assert [(d.name, d.is_git_repo) for d in result.directories] == [
            ("plain", False),
            ("project", True),
        ]
        assert result.directories[1].path == str(git_repo)

    @pytest.mark.asyncio
    async def test_defaults_to_configured_root(self, gateway, tmp_path):
        (tmp_path / "child").mkdir()
        browser = DirectoryBrowser(git_gateway=gateway, root=str(tmp_path))

        result = await browser.browse()

        assert result.current_path == str(tmp_path)
        assert [d.name for d in result.directories] == ["child"]

    @pytest.mark.asyncio
    async def test_missing_directory(self, gateway, tmp_path):
        browser = DirectoryBrowser(git_gateway=gateway)

        with pytest.raises(DirectoryBrowseError):
            await browser.browse(str(tmp_path / "missing"))
