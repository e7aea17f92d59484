"""Unit tests for RepositoryService."""

from unittest.mock import AsyncMock, Mock

import pytest

from branch_compare.exceptions import (
    DestinationExistsError,
    NotAGitRepositoryError,
    RepositoryNotFoundError,
)
from branch_compare.schemas import FileContent
from branch_compare.services import RepositoryRegistry, RepositoryService


class TestRepositoryService:
    """Test cases for RepositoryService class."""

    def setup_method(self):
        self.registry = RepositoryRegistry()
        self.gateway = Mock()
        self.gateway.verify_repository = AsyncMock(return_value=None)
        self.gateway.clone = AsyncMock(return_value=None)
        self.gateway.list_branches = AsyncMock(return_value=["main", "feature"])
        self.gateway.show_file = AsyncMock()
        self.gateway.file_diff = AsyncMock(return_value="diff --git a/x b/x\n")
        self.service = RepositoryService(registry=self.registry, git_gateway=self.gateway)

    @pytest.mark.asyncio
    async def test_add_repository_defaults_name_to_basename(self):
        repo = await self.service.add_repository("/repos/project/")

        assert repo.name == "project"
        assert repo.path == "/repos/project/"
        self.gateway.verify_repository.assert_awaited_once_with("/repos/project/")

    @pytest.mark.asyncio
    async def test_add_repository_is_idempotent(self):
        first = await self.service.add_repository("/repos/project", "Project")
        second = await self.service.add_repository("/repos/project", "Other")

        assert first.id == second.id
        assert len(self.service.list_repositories()) == 1

    @pytest.mark.asyncio
    async def test_add_invalid_repository_is_not_registered(self):
        self.gateway.verify_repository.side_effect = NotAGitRepositoryError("Not a git repository")

        with pytest.raises(NotAGitRepositoryError):
            await self.service.add_repository("/tmp/plain")

        assert self.service.list_repositories() == []

    @pytest.mark.asyncio
    async def test_clone_into_new_directory(self, tmp_path):
        dest = str(tmp_path / "clone")

        repo = await self.service.clone_repository("https://example.com/r.git", dest)

        self.gateway.clone.assert_awaited_once_with("https://example.com/r.git", dest)
        assert repo.name == "clone"
        assert repo.path == dest

    @pytest.mark.asyncio
    async def test_clone_into_registered_directory_returns_it(self, tmp_path):
        existing = self.registry.add("known", str(tmp_path))

        repo = await self.service.clone_repository("https://example.com/r.git", str(tmp_path))

        assert repo.id == existing.id
        assert repo.last_accessed >= existing.last_accessed
        self.gateway.clone.assert_not_awaited()
        self.gateway.verify_repository.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_clone_into_unregistered_repository_registers_it(self, tmp_path):
        repo = await self.service.clone_repository(
            "https://example.com/r.git", str(tmp_path), name="Existing"
        )

        assert repo.name == "Existing"
        self.gateway.clone.assert_not_awaited()
        assert self.registry.get_by_path(str(tmp_path)) is not None

    @pytest.mark.asyncio
    async def test_clone_into_plain_directory_fails(self, tmp_path):
        self.gateway.verify_repository.side_effect = NotAGitRepositoryError("Not a git repository")

        with pytest.raises(DestinationExistsError):
            await self.service.clone_repository("https://example.com/r.git", str(tmp_path))

        self.gateway.clone.assert_not_awaited()
        assert self.service.list_repositories() == []

    @pytest.mark.asyncio
    async def test_lookups_require_known_repository(self):
        with pytest.raises(RepositoryNotFoundError):
            await self.service.list_branches(5)
        with pytest.raises(RepositoryNotFoundError):
            await self.service.get_file(5, "main", "a.txt")
        with pytest.raises(RepositoryNotFoundError):
            await self.service.get_file_diff(5, "main", "feature", "a.txt")
        with pytest.raises(RepositoryNotFoundError):
            await self.service.get_three_way_view(5, "main", "feature", "a.txt")

    @pytest.mark.asyncio
    async def test_list_branches_uses_repository_path(self):
        repo = self.registry.add("project", "/repos/project")

        branches = await self.service.list_branches(repo.id)

        assert branches == ["main", "feature"]
        self.gateway.list_branches.assert_awaited_once_with("/repos/project")

    @pytest.mark.asyncio
    async def test_three_way_view_uses_target_as_preview(self):
        repo = self.registry.add("project", "/repos/project")
        source = FileContent(content="old\n", exists=True)
        target = FileContent(content="new\n", exists=True)
        self.gateway.show_file.side_effect = [source, target]

        view = await self.service.get_three_way_view(repo.id, "main", "feature", "a.txt")

        assert view.source == source
        assert view.target == target
        assert view.merged == target
        assert view.merged_is_preview is True

    @pytest.mark.asyncio
    async def test_three_way_view_of_deleted_file(self):
        repo = self.registry.add("project", "/repos/project")
        self.gateway.show_file.side_effect = [
            FileContent(content="old\n", exists=True),
            FileContent(content="", exists=False),
        ]

        view = await self.service.get_three_way_view(repo.id, "main", "feature", "a.txt")

        assert view.merged.exists is False
        assert view.merged.content == ""
