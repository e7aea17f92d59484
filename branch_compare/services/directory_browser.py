import asyncio
import logging
import os
from typing import Optional

from ..exceptions import DirectoryBrowseError
from ..protocols.git_gateway_protocol import GitGatewayProtocol
from ..schemas import BrowseResult, DirectoryEntry

logger = logging.getLogger(__name__)


class DirectoryBrowser:
    """Lists local directories and flags the ones that are git repositories."""

    def __init__(self, git_gateway: GitGatewayProtocol, root: str = ""):
        self.git_gateway = git_gateway
        self.root = root

    async def browse(self, dir_path: Optional[str] = None) -> BrowseResult:
        target = dir_path or self.root or os.getcwd()
        try:
            entries = await asyncio.to_thread(self._list_directories, target)
        except OSError as e:
            logger.warning("Cannot browse %s: %s", target, e)
            raise DirectoryBrowseError("Failed to browse directory", detail=str(e)) from e

        flags = await asyncio.gather(
            *(self.git_gateway.is_repository(entry.path) for entry in entries)
        )
        for entry, is_repo in zip(entries, flags):
            entry.is_git_repo = is_repo

        return BrowseResult(
            current_path=target,
            parent=os.path.dirname(os.path.normpath(target)),
            directories=entries,
        )

    def _list_directories(self, target: str):
        with os.scandir(target) as it:
            entries = [
                DirectoryEntry(name=e.name, path=os.path.join(target, e.name))
                for e in it
                if e.is_dir() and not e.name.startswith(".")
            ]
        return sorted(entries, key=lambda e: e.name)
