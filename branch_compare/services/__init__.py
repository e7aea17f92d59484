"""Services for the application."""

from .comparison_service import ComparisonService
from .directory_browser import DirectoryBrowser
from .git_gateway import GitGateway
from .git_gateway_factory import create_git_gateway, create_git_gateway_from_settings
from .repository_registry import RepositoryRegistry
from .repository_service import RepositoryService

__all__ = [
    "ComparisonService",
    "DirectoryBrowser",
    "GitGateway",
    "RepositoryRegistry",
    "RepositoryService",
    "create_git_gateway",
    "create_git_gateway_from_settings",
]
