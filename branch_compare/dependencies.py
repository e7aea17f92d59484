from fastapi import Depends, Request

from branch_compare.config.settings import Settings
from branch_compare.protocols.git_gateway_protocol import GitGatewayProtocol
from branch_compare.protocols.registry_protocol import RegistryProtocol
from branch_compare.services import ComparisonService, DirectoryBrowser, RepositoryService


# create_app() places the shared collaborators on app.state
def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_registry(request: Request) -> RegistryProtocol:
    return request.app.state.registry


def get_git_gateway(request: Request) -> GitGatewayProtocol:
    return request.app.state.git_gateway


# Service層は、先行するRegistry/GatewayのDI（Getter）に依存する
def get_repository_service(
    registry: RegistryProtocol = Depends(get_registry),
    git_gateway: GitGatewayProtocol = Depends(get_git_gateway),
) -> RepositoryService:
    return RepositoryService(registry=registry, git_gateway=git_gateway)


def get_comparison_service(
    registry: RegistryProtocol = Depends(get_registry),
    git_gateway: GitGatewayProtocol = Depends(get_git_gateway),
    settings: Settings = Depends(get_app_settings),
) -> ComparisonService:
    return ComparisonService(
        registry=registry,
        git_gateway=git_gateway,
        legacy_zero_change_status=settings.LEGACY_ZERO_CHANGE_STATUS,
    )


def get_directory_browser(
    git_gateway: GitGatewayProtocol = Depends(get_git_gateway),
    settings: Settings = Depends(get_app_settings),
) -> DirectoryBrowser:
    return DirectoryBrowser(git_gateway=git_gateway, root=settings.BROWSE_ROOT)
