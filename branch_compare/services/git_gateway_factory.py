"""Factory for creating git gateways with DEBUG mode support."""

import importlib.util
import logging
import sys
from pathlib import Path

from ..config.settings import Settings
from ..protocols.git_gateway_protocol import GitGatewayProtocol
from .git_gateway import GitGateway

logger = logging.getLogger(__name__)

DEV_PATH = Path(__file__).resolve().parent.parent.parent / "dev"


def _mock_gateway_available() -> bool:
    if DEV_PATH.exists() and str(DEV_PATH) not in sys.path:
        sys.path.append(str(DEV_PATH))
    return importlib.util.find_spec("mocks.git_gateway") is not None


def create_git_gateway(github_token: str = "", debug_mode: bool = False) -> GitGatewayProtocol:
    """
    Create a git gateway based on debug mode.

    Args:
        github_token: Token injected into GitHub clone URLs
        debug_mode: If True, returns MockGitGateway when the dev tree is present

    Returns:
        GitGatewayProtocol implementation
    """
    if debug_mode:
        if _mock_gateway_available():
            from mocks.git_gateway import MockGitGateway

            logger.info("DEBUG mode: using MockGitGateway")
            return MockGitGateway()
        logger.warning("MockGitGateway not found, falling back to real GitGateway")
    return GitGateway(github_token=github_token)


def create_git_gateway_from_settings(settings: Settings) -> GitGatewayProtocol:
    return create_git_gateway(
        github_token=settings.GIT_CLONE_TOKEN, debug_mode=settings.DEBUG
    )
