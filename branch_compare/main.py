import logging
from typing import Optional

from fastapi import FastAPI

from branch_compare.apps.api import router
from branch_compare.apps.api.errors import register_exception_handlers
from branch_compare.config.settings import Settings, get_settings
from branch_compare.protocols.git_gateway_protocol import GitGatewayProtocol
from branch_compare.protocols.registry_protocol import RegistryProtocol
from branch_compare.services import RepositoryRegistry, create_git_gateway_from_settings


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[RegistryProtocol] = None,
    git_gateway: Optional[GitGatewayProtocol] = None,
) -> FastAPI:
    """Build the application with its own registry and git gateway.

    Passing `registry` or `git_gateway` replaces the defaults, which is how
    tests get an isolated instance per case.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        description="Compare two branches of a local git repository file by file",
    )

    # --- 依存性定義 ---
    app.state.settings = settings
    app.state.registry = registry if registry is not None else RepositoryRegistry()
    app.state.git_gateway = (
        git_gateway
        if git_gateway is not None
        else create_git_gateway_from_settings(settings)
    )

    register_exception_handlers(app)
    app.include_router(router.router, prefix="/api")

    @app.get("/health")
    async def health_check():
        """
        Simple health check endpoint to confirm the API is running.
        """
        return {"status": "ok"}

    return app


app = create_app()
