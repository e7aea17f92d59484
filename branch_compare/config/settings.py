from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values can also come from a `.env` file in the working directory. Every
    collaborator built by `create_app` reads its configuration from here.
    """

    PROJECT_NAME: str = "Branch Compare API"

    # Directory listed by /api/browse when no dirPath is given (empty = cwd)
    BROWSE_ROOT: str = ""

    # For cloning private GitHub repositories
    GIT_CLONE_TOKEN: str = ""

    # Zero-insertion, zero-deletion entries are reported as "deleted" when True
    LEGACY_ZERO_CHANGE_STATUS: bool = True

    LOG_LEVEL: str = "INFO"

    # Development and debugging
    DEBUG: bool = False

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
