"""MLang configuration settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ASSETS_BASE_URL = (
    "https://raw.githubusercontent.com/InventivetalentDev/minecraft-assets"
)


class MLangSettings(BaseSettings):
    """Language cache and asset download configuration.

    Environment Variables:
        MLANG_DATA_DIR: Root data directory of the host application.
        MLANG_LANGUAGES_SUBDIR: Sub-directory of the data dir holding language files.
        MLANG_DEFAULT_LANGUAGE: Language used for fallback and implicit lookups.
        MLANG_DEFAULT_VERSION: Game version used when downloading language files.
        MLANG_ASSETS_BASE_URL: Base URL of the remote asset file server.
        MLANG_CONNECT_TIMEOUT_SECONDS: HTTP connect timeout.
        MLANG_READ_TIMEOUT_SECONDS: HTTP read timeout (per chunk).
        MLANG_LOAD_TIMEOUT_SECONDS: Upper bound for an asynchronous language load.
        MLANG_DOWNLOAD_CHUNK_SIZE: Bytes read per chunk while streaming downloads.
        MLANG_EXECUTOR_MAX_WORKERS: Worker threads for background loads.
    """

    data_dir: str = Field(default="./data", alias="MLANG_DATA_DIR")
    languages_subdir: str = Field(default="languages", alias="MLANG_LANGUAGES_SUBDIR")
    default_language: str = Field(default="en_us", alias="MLANG_DEFAULT_LANGUAGE")
    default_version: str = Field(default="1.20.4", alias="MLANG_DEFAULT_VERSION")
    assets_base_url: str = Field(
        default=DEFAULT_ASSETS_BASE_URL, alias="MLANG_ASSETS_BASE_URL"
    )
    connect_timeout_seconds: float = Field(
        default=10.0, alias="MLANG_CONNECT_TIMEOUT_SECONDS"
    )
    read_timeout_seconds: float = Field(
        default=30.0, alias="MLANG_READ_TIMEOUT_SECONDS"
    )
    load_timeout_seconds: float = Field(
        default=60.0, alias="MLANG_LOAD_TIMEOUT_SECONDS"
    )
    download_chunk_size: int = Field(default=8192, alias="MLANG_DOWNLOAD_CHUNK_SIZE")
    executor_max_workers: int = Field(default=4, alias="MLANG_EXECUTOR_MAX_WORKERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("default_language")
    @classmethod
    def normalize_default_language(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("MLANG_DEFAULT_LANGUAGE must not be empty")
        return value

    @field_validator("assets_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator(
        "connect_timeout_seconds",
        "read_timeout_seconds",
        "load_timeout_seconds",
        "download_chunk_size",
        "executor_max_workers",
    )
    @classmethod
    def must_be_positive(cls, value):
        if value <= 0:
            raise ValueError("must be greater than zero")
        return value


class Settings(BaseSettings):
    """MLang configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from mlang.core.config import settings

        languages_dir = settings.mlang.data_dir
        if settings.is_production:
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    mlang: MLangSettings

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        if "mlang" not in kwargs:
            kwargs["mlang"] = MLangSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance.

    The @lru_cache decorator ensures only one instance is built per process.

    Returns:
        The cached Settings instance.
    """
    return Settings()


settings = get_settings()
