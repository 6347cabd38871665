"""Define configuration for the project."""

import tomllib
from pathlib import Path
from typing import Literal

from pydantic import Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["settings"]


_app_config_path = Path(__file__).parent / "resources" / "app.toml"

with Path.open(_app_config_path, "rb") as f:
    _config = tomllib.load(f)
    _app_config = _config.get("app", {})
    _server_config = _app_config.get("server", {})
    _db_config = _app_config.get("db", {})
    _pagination_config = _app_config.get("pagination", {})
    _auction_config = _app_config.get("auction", {})
    _log_config = _app_config.get("logging", {})


class Settings(BaseSettings):
    """Application configuration settings."""

    # Environment configuration
    app_env: Literal["development", "testing", "production"] = Field(
        default="development",
        description="Current application environment determining behavior.",
        validation_alias="ENV",
    )

    # Server configuration
    host_binding: str = Field(
        default=_server_config.get("host_binding", "127.0.0.1"),
        description="Host address the server binds to.",
    )

    port: int = Field(
        default=_server_config.get("port", 8000),
        description="Network port the server listens on.",
    )

    version: str = Field(
        default=_server_config.get("version", "0.1.0"),
        description="Version of the application.",
    )

    root_path: str = Field(
        default=_server_config.get("root_path", ""),
        description="Path prefix when served behind a reverse proxy.",
    )

    allow_origin: list[str] = Field(
        default=_server_config.get("allow_origin", ["http://localhost:3000"]),
        description="CORS allowed origins for cross-origin requests.",
    )

    # Database configuration
    db_url: str = Field(
        default="sqlite+aiosqlite:///app.db",
        description="Database connection URL.",
        validation_alias="DATABASE_URL",
    )

    db_logging: bool = Field(
        default=_db_config.get("logging", False),
        description="Whether to enable SQL query logging.",
    )

    db_future: bool = Field(
        default=_db_config.get("future", True),
        description="Whether to use future SQLAlchemy features.",
    )

    db_timeout: int = Field(
        default=_db_config.get("timeout", 30),
        description="Timeout for database operations in seconds.",
    )

    db_pool_size: int = Field(
        default=_db_config.get("pool_size", 5),
        description="Size of the database connection pool.",
    )

    db_max_overflow: int = Field(
        default=_db_config.get("max_overflow", 10),
        description="Maximum number of connections to create beyond the pool size.",
    )

    db_pool_timeout: int = Field(
        default=_db_config.get("pool_timeout", 30),
        description="Timeout for acquiring a connection from the pool.",
    )

    db_pool_recycle: int = Field(
        default=_db_config.get("pool_recycle", 300),
        description="Time in seconds to recycle a connection.",
    )

    db_pool_pre_ping: bool = Field(
        default=_db_config.get("pool_pre_ping", True),
        description="Whether to check if a connection is alive before using it.",
    )

    clear_db_on_restart: bool = Field(
        default=True,
        validation_alias="CLEAR_DB_ON_RESTART",
        description="Whether to clear the database on application restart.",
    )

    seed_db_on_start: bool = Field(
        default=True,
        validation_alias="SEED_DB_ON_START",
        description="Whether to seed the database with sample auctions on startup.",
    )

    # Pagination configuration
    allowed_page_sizes: list[int] = Field(
        default=_pagination_config.get("allowed_page_sizes", [6, 12, 24, 48]),
        description="Page sizes a client may request for product lists.",
    )

    default_page_size: int = Field(
        default=_pagination_config.get("default_page_size", 12),
        description="Page size used when the client does not send one.",
    )

    max_visible_pages: int = Field(
        default=_pagination_config.get("max_visible_pages", 5),
        ge=3,
        description="Number of page buttons in the navigation window.",
    )

    list_window_policy: Literal["sliding", "anchored"] = Field(
        default=_pagination_config.get("list_window_policy", "sliding"),
        description="Page window policy for the product list view.",
    )

    search_window_policy: Literal["sliding", "anchored"] = Field(
        default=_pagination_config.get("search_window_policy", "anchored"),
        description="Page window policy for the search results view.",
    )

    min_search_length: int = Field(
        default=_pagination_config.get("min_search_length", 2),
        description="Minimum number of characters in a search query.",
    )

    top_products_limit: int = Field(
        default=_pagination_config.get("top_products_limit", 5),
        description="Number of products in each homepage top list.",
    )

    top_bidders_limit: int = Field(
        default=_pagination_config.get("top_bidders_limit", 5),
        description="Number of leading bids shown on the product detail.",
    )

    related_products_limit: int = Field(
        default=_pagination_config.get("related_products_limit", 5),
        description="Number of related auctions shown on the product detail.",
    )

    # Auction configuration
    min_start_price: int = Field(
        default=_auction_config.get("min_start_price", 10000),
        description="Lowest allowed start price of an auction.",
    )

    min_price_step: int = Field(
        default=_auction_config.get("min_price_step", 1000),
        description="Lowest allowed bid increment.",
    )

    min_duration_hours: int = Field(
        default=_auction_config.get("min_duration_hours", 1),
        description="Shortest allowed auction duration in hours.",
    )

    max_duration_days: int = Field(
        default=_auction_config.get("max_duration_days", 30),
        description="Longest allowed auction duration in days.",
    )

    max_images: int = Field(
        default=_auction_config.get("max_images", 10),
        description="Maximum number of image URLs per product.",
    )

    auto_extend_enabled: bool = Field(
        default=_auction_config.get("auto_extend_enabled", True),
        validation_alias="AUTO_EXTEND_ENABLED",
        description="Global switch for extending auctions on late bids.",
    )

    auto_extend_threshold_minutes: int = Field(
        default=_auction_config.get("auto_extend_threshold_minutes", 5),
        description="A bid within this many minutes of the end extends the auction.",
    )

    auto_extend_minutes: int = Field(
        default=_auction_config.get("auto_extend_minutes", 10),
        description="Minutes added to the auction end on auto-extension.",
    )

    # Log configuration
    log_dir: str = Field(
        default=_log_config.get("log_dir", "log"),
        description="Directory for storing log files.",
    )

    log_file: str = Field(
        default=_log_config.get("log_file", "app.log"),
        description="Name of the log file.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (e.g., DEBUG, INFO, WARNING, ERROR).",
    )

    rotation: str = Field(
        default=_log_config.get("rotation", "10 MB"),
        description="Log rotation strategy (time or size-based).",
    )

    @computed_field
    @property
    def log_path(self) -> Path:
        """Path where application logs are stored."""
        return Path(self.log_dir) / self.log_file

    @computed_field
    @property
    def reload(self) -> bool:
        """Whether to enable auto-reload on code changes."""
        return bool(_server_config.get("reload")) and self.app_env == "development"

    @model_validator(mode="after")
    def validate_log_level(self) -> "Settings":
        """Adjust log level based on environment."""
        if self.app_env == "production" and self.log_level == "DEBUG":
            self.log_level = "INFO"
        return self

    @model_validator(mode="after")
    def validate_page_sizes(self) -> "Settings":
        """Make sure the default page size is one of the allowed sizes."""
        if self.default_page_size not in self.allowed_page_sizes:
            raise ValueError(
                f"default_page_size {self.default_page_size} must be one of "
                f"{self.allowed_page_sizes}"
            )
        return self

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


# Create a single instance of Settings to use throughout the application
settings = Settings()
