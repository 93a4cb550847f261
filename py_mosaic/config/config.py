from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from ``MOSAIC_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MOSAIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Logging format (console or json)")

    # Output Configuration
    output_dir: str = Field(default=".", description="Directory for generated images")
    record_gif: bool = Field(default=False, description="Capture an animated GIF while growing")
    trace_walk: bool = Field(default=False, description="Log every arc-walk step at debug level")

    # Default Generation Parameters
    default_size: int = Field(default=1000, description="Default grid size")
    default_num_samples: int = Field(default=100, description="Default samples per growth attempt")
    default_num_seeds: int = Field(default=20, description="Default number of seeding attempts")
    default_circle_frac: float = Field(default=0.01, description="Default fraction of the circle walked")
    default_timeout: int = Field(default=10000, description="Default consecutive-miss timeout")
    default_seed: int = Field(default=0, description="Default random seed")


settings = Settings()
