"""Runtime configuration for random-teleport."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="RANDOM_TELEPORT_", env_file=".env", extra="ignore")

    app_name: str = "random-teleport"
    log_level: str = "INFO"
    world_name: str = "world"
    default_min_radius: int = Field(default=0, ge=0)
    default_max_radius: int = Field(default=1_000, gt=0)
    default_max_checks: int = Field(default=100, ge=0)
    default_cooldown_seconds: int = Field(default=0, ge=0)
    generated_only: bool = False
    search_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Deadline after which a running search future is cancelled.",
    )
    terrain_backend: str = Field(
        default="memory",
        description="Region resolver used by the CLI: 'memory' or 'minescript'.",
    )
    minescript_command_prefix: str = "/"
    blocked_surface_blocks: list[str] = Field(
        default_factory=lambda: ["water", "lava", "cactus", "magma_block", "powder_snow", "fire"],
    )
    world_border_radius: int = Field(default=29_999_984, gt=0)


settings = Settings()
