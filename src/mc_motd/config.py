"""Runtime configuration for mc-motd."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="MC_MOTD_", env_file=".env", extra="ignore")

    app_name: str = "mc-motd"
    log_level: str = "WARNING"
    default_port: int = Field(default=25565, ge=1, le=65535)
    timeout: float = Field(
        default=5.0,
        ge=0,
        description="Connect and session deadline in seconds; 0 waits for the OS TCP timeout.",
    )
    protocol_version: int = Field(default=754, ge=0, description="Protocol number advertised in the handshake.")
    hex_mode: Literal["truecolor", "nearest"] = "truecolor"
    use_srv: bool = True


settings = Settings()
