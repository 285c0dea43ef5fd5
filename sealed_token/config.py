"""Token configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class TokenSettings(BaseSettings):
    """Sealed-token configuration."""

    # Key material
    REGISTRATION_TOKEN_SECRET: str = ""

    # Pending registrations
    REGISTRATION_TOKEN_TTL_SECONDS: int = Field(900, gt=0)

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}
