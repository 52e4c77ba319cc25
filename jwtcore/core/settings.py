"""Decode options and environment-driven token settings."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ACCESS_TOKEN_TTL_DEFAULT = 3600
MAX_TOKEN_LENGTH_DEFAULT = 65_536
MAX_JSON_DEPTH_DEFAULT = 32


class DecodeOptions(BaseModel):
    """Per-call limits and tolerances for decode."""

    model_config = ConfigDict(frozen=True)

    leeway: float = Field(default=0, ge=0)
    max_token_length: int = Field(default=MAX_TOKEN_LENGTH_DEFAULT, gt=0)
    max_json_depth: int = Field(default=MAX_JSON_DEPTH_DEFAULT, gt=0)


class TokenSettings(BaseSettings):
    """Token issuance and verification settings."""

    model_config = SettingsConfigDict(env_prefix="JWT_")

    leeway: float = Field(default=0, ge=0)
    access_token_ttl: int = Field(default=ACCESS_TOKEN_TTL_DEFAULT, gt=0)
    max_token_length: int = Field(default=MAX_TOKEN_LENGTH_DEFAULT, gt=0)
    max_json_depth: int = Field(default=MAX_JSON_DEPTH_DEFAULT, gt=0)

    def decode_options(self) -> DecodeOptions:
        """Build the DecodeOptions these settings describe."""
        return DecodeOptions(
            leeway=self.leeway,
            max_token_length=self.max_token_length,
            max_json_depth=self.max_json_depth,
        )
