"""Configuration management."""


import os
from pathlib import Path
import tomli
from pydantic import BaseModel


class TokenConfig(BaseModel):
    # defaults when plainjwt.toml is missing
    algorithm: str = "HS256"
    type: str = "JWT"
    secret: str = ""
    expire_seconds: int = 300


class SecretPolicyConfig(BaseModel):
    # defaults when plainjwt.toml is missing
    min_length: int = 12
    special_characters: str = "*&!@%^#$"
    require_mixed_case: bool = False


class LoggingConfig(BaseModel):
    # defaults when plainjwt.toml is missing
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Config(BaseModel):
    tokens: TokenConfig = TokenConfig()
    secret_policy: SecretPolicyConfig = SecretPolicyConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(config_path: str | None = None) -> Config:
    """Load configuration from TOML file."""
    if config_path is None:
        config_path = os.environ.get("PLAINJWT_CONFIG", "plainjwt.toml")
    config_file = Path(config_path)

    if not config_file.exists():
        return Config()
    with open(config_file, "rb") as f:
        data = tomli.load(f)
    return Config(**data)


# Global config instance
config = load_config()
