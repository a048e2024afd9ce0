"""
Client constants and configuration loader (connection settings).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Product verification constants
# ---------------------------------------------------------------------------

SECURITY_PRIVILEGES_VALIDATION_WARNING = (
    "The client is unable to verify that the server is Elasticsearch "
    "due to security privileges on the server side."
)
NOT_ELASTICSEARCH_MESSAGE = (
    "The client noticed that the server is not Elasticsearch "
    "and we do not support this unknown product."
)
YOU_KNOW_FOR_SEARCH = "You know, for Search"
PRODUCT_HEADER = "x-elastic-product"
PRODUCT_NAME = "Elasticsearch"
TRUSTED_BUILD_FLAVOR = "default"

BOOTSTRAP_METHOD = "GET"
BOOTSTRAP_PATH = "/"

CLIENT_META_HEADER = "x-elastic-client-meta"

DEFAULT_URL = "http://localhost:9200"


# ---------------------------------------------------------------------------
# Connection settings
# ---------------------------------------------------------------------------

class ClientConfig(BaseModel):
    url: str = DEFAULT_URL
    api_key: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    timeout: float = Field(default=10.0, gt=0)
    verify_certs: bool = True
    headers: Dict[str, str] = Field(default_factory=dict)


_ENV_OVERRIDES = {
    "ELASTICSEARCH_URL": "url",
    "ELASTICSEARCH_API_KEY": "api_key",
    "ELASTICSEARCH_USERNAME": "username",
    "ELASTICSEARCH_PASSWORD": "password",
    "ELASTICSEARCH_TIMEOUT": "timeout",
}


def load_client_config(config_path: Optional[Path] = None, **overrides: Any) -> ClientConfig:
    """
    Build a ClientConfig from (in increasing precedence) defaults, an optional
    YAML file, ELASTICSEARCH_* environment variables and keyword overrides.
    """
    load_dotenv()

    data: Dict[str, Any] = {}
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Client config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    for env_name, field_name in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[field_name] = value

    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        cfg = ClientConfig(**data)
    except ValidationError as e:
        logger.error("Client config validation failed: %s", e)
        raise
    logger.debug("Loaded client config for %s", cfg.url)
    return cfg
