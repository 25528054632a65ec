"""
config-store

검색 경로 목록에서 JSON 설정 파일을 찾아 로드하고,
타입 접근자(string, int, bool)와 필수 키 검증을 제공합니다.

Examples:
    >>> from config_store import load_config
    >>> store = load_config("config.json", ["./config", "$HOME/.myapp"])
    >>> store.check_keys(["api_url", "port"])
    >>> store.get_int("port")
    8080
"""

from .domain.errors import (
    ErrorCode,
    ConfigStoreError,
    ConfigLoadError,
    NotFoundError,
    ReadError,
    ParseError,
    AccessError,
    KeyNotFoundError,
    TypeMismatchError,
    ValidationError,
)
from .domain.models import ValueKind, ConfigValue
from .infrastructure.config import ConfigStore, JsonConfigLoader, load_config
from .infrastructure.logging import configure_structlog, get_logger

__version__ = "1.0.0"

__all__ = [
    "ConfigStore",
    "JsonConfigLoader",
    "load_config",
    "ValueKind",
    "ConfigValue",
    "ErrorCode",
    "ConfigStoreError",
    "ConfigLoadError",
    "NotFoundError",
    "ReadError",
    "ParseError",
    "AccessError",
    "KeyNotFoundError",
    "TypeMismatchError",
    "ValidationError",
    "configure_structlog",
    "get_logger",
]
