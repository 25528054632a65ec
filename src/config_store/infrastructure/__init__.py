"""
Infrastructure Layer

External dependency implementations

Structure:
- config: JSON 설정 파일 검색, 로드, 타입 접근자
- logging: structlog 기반 구조화 로깅
"""

from .config import (
    ConfigStore,
    JsonConfigLoader,
    load_config,
)
from .logging import (
    configure_structlog,
    get_logger,
)

__all__ = [
    # Config
    "ConfigStore",
    "JsonConfigLoader",
    "load_config",
    # Logging
    "configure_structlog",
    "get_logger",
]
