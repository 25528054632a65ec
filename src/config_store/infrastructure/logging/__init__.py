"""
구조화된 로깅 인프라

structlog 기반 로깅 시스템
"""

from .structured_logger import configure_structlog, get_logger

__all__ = [
    "configure_structlog",
    "get_logger",
]
