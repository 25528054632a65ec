"""
구조화된 로깅 설정 모듈

structlog 라이브러리를 사용하여 JSON 형식 로그를 출력합니다.
라이브러리는 import 시점에 로깅을 설정하지 않으며,
애플리케이션이 configure_structlog()를 명시적으로 호출해야 합니다.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional, Union

import structlog
from structlog.processors import JSONRenderer
from structlog.stdlib import add_log_level

# JSON 직렬화 가능한 타입 정의
JSONSerializable = Union[str, int, float, bool, None, dict, list]

LOG_FILE_PREFIX = "config-store"


def configure_structlog(
    log_dir: Optional[str] = None,
    log_level: str = "INFO",
    enable_json: bool = True,
) -> None:
    """
    structlog를 설정합니다.

    Args:
        log_dir: 로그 파일 디렉토리 (None이면 콘솔에만 출력)
        log_level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_json: JSON 형식 출력 활성화 여부 (False시 콘솔 형식)

    Example:
        >>> configure_structlog(log_dir="logs", log_level="INFO", enable_json=True)
        >>> logger = get_logger(__name__, component="ConfigLoader")
        >>> logger.info("Config loaded", key_count=3)
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            [
                structlog.processors.CallsiteParameter.PATHNAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if enable_json:
        processors.append(JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # 모듈 레벨 로거는 호출마다 현재 설정을 사용
        cache_logger_on_first_use=False,
    )

    # 콘솔 출력은 항상, 파일 출력은 log_dir이 주어진 경우에만
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    log_path: Optional[Path] = None
    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                str(log_path / f"{LOG_FILE_PREFIX}.log"),
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8"
            )
        )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
        handlers=handlers,
        force=True  # 기존 설정 덮어쓰기
    )

    if log_path is None:
        return

    # 에러 로그 전용 핸들러
    error_handler = logging.handlers.RotatingFileHandler(
        str(log_path / f"{LOG_FILE_PREFIX}-error.log"),
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8"
    )
    error_handler.setLevel(logging.ERROR)
    logging.getLogger().addHandler(error_handler)

    if log_level.upper() == "DEBUG":
        debug_handler = logging.handlers.RotatingFileHandler(
            str(log_path / f"{LOG_FILE_PREFIX}-debug.log"),
            maxBytes=20 * 1024 * 1024,  # 20MB
            backupCount=3,
            encoding="utf-8"
        )
        debug_handler.setLevel(logging.DEBUG)
        logging.getLogger().addHandler(debug_handler)


def get_logger(name: str, **context: JSONSerializable) -> structlog.stdlib.BoundLogger:
    """
    구조화된 로거를 가져옵니다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)
        **context: 기본 컨텍스트 (JSON 직렬화 가능한 타입만 허용)
                  예: component, file_name 등

    Returns:
        메타데이터가 바인딩된 로거

    Example:
        >>> logger = get_logger(__name__, component="ConfigStore")
        >>> logger.debug("Falling back to zero value", key="port")
    """
    # 로그 호출 시점의 설정을 따르는 지연 프록시
    return structlog.get_logger(name, **context)
