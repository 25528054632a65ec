"""에러 핸들러

config-store의 커스텀 예외 클래스 및 에러 처리 유틸리티를 제공합니다.
"""

from typing import Optional, Dict, Any
from .error_codes import ErrorCode
from .error_messages import format_error_message


class ConfigStoreError(Exception):
    """config-store의 기본 예외 클래스

    모든 config-store 커스텀 예외는 이 클래스를 상속합니다.

    Attributes:
        error_code: 에러 코드
        message: 에러 메시지
        context: 추가 컨텍스트 정보
        original_error: 원본 예외 (있는 경우)

    Examples:
        >>> raise ConfigStoreError(ErrorCode.KEY_NOT_FOUND, key="port")
    """

    def __init__(
        self,
        error_code: ErrorCode,
        original_error: Optional[Exception] = None,
        **context: Any
    ):
        """에러 초기화

        Args:
            error_code: 에러 코드
            original_error: 원본 예외 (선택)
            **context: 에러 메시지에 포함할 컨텍스트 정보
        """
        self.error_code = error_code
        self.context = context
        self.original_error = original_error

        # 원본 에러가 있으면 context에 추가
        if original_error is not None:
            self.context["error"] = str(original_error)

        self.message = format_error_message(error_code, **self.context)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """에러를 딕셔너리로 변환 (로깅/진단용)

        Returns:
            에러 정보를 담은 딕셔너리

        Examples:
            >>> error.to_dict()
            {
                "error_code": "KEY_NOT_FOUND",
                "error_number": 3001,
                "category": "Access",
                "message": "키 'port'를 찾을 수 없습니다.",
                "context": {"key": "port"}
            }
        """
        return {
            "error_code": self.error_code.name,
            "error_number": self.error_code.value,
            "category": self.error_code.category,
            "message": self.message,
            "context": self.context,
        }

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"error_code={self.error_code.name}, "
            f"message='{self.message}', "
            f"context={self.context})"
        )


# ==================== Load 에러 ====================
class ConfigLoadError(ConfigStoreError):
    """설정 파일 로드 관련 에러"""
    pass


class NotFoundError(ConfigLoadError):
    """검색 경로 어디에도 설정 파일이 없음"""

    @property
    def file_name(self) -> Optional[str]:
        return self.context.get("file_name")

    @property
    def search_paths(self) -> list:
        return list(self.context.get("search_paths", []))


class ReadError(ConfigLoadError):
    """설정 파일을 읽을 수 없음"""
    pass


class ParseError(ConfigLoadError):
    """설정 파일 파싱 실패"""
    pass


# ==================== Access 에러 ====================
class AccessError(ConfigStoreError):
    """키 조회 관련 에러"""

    @property
    def key(self) -> Optional[str]:
        return self.context.get("key")


class KeyNotFoundError(AccessError):
    """조회한 키가 없음"""
    pass


class TypeMismatchError(AccessError):
    """값의 타입이 요청한 타입과 다름"""
    pass


# ==================== Validation 에러 ====================
class ValidationError(ConfigStoreError):
    """필수 키 검증 실패

    Attributes:
        key: 검증에 실패한 키
        reason: "missing or empty" 또는 "empty string"
    """

    REASONS: Dict[ErrorCode, str] = {
        ErrorCode.KEY_MISSING_OR_EMPTY: "missing or empty",
        ErrorCode.KEY_EMPTY_STRING: "empty string",
    }

    @property
    def key(self) -> Optional[str]:
        return self.context.get("key")

    @property
    def reason(self) -> str:
        return self.REASONS.get(self.error_code, "invalid")


# 에러 코드별 예외 클래스 매핑
ERROR_CLASS_MAPPING: Dict[ErrorCode, type] = {
    # Load 에러
    ErrorCode.CONFIG_FILE_NOT_FOUND: NotFoundError,
    ErrorCode.CONFIG_READ_FAILED: ReadError,
    ErrorCode.CONFIG_PARSE_FAILED: ParseError,
    # Access 에러
    ErrorCode.KEY_NOT_FOUND: KeyNotFoundError,
    ErrorCode.TYPE_MISMATCH: TypeMismatchError,
    # Validation 에러
    ErrorCode.KEY_MISSING_OR_EMPTY: ValidationError,
    ErrorCode.KEY_EMPTY_STRING: ValidationError,
}

# 카테고리별 로그 레벨
_LOG_LEVELS: Dict[str, str] = {
    "Load": "error",
    "Validation": "warning",
    "Access": "debug",
}


def handle_error(
    error_code: ErrorCode,
    original_error: Optional[Exception] = None,
    log: bool = True,
    **context: Any
) -> ConfigStoreError:
    """에러를 처리하고 적절한 예외를 반환

    Args:
        error_code: 에러 코드
        original_error: 원본 예외 (선택)
        log: 로깅 여부 (기본: True)
        **context: 에러 컨텍스트 정보

    Returns:
        적절한 ConfigStoreError 서브클래스 인스턴스

    Examples:
        >>> try:
        ...     text = path.read_text(encoding="utf-8")
        ... except OSError as e:
        ...     raise handle_error(
        ...         ErrorCode.CONFIG_READ_FAILED,
        ...         original_error=e,
        ...         file_path=str(path)
        ...     ) from e
    """
    error_class = ERROR_CLASS_MAPPING.get(error_code, ConfigStoreError)

    exception = error_class(
        error_code,
        original_error=original_error,
        **context
    )

    if log:
        # 순환 import 방지를 위해 여기서 import
        from config_store.infrastructure.logging import get_logger
        logger = get_logger(__name__)

        level = _LOG_LEVELS.get(error_code.category, "error")
        log_method = getattr(logger, level)
        if level == "error":
            log_method(
                exception.message,
                error_code=error_code.name,
                **exception.context,
                exc_info=original_error
            )
        else:
            log_method(
                exception.message,
                error_code=error_code.name,
                **exception.context
            )

    return exception
