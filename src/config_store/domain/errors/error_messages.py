"""에러 메시지 템플릿

각 에러 코드에 대한 사용자 친화적인 메시지를 제공합니다.
"""

from typing import Dict, Any
from .error_codes import ErrorCode


# 에러 코드별 메시지 템플릿
ERROR_MESSAGES: Dict[ErrorCode, str] = {
    # Load 관련
    ErrorCode.CONFIG_FILE_NOT_FOUND: (
        "설정 파일 '{file_name}'을 다음 경로에서 찾을 수 없습니다: {search_paths}"
    ),
    ErrorCode.CONFIG_READ_FAILED: (
        "설정 파일 '{file_path}'를 읽는 데 실패했습니다: {error}"
    ),
    ErrorCode.CONFIG_PARSE_FAILED: (
        "설정 파일 '{file_path}'의 형식이 올바르지 않습니다: {error}"
    ),
    # Access 관련
    ErrorCode.KEY_NOT_FOUND: (
        "키 '{key}'를 찾을 수 없습니다."
    ),
    ErrorCode.TYPE_MISMATCH: (
        "키 '{key}'의 값이 {expected} 타입이 아닙니다 (실제: {actual})."
    ),
    # Validation 관련
    ErrorCode.KEY_MISSING_OR_EMPTY: (
        "키 '{key}'가 없거나 비어 있습니다 (missing or empty)."
    ),
    ErrorCode.KEY_EMPTY_STRING: (
        "키 '{key}'의 값이 빈 문자열입니다 (empty string)."
    ),
}


def get_error_message(error_code: ErrorCode) -> str:
    """에러 코드에 해당하는 메시지 템플릿 반환

    Args:
        error_code: 에러 코드

    Returns:
        에러 메시지 템플릿

    Examples:
        >>> get_error_message(ErrorCode.KEY_NOT_FOUND)
        "키 '{key}'를 찾을 수 없습니다."
    """
    return ERROR_MESSAGES.get(
        error_code,
        "알 수 없는 에러 코드입니다: {error_code}"
    )


def format_error_message(error_code: ErrorCode, **context: Any) -> str:
    """에러 메시지를 컨텍스트 정보로 포맷팅

    Args:
        error_code: 에러 코드
        **context: 메시지 템플릿에 삽입할 컨텍스트 정보

    Returns:
        포맷팅된 에러 메시지

    Examples:
        >>> format_error_message(ErrorCode.KEY_NOT_FOUND, key="port")
        "키 'port'를 찾을 수 없습니다."
    """
    template = get_error_message(error_code)

    try:
        return template.format(error_code=error_code, **context)
    except KeyError as e:
        # 템플릿에 필요한 변수가 context에 없는 경우
        return (
            f"{template} [포맷 오류: 필수 변수 '{e.args[0]}'가 누락되었습니다. "
            f"제공된 변수: {list(context.keys())}]"
        )
