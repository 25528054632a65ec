"""환경변수 확장 유틸리티

검색 경로 문자열에 포함된 환경변수 참조를 현재 프로세스 환경으로 확장합니다.
"""

import os
import re
from typing import Mapping, Optional, Union

# ${NAME} | 특수 변수 한 글자($1, $$, $? ...) | $NAME | 닫히지 않은 "${"
_ENV_REF = re.compile(
    r"\$(?:"
    r"\{(?P<braced>[^}]*)\}"
    r"|(?P<special>[*#$@!?\-0-9])"
    r"|(?P<bare>[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<unclosed>\{)"
    r")"
)


def expand_env_vars(
    path: Union[str, "os.PathLike[str]"],
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """
    경로 문자열의 환경변수 참조를 확장

    지원 형식:
    - $VAR: 영문자 또는 '_'로 시작하고 영숫자/'_'가 이어지는 이름
    - ${VAR}: 중괄호 안의 문자열 전체가 이름
    - $0-$9, $*, $#, $$, $@, $!, $?, $-: 한 글자 특수 변수 ($1abc -> $1 + "abc")

    정의되지 않은 변수와 빈 이름(${})은 빈 문자열로 확장됩니다.
    닫히지 않은 "${"는 제거되고, '$' 뒤에 이름이 오지 않으면 그대로 둡니다.

    Args:
        path: 확장할 경로 문자열
        environ: 사용할 환경 (None이면 os.environ)

    Returns:
        확장된 경로 문자열

    Examples:
        >>> os.environ["APP_HOME"] = "/opt/app"
        >>> expand_env_vars("$APP_HOME/etc")
        '/opt/app/etc'

        >>> expand_env_vars("${NOT_SET}/etc")
        '/etc'
    """
    env = os.environ if environ is None else environ
    text = os.fspath(path)

    def _replace(match: "re.Match[str]") -> str:
        if match.group("unclosed") is not None:
            return ""
        name = match.group("braced")
        if name is None:
            name = match.group("special") or match.group("bare")
        if not name:
            return ""
        return env.get(name, "")

    return _ENV_REF.sub(_replace, text)
