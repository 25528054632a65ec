"""
Tests for ConfigStore accessors

src/config_store/infrastructure/config/store.py 테스트
"""
import pytest
from structlog.testing import capture_logs

from config_store import (
    AccessError,
    ConfigStore,
    ErrorCode,
    KeyNotFoundError,
    TypeMismatchError,
    ValidationError,
)


@pytest.fixture
def store(make_store) -> ConfigStore:
    return make_store({
        "name": "service",
        "empty": "",
        "port": 9999,
        "port_str": "8888",
        "negative_str": "-42",
        "plus_str": "+7",
        "ratio": 3.7,
        "neg_ratio": -3.7,
        "word": "abc",
        "spaced": " 12 ",
        "underscored": "1_000",
        "float_str": "1.5",
        "huge_str": "9223372036854775808",
        "huge": 1e30,
        "enabled": True,
        "disabled": False,
        "bool_str": "true",
        "one": 1,
        "nothing": None,
        "list": [1, 2],
        "obj": {"a": 1},
    })


@pytest.mark.unit
class TestGetString:
    """문자열 접근자 테스트"""

    def test_get_string(self, store):
        assert store.get_string("name") == "service"
        assert store.get_string_strict("name") == "service"

    def test_get_string_empty_value(self, store):
        """빈 문자열도 문자열 값으로 반환"""
        assert store.get_string_strict("empty") == ""

    def test_get_string_missing_key(self, store):
        with pytest.raises(KeyNotFoundError) as exc_info:
            store.get_string_strict("missing")

        assert exc_info.value.key == "missing"
        assert exc_info.value.error_code is ErrorCode.KEY_NOT_FOUND

    @pytest.mark.parametrize("key", ["port", "enabled", "nothing", "list", "obj"])
    def test_get_string_type_mismatch(self, store, key):
        """숫자 등 다른 타입은 문자열로 변환하지 않음"""
        with pytest.raises(TypeMismatchError):
            store.get_string_strict(key)

    def test_get_string_fallback(self, store):
        assert store.get_string("missing") == ""
        assert store.get_string("port") == ""


@pytest.mark.unit
class TestGetInt:
    """정수 접근자 테스트"""

    def test_get_int_number(self, store):
        assert store.get_int("port") == 9999
        assert store.get_int_strict("port") == 9999

    def test_get_int_numeric_string(self, store):
        assert store.get_int_strict("port_str") == 8888

    def test_get_int_signed_strings(self, store):
        assert store.get_int_strict("negative_str") == -42
        assert store.get_int_strict("plus_str") == 7

    def test_get_int_truncates_toward_zero(self, store):
        """정수가 아닌 숫자는 반올림이 아니라 0 방향 버림"""
        assert store.get_int_strict("ratio") == 3
        assert store.get_int_strict("neg_ratio") == -3

    @pytest.mark.parametrize("key", ["word", "spaced", "underscored", "float_str", "empty"])
    def test_get_int_non_integer_string(self, store, key):
        """정수 형태가 아닌 문자열은 TypeMismatchError"""
        with pytest.raises(TypeMismatchError) as exc_info:
            store.get_int_strict(key)

        assert exc_info.value.error_code is ErrorCode.TYPE_MISMATCH

    @pytest.mark.parametrize("key", ["huge_str", "huge"])
    def test_get_int_out_of_int64_range(self, store, key):
        with pytest.raises(TypeMismatchError):
            store.get_int_strict(key)

    @pytest.mark.parametrize("key", ["enabled", "disabled", "nothing", "list", "obj"])
    def test_get_int_other_kinds(self, store, key):
        """bool은 int의 서브클래스지만 정수로 취급하지 않음"""
        with pytest.raises(TypeMismatchError):
            store.get_int_strict(key)

    def test_get_int_missing_key(self, store):
        with pytest.raises(KeyNotFoundError):
            store.get_int_strict("missing")

    def test_get_int_fallback(self, store):
        assert store.get_int("missing") == 0
        assert store.get_int("word") == 0
        assert store.get_int("enabled") == 0


@pytest.mark.unit
class TestGetBool:
    """불리언 접근자 테스트"""

    def test_get_bool(self, store):
        assert store.get_bool("enabled") is True
        assert store.get_bool_strict("enabled") is True
        assert store.get_bool_strict("disabled") is False

    @pytest.mark.parametrize("key", ["bool_str", "one", "nothing", "name"])
    def test_get_bool_no_coercion(self, store, key):
        """문자열 'true'나 숫자 1은 불리언으로 변환하지 않음"""
        with pytest.raises(TypeMismatchError):
            store.get_bool_strict(key)

    def test_get_bool_missing_key(self, store):
        with pytest.raises(KeyNotFoundError):
            store.get_bool_strict("missing")

    def test_get_bool_fallback(self, store):
        assert store.get_bool("missing") is False
        assert store.get_bool("bool_str") is False


@pytest.mark.unit
class TestAccessErrors:
    """접근자 에러 공통 동작 테스트"""

    @pytest.mark.parametrize("method", ["get_string_strict", "get_int_strict", "get_bool_strict"])
    def test_missing_key_is_uniform(self, store, method):
        """요청 타입과 관계없이 없는 키는 KeyNotFoundError"""
        with pytest.raises(KeyNotFoundError):
            getattr(store, method)("missing")

    def test_type_mismatch_context(self, store):
        with pytest.raises(TypeMismatchError) as exc_info:
            store.get_bool_strict("bool_str")

        error = exc_info.value
        assert isinstance(error, AccessError)
        assert error.context == {"key": "bool_str", "expected": "bool", "actual": "string"}

    @pytest.mark.parametrize("method", ["get_string", "get_int", "get_bool"])
    @pytest.mark.parametrize("key", ["missing", "nothing", "list", "obj", "word"])
    def test_convenience_accessors_never_raise(self, store, method, key):
        getattr(store, method)(key)


@pytest.mark.unit
class TestCheckKeys:
    """필수 키 검증 테스트"""

    def test_check_keys_success(self, make_store):
        store = make_store({"key1": "value1", "key2": 9999, "key3": True})

        assert store.check_keys(["key1", "key2", "key3"]) is None

    def test_check_keys_missing_key(self, make_store):
        store = make_store({"key1": "value1", "key2": 9999, "key3": True})

        with pytest.raises(ValidationError) as exc_info:
            store.check_keys(["key1", "key4"])

        assert exc_info.value.key == "key4"
        assert exc_info.value.reason == "missing or empty"
        assert exc_info.value.error_code is ErrorCode.KEY_MISSING_OR_EMPTY

    def test_check_keys_null_value(self, make_store):
        store = make_store({"key1": None})

        with pytest.raises(ValidationError) as exc_info:
            store.check_keys(["key1"])

        assert exc_info.value.reason == "missing or empty"

    def test_check_keys_empty_string(self, make_store):
        store = make_store({"key1": ""})

        with pytest.raises(ValidationError) as exc_info:
            store.check_keys(["key1"])

        assert exc_info.value.key == "key1"
        assert exc_info.value.reason == "empty string"
        assert exc_info.value.error_code is ErrorCode.KEY_EMPTY_STRING

    def test_check_keys_zero_like_values_pass(self, make_store):
        """0, false, 빈 배열/객체는 유효한 값"""
        store = make_store({"zero": 0, "no": False, "arr": [], "obj": {}, "space": " "})

        store.check_keys(["zero", "no", "arr", "obj", "space"])

    def test_check_keys_fails_fast(self, make_store):
        """첫 번째 실패한 키만 보고"""
        store = make_store({"key1": "", "key2": None})

        with pytest.raises(ValidationError) as exc_info:
            store.check_keys(["key2", "key1"])

        assert exc_info.value.key == "key2"

    def test_check_keys_empty_list(self, make_store):
        store = make_store({})

        store.check_keys([])


@pytest.mark.unit
class TestConfigStoreContainer:
    """읽기 전용 컨테이너 동작 테스트"""

    def test_direct_construction(self):
        store = ConfigStore({"a": 1, "b": "x"})

        assert len(store) == 2
        assert "a" in store
        assert sorted(store) == ["a", "b"]
        assert sorted(store.keys()) == ["a", "b"]
        assert store.source_path is None

    def test_store_is_not_affected_by_source_mutation(self):
        data = {"a": 1}
        store = ConfigStore(data)

        data["b"] = 2

        assert "b" not in store

    def test_no_mutation_api(self):
        store = ConfigStore({"a": 1})

        with pytest.raises(TypeError):
            store["a"] = 2  # type: ignore[index]

    def test_repr(self):
        assert "keys=1" in repr(ConfigStore({"a": 1}))

    def test_nested_values_not_affected_by_source_mutation(self):
        """중첩 list/dict도 생성 이후 원본 변경이 반영되지 않음"""
        data = {"a": [1], "b": {"c": 1}}
        store = ConfigStore(data)

        data["a"].append(2)
        data["b"]["d"] = 2

        assert store.get_value("a").raw == [1]
        assert store.get_value("b").raw == {"c": 1}

    def test_nested_values_not_affected_by_returned_value_mutation(self):
        """get_value가 돌려준 값을 수정해도 저장소는 그대로"""
        store = ConfigStore({"a": [1], "b": {"c": 1}})

        store.get_value("a").raw.append(2)
        store.get_value("b").raw["d"] = 2

        assert store.get_value("a").raw == [1]
        assert store.get_value("b").raw == {"c": 1}


@pytest.mark.unit
class TestFallbackLogging:
    """편의 접근자 로그 이벤트 테스트"""

    def test_missing_key_fallback_is_logged(self):
        store = ConfigStore({"a": 1})

        with capture_logs() as logs:
            assert store.get_int("missing") == 0

        fallback = [log for log in logs if log["event"] == "Falling back to zero value"]
        assert len(fallback) == 1
        assert fallback[0]["log_level"] == "debug"
        assert fallback[0]["key"] == "missing"
        assert fallback[0]["error_code"] == "KEY_NOT_FOUND"
        assert fallback[0]["component"] == "ConfigStore"

    def test_type_mismatch_fallback_is_logged(self):
        store = ConfigStore({"flag": "true"})

        with capture_logs() as logs:
            assert store.get_bool("flag") is False

        fallback = [log for log in logs if log["event"] == "Falling back to zero value"]
        assert [log["error_code"] for log in fallback] == ["TYPE_MISMATCH"]

    def test_successful_lookup_is_not_logged(self):
        store = ConfigStore({"a": 1})

        with capture_logs() as logs:
            assert store.get_int("a") == 1

        assert logs == []
