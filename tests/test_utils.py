from types import MappingProxyType

import pytest

from evm_chainlist.utils import MISSING, equal_int, freeze, get_path, is_index_value, parse_int, thaw


class TestParseInt:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1", 1),
            ("137", 137),
            ("0", 0),
            ("0x89", 137),
            ("0XFF", 255),
            ("0b101", 5),
            ("0o17", 15),
            ("017", 15),
            ("-10", -10),
            ("+0x1", 1),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_int(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "1.5", "0x", "09", "0b2", "12abc", "Ethereum Mainnet(1)"])
    def test_invalid(self, value):
        assert parse_int(value) is None


class TestEqualInt:
    def test_equal(self):
        assert equal_int(1, 1)
        assert equal_int(1, "0x1")
        assert equal_int("01", "1")

    def test_not_equal(self):
        assert not equal_int(1, 2)
        assert not equal_int(1, True)
        assert not equal_int(1, None)
        assert not equal_int("abc", "abc")


class TestIsIndexValue:
    def test_index_values(self):
        assert is_index_value("ETH")
        assert is_index_value(60)
        assert is_index_value(1.5)

    def test_other_values(self):
        assert not is_index_value(True)
        assert not is_index_value(None)
        assert not is_index_value([])
        assert not is_index_value({})


class TestFreeze:
    def test_freeze(self):
        frozen = freeze({"rpc": ["a"], "nativeCurrency": {"symbol": "ETH"}})
        assert isinstance(frozen, MappingProxyType)
        assert frozen["rpc"] == ("a",)
        assert isinstance(frozen["nativeCurrency"], MappingProxyType)

    def test_thaw(self):
        value = {"rpc": ["a"], "features": [{"name": "EIP155"}]}
        assert thaw(freeze(value)) == value


class TestGetPath:
    VALUE = freeze({"a": {"b": [{"c": 1}]}, "x.y": 2, "n": None})

    def test_paths(self):
        assert get_path(self.VALUE, "a.b.0.c") == 1
        assert get_path(self.VALUE, "a.b[0].c") == 1
        assert get_path(self.VALUE, "x.y") == 2

    def test_null_is_present(self):
        assert get_path(self.VALUE, "n") is None

    def test_missing(self):
        assert get_path(self.VALUE, "a.c") is MISSING
        assert get_path(self.VALUE, "a.b.1") is MISSING
        assert get_path(self.VALUE, "", "default") == "default"
