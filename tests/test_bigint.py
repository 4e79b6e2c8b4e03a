"""测试大整数与进制转换"""

import pytest
from paythefly.bigint import (
    bytes_to_hex,
    check_uint256,
    decimal_to_hex,
    encode_uint256,
    hex_pad32,
    hex_to_bytes,
    hex_to_int,
    int_to_hex,
    parse_decimal,
)
from paythefly.exceptions import InvalidAmountError, InvalidHexError
from paythefly.utils import keccak256_hex, normalize_hex, strip_hex_prefix


class TestDecimalToHex:
    """测试十进制转十六进制"""

    def test_small_values(self):
        assert decimal_to_hex("1") == "1"
        assert decimal_to_hex("15") == "f"
        assert decimal_to_hex("255") == "ff"
        assert decimal_to_hex("256") == "100"

    def test_zero_and_empty(self):
        """零和空字符串返回 "0"，不补齐"""
        assert decimal_to_hex("0") == "0"
        assert decimal_to_hex("") == "0"
        assert decimal_to_hex("000") == "0"

    def test_chain_ids(self):
        assert decimal_to_hex("56") == "38"
        assert decimal_to_hex("728126428") == "2b6653dc"
        assert decimal_to_hex("3448148188") == "cd8690dc"

    def test_uint256_max(self):
        """2^256-1 不截断"""
        assert decimal_to_hex(str(2 ** 256 - 1)) == "f" * 64

    def test_beyond_64_bits(self):
        value = str(10 ** 30)
        assert int(decimal_to_hex(value), 16) == 10 ** 30

    @pytest.mark.parametrize("bad", ["-1", "1.5", "abc", "1e18", " 1"])
    def test_rejects_non_integers(self, bad):
        with pytest.raises(InvalidAmountError):
            decimal_to_hex(bad)

    def test_too_many_digits(self):
        """超过整数转换位数上限时抛出 InvalidAmountError"""
        with pytest.raises(InvalidAmountError) as exc_info:
            decimal_to_hex("1" * 5000)
        assert exc_info.value.details["value"].endswith("...")


class TestPadding:
    """测试 32 字节补齐"""

    def test_pad(self):
        padded = hex_pad32("38")
        assert len(padded) == 64
        assert padded == "0" * 62 + "38"

    def test_exact_length_unchanged(self):
        assert hex_pad32("a" * 64) == "a" * 64

    def test_too_long(self):
        with pytest.raises(InvalidHexError):
            hex_pad32("a" * 65)

    def test_encode_uint256(self):
        word = encode_uint256("1704067200")
        assert len(word) == 64
        assert int(word, 16) == 1704067200


class TestRoundTrip:
    """测试整数与十六进制往返"""

    @pytest.mark.parametrize("value", [0, 1, 255, 2 ** 64, 2 ** 256 - 1])
    def test_int_hex_round_trip(self, value):
        assert hex_to_int(int_to_hex(value)) == value

    def test_zero_representation(self):
        assert int_to_hex(0) == "0"
        assert int_to_hex(0, even=True) == "00"

    def test_even_padding(self):
        assert int_to_hex(0xABC, even=True) == "0abc"

    def test_negative_rejected(self):
        with pytest.raises(InvalidAmountError):
            int_to_hex(-1)

    def test_hex_to_int_rejects_garbage(self):
        with pytest.raises(InvalidHexError):
            hex_to_int("xyz")


class TestBytes:
    """测试字节转换"""

    def test_hex_to_bytes(self):
        assert hex_to_bytes("00ff") == b"\x00\xff"
        assert hex_to_bytes("") == b""
        assert bytes_to_hex(b"\x00\xff") == "00ff"

    def test_odd_length(self):
        with pytest.raises(InvalidHexError):
            hex_to_bytes("abc")

    def test_non_hex(self):
        with pytest.raises(InvalidHexError):
            hex_to_bytes("zz")

    def test_parse_decimal(self):
        assert parse_decimal("0012") == 12
        with pytest.raises(InvalidAmountError):
            parse_decimal("")


class TestHashUtils:
    """测试哈希工具函数"""

    def test_keccak_empty_vector(self):
        assert keccak256_hex(b"") == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"

    def test_keccak_is_not_sha3(self):
        assert keccak256_hex(b"hello") == "1c8aff950685c2ed4bc3174f3472287b56d9517b9c948127319a09a7a36deac8"

    def test_normalize_hex(self):
        assert normalize_hex("0xABC123") == "abc123"
        assert normalize_hex("0XAB") == "ab"
        assert normalize_hex(None) == ""
        assert strip_hex_prefix("abc") == "abc"


class TestUint256Range:
    """测试 uint256 取值范围检查"""

    def test_max_accepted(self):
        assert check_uint256(str(2 ** 256 - 1)) == str(2 ** 256 - 1)
        assert check_uint256("0") == "0"

    def test_leading_zeros_ignored(self):
        assert check_uint256("000123") == "000123"

    @pytest.mark.parametrize("value", [str(2 ** 256), "9" * 80, "1" * 5000])
    def test_overflow_rejected(self, value):
        with pytest.raises(InvalidAmountError):
            check_uint256(value)

    def test_malformed_rejected(self):
        with pytest.raises(InvalidAmountError):
            check_uint256("-1")
