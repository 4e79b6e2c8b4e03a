"""测试异常类"""

import pytest
from paythefly.exceptions import (
    PayTheFlyError,
    ConfigurationError,
    UnsupportedChainError,
    InvalidPrivateKeyError,
    KeyNotAvailableError,
    DataError,
    InvalidHexError,
    InvalidHashError,
    InvalidAddressError,
    InvalidBase58Error,
    ChecksumMismatchError,
    InvalidAmountError,
    SignatureError,
    InvalidSignatureError,
)


def test_base_error_basic():
    """测试基础异常"""
    err = PayTheFlyError("test message")
    assert str(err) == "[PAYTHEFLY_ERROR] test message"
    assert err.code == "PAYTHEFLY_ERROR"
    assert err.details is None


def test_base_error_with_details():
    """测试带详情的异常"""
    err = PayTheFlyError("test", code="CUSTOM", details={"key": "value"})
    assert "[CUSTOM]" in str(err)
    assert "key" in str(err)


def test_unsupported_chain_error():
    """测试不支持的链异常"""
    err = UnsupportedChainError(999999)
    assert err.code == "UNSUPPORTED_CHAIN"
    assert err.chain_id == 999999
    assert "999999" in str(err)


def test_invalid_private_key_error():
    """测试私钥无效异常"""
    err = InvalidPrivateKeyError("too short")
    assert err.code == "INVALID_PRIVATE_KEY"
    assert "too short" in str(err)


def test_key_not_available_error():
    """测试私钥未配置异常"""
    err = KeyNotAvailableError("env:PAYTHEFLY_PRIVATE_KEY")
    assert err.code == "KEY_NOT_AVAILABLE"
    assert "PAYTHEFLY_PRIVATE_KEY" in str(err)


def test_invalid_hex_error_truncates_value():
    """测试十六进制异常截断长值"""
    err = InvalidHexError("ab" * 40, "too long")
    assert err.code == "INVALID_HEX"
    assert err.details["value"].endswith("...")


def test_invalid_hash_error():
    """测试哈希无效异常"""
    err = InvalidHashError("0x123", expected_length=32)
    assert err.code == "INVALID_HASH"
    assert "32 bytes" in str(err)


def test_invalid_address_error():
    """测试地址无效异常"""
    err = InvalidAddressError("invalid_addr", "20 bytes hex")
    assert err.code == "INVALID_ADDRESS"
    assert "invalid_addr" in str(err)


def test_invalid_base58_error():
    """测试 Base58 异常"""
    err = InvalidBase58Error("T0abc", 1)
    assert err.code == "INVALID_BASE58"
    assert err.details["position"] == 1


def test_checksum_mismatch_error():
    """测试校验和不匹配异常"""
    err = ChecksumMismatchError("a1b2c3d4", "00000000")
    assert err.code == "CHECKSUM_MISMATCH"
    assert err.details == {"expected": "a1b2c3d4", "actual": "00000000"}


def test_invalid_amount_error():
    """测试金额无效异常"""
    err = InvalidAmountError("-1", "negative values are not allowed")
    assert err.code == "INVALID_AMOUNT"
    assert "negative" in str(err)


def test_invalid_signature_error():
    """测试签名无效异常"""
    err = InvalidSignatureError("Signature length mismatch")
    assert err.code == "INVALID_SIGNATURE"


def test_exception_inheritance():
    """测试异常继承关系"""
    assert issubclass(ConfigurationError, PayTheFlyError)
    assert issubclass(UnsupportedChainError, ConfigurationError)
    assert issubclass(InvalidPrivateKeyError, ConfigurationError)
    assert issubclass(KeyNotAvailableError, ConfigurationError)
    assert issubclass(DataError, PayTheFlyError)
    for cls in (
        InvalidHexError,
        InvalidHashError,
        InvalidAddressError,
        InvalidBase58Error,
        ChecksumMismatchError,
        InvalidAmountError,
    ):
        assert issubclass(cls, DataError)
    assert issubclass(InvalidSignatureError, SignatureError)


def test_catch_by_category():
    """测试按类别捕获异常"""
    with pytest.raises(DataError):
        raise ChecksumMismatchError("aa", "bb")
    with pytest.raises(PayTheFlyError):
        raise UnsupportedChainError(1)
