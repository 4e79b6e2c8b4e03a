"""测试链配置、签名器配置与密钥提供者"""

import pytest
from paythefly.chains import (
    CHAIN_CONFIG,
    ChainKind,
    get_chain_config,
    get_decimals,
    is_tron_chain,
)
from paythefly.config import SignerConfig, load_env
from paythefly.exceptions import (
    ConfigurationError,
    InvalidPrivateKeyError,
    KeyNotAvailableError,
    UnsupportedChainError,
)
from paythefly.key_provider import EnvKeyProvider, KeyProvider, StaticKeyProvider

TEST_KEY = "ac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"


class TestChainConfig:
    """测试链配置表"""

    def test_entries(self):
        assert set(CHAIN_CONFIG) == {728126428, 3448148188, 56, 97}
        assert get_chain_config(728126428).kind is ChainKind.TRON
        assert get_chain_config(3448148188).decimals == 6
        assert get_chain_config(56).kind is ChainKind.EVM
        assert get_chain_config(97).decimals == 18

    def test_unknown_chain(self):
        with pytest.raises(UnsupportedChainError):
            get_chain_config(999999)

    def test_non_numeric_chain(self):
        with pytest.raises(UnsupportedChainError):
            get_chain_config("bsc")

    def test_string_chain_id(self):
        assert get_chain_config("56").chain_id == 56

    def test_immutable(self):
        with pytest.raises(TypeError):
            CHAIN_CONFIG[1] = get_chain_config(56)
        with pytest.raises(AttributeError):
            get_chain_config(56).decimals = 6

    def test_is_tron_chain(self):
        assert is_tron_chain(728126428)
        assert is_tron_chain(3448148188)
        assert not is_tron_chain(56)
        assert not is_tron_chain(999999)

    def test_string_chain_ids(self):
        """字符串形式的链 ID 在所有查询中一致"""
        assert get_chain_config("728126428") is get_chain_config(728126428)
        assert is_tron_chain("728126428")
        assert get_decimals("728126428") == 6
        assert get_decimals("56") == 18
        assert not is_tron_chain("not-a-chain")
        assert get_decimals(None) == 18

    def test_get_decimals_defaults_to_18(self):
        """未知链返回 18，而签名时未知链会报错"""
        assert get_decimals(728126428) == 6
        assert get_decimals(56) == 18
        assert get_decimals(999999) == 18


class TestSignerConfig:
    """测试签名器配置"""

    def test_defaults(self):
        config = SignerConfig()
        assert config.deadline_seconds == 1800
        assert config.serial_prefix == "PTF-"
        assert config.pay_url == "https://pro.paythefly.com/pay"
        assert config.private_key_env == "PAYTHEFLY_PRIVATE_KEY"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PAYTHEFLY_DEADLINE_SECONDS", "600")
        monkeypatch.setenv("PAYTHEFLY_SERIAL_PREFIX", "SHOP-")
        monkeypatch.setenv("PAYTHEFLY_PAY_URL", "https://pay.example/pay")
        config = SignerConfig.from_env()
        assert config.deadline_seconds == 600
        assert config.serial_prefix == "SHOP-"
        assert config.pay_url == "https://pay.example/pay"

    def test_from_env_defaults(self, monkeypatch):
        for name in ("PAYTHEFLY_DEADLINE_SECONDS", "PAYTHEFLY_SERIAL_PREFIX", "PAYTHEFLY_PAY_URL"):
            monkeypatch.delenv(name, raising=False)
        assert SignerConfig.from_env() == SignerConfig()

    @pytest.mark.parametrize("bad", ["abc", "0", "-10"])
    def test_from_env_invalid_deadline(self, monkeypatch, bad):
        monkeypatch.setenv("PAYTHEFLY_DEADLINE_SECONDS", bad)
        with pytest.raises(ConfigurationError):
            SignerConfig.from_env()

    def test_load_env_file(self, tmp_path, monkeypatch):
        # setenv first so monkeypatch restores the variable to unset afterwards
        monkeypatch.setenv("PAYTHEFLY_SERIAL_PREFIX", "placeholder")
        monkeypatch.delenv("PAYTHEFLY_SERIAL_PREFIX")
        env_file = tmp_path / ".env"
        env_file.write_text("PAYTHEFLY_SERIAL_PREFIX=ENV-\n")
        assert load_env(env_file)
        assert SignerConfig.from_env().serial_prefix == "ENV-"


class TestKeyProviders:
    """测试密钥提供者"""

    def test_base_not_implemented(self):
        with pytest.raises(NotImplementedError):
            KeyProvider().get_private_key()

    def test_static(self):
        assert StaticKeyProvider("0x" + TEST_KEY.upper()).get_private_key() == TEST_KEY

    def test_static_missing(self):
        with pytest.raises(KeyNotAvailableError):
            StaticKeyProvider("").get_private_key()

    def test_static_invalid(self):
        with pytest.raises(InvalidPrivateKeyError):
            StaticKeyProvider("bad").get_private_key()

    def test_static_repr_hides_key(self):
        assert TEST_KEY not in repr(StaticKeyProvider(TEST_KEY))

    def test_env(self, monkeypatch):
        monkeypatch.setenv("PAYTHEFLY_PRIVATE_KEY", f"  {TEST_KEY}\n")
        assert EnvKeyProvider().get_private_key() == TEST_KEY

    def test_env_custom_variable(self, monkeypatch):
        monkeypatch.setenv("SHOP_SIGNING_KEY", TEST_KEY)
        assert EnvKeyProvider("SHOP_SIGNING_KEY").get_private_key() == TEST_KEY

    def test_env_missing(self, monkeypatch):
        monkeypatch.delenv("PAYTHEFLY_PRIVATE_KEY", raising=False)
        with pytest.raises(KeyNotAvailableError) as exc_info:
            EnvKeyProvider().get_private_key()
        assert "PAYTHEFLY_PRIVATE_KEY" in str(exc_info.value)
