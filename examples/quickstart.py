#!/usr/bin/env python3
"""
PayTheFly SDK 快速入门示例

运行前请设置环境变量 (或写入 .env):
    export PAYTHEFLY_PRIVATE_KEY="your_hex_private_key"
    export PAYTHEFLY_PROJECT_ID="your_project_id"
    export PAYTHEFLY_CONTRACT="TYourPayTheFlyProContract"

运行:
    python examples/quickstart.py
"""

import os

from paythefly import EnvKeyProvider, PaymentSigner, SignerConfig, load_env
from paythefly.exceptions import PayTheFlyError

USDT_TRON = "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t"
TRON_MAINNET = 728126428


def main():
    load_env()
    config = SignerConfig.from_env()
    signer = PaymentSigner(EnvKeyProvider(config.private_key_env), config)

    # 1. 查看签名地址
    print("🔑 签名地址")
    try:
        print(f"   TRON: {signer.address(TRON_MAINNET)}")
        print(f"   EVM:  {signer.address()}")
    except PayTheFlyError as e:
        print(f"❌ {e}")
        return 1

    # 2. 签名支付请求 (纯本地计算，不需要链上交互)
    print("\n📝 签名支付请求...")
    try:
        signed = signer.sign(
            chain_id=TRON_MAINNET,
            project_id=os.getenv("PAYTHEFLY_PROJECT_ID", "demo-project"),
            contract_address=os.getenv("PAYTHEFLY_CONTRACT", USDT_TRON),
            token_address=USDT_TRON,
            amount="10.5",
        )
    except PayTheFlyError as e:
        print(f"❌ 签名失败: {e}")
        return 1

    print(f"   ✓ 流水号: {signed.serial_no}")
    print(f"   ✓ 截止时间: {signed.deadline}")
    print(f"   ✓ 签名: {signed.signature}")
    print(f"\n🔗 支付链接:\n   {signed.payment_url(config.pay_url)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
