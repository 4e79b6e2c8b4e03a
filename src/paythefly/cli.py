#!/usr/bin/env python3
"""
PayTheFly CLI Tool

Key management and payment signing from the command line.

Usage:
    paythefly keygen                      # Generate a new signing key
    paythefly address --key <hex>         # Show EVM and TRON addresses
    paythefly convert <address>           # Convert between EVM and TRON form
    paythefly sign --chain-id 56 --project-id p1 --contract 0x... \\
        --token 0x... --amount 10         # Sign a payment request
    paythefly deadline --duration 1800    # Print a deadline timestamp

Environment Variables:
    PAYTHEFLY_PRIVATE_KEY: Signing key used when --key is not given
    (a .env file in the working directory is loaded automatically)
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .chains import CHAIN_CONFIG
from .config import SignerConfig, load_env
from .exceptions import PayTheFlyError
from .key_provider import EnvKeyProvider, KeyProvider, StaticKeyProvider
from .keys import (
    derive_evm_address,
    derive_tron_address,
    evm_to_tron_address,
    generate_private_key,
    is_evm_address,
    to_checksum_address,
    tron_to_evm_address,
)
from .signer import PaymentSigner, get_deadline


def _key_provider(args: argparse.Namespace, config: SignerConfig) -> KeyProvider:
    if args.key:
        return StaticKeyProvider(args.key)
    return EnvKeyProvider(config.private_key_env)


def cmd_keygen(args: argparse.Namespace) -> int:
    """Generate a new key and print it with its addresses."""
    key = generate_private_key()
    result = {
        "private_key": key,
        "evm_address": derive_evm_address(key),
        "tron_address": derive_tron_address(key),
    }
    if args.json:
        print(json.dumps(result))
    else:
        print("🔑 New signing key generated")
        print(f"   Private key:  {result['private_key']}")
        print(f"   EVM address:  {result['evm_address']}")
        print(f"   TRON address: {result['tron_address']}")
        print("⚠️  Store the private key securely; it is not saved anywhere.")
    return 0


def cmd_address(args: argparse.Namespace) -> int:
    """Print the addresses controlled by the configured key."""
    config = SignerConfig.from_env()
    key = _key_provider(args, config).get_private_key()
    result = {
        "evm_address": derive_evm_address(key),
        "tron_address": derive_tron_address(key),
    }
    if args.json:
        print(json.dumps(result))
    else:
        print(f"EVM address:  {result['evm_address']}")
        print(f"TRON address: {result['tron_address']}")
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    """Convert an address to the other chain family's form."""
    if is_evm_address(args.address):
        print(evm_to_tron_address(args.address))
    else:
        print(to_checksum_address(tron_to_evm_address(args.address)))
    return 0


def cmd_sign(args: argparse.Namespace) -> int:
    """Sign a payment request and print the signature and payment link."""
    config = SignerConfig.from_env()
    signer = PaymentSigner(_key_provider(args, config), config)
    signed = signer.sign(
        chain_id=args.chain_id,
        project_id=args.project_id,
        contract_address=args.contract,
        token_address=args.token,
        amount=args.amount,
        serial_no=args.serial_no,
        deadline=args.deadline,
    )
    url = signed.payment_url(config.pay_url, brand=args.brand, redirect=args.redirect)
    if args.json:
        output = signed.to_query()
        output["url"] = url
        print(json.dumps(output))
    else:
        print("✅ Payment signed")
        print(f"   Serial No:  {signed.serial_no}")
        print(f"   Deadline:   {signed.deadline}")
        print(f"   Signature:  {signed.signature}")
        print(f"   Pay URL:    {url}")
    return 0


def cmd_deadline(args: argparse.Namespace) -> int:
    print(get_deadline(args.duration))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paythefly",
        description="PayTheFly payment signing tool",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--json", action="store_true", help="Print machine-readable JSON")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("keygen", help="Generate a new signing key")

    addr_parser = subparsers.add_parser("address", help="Show addresses for a key")
    addr_parser.add_argument("--key", "-k", help="Private key (default: $PAYTHEFLY_PRIVATE_KEY)")

    conv_parser = subparsers.add_parser("convert", help="Convert between EVM and TRON address form")
    conv_parser.add_argument("address", help="0x... or T... address")

    sign_parser = subparsers.add_parser("sign", help="Sign a payment request")
    sign_parser.add_argument(
        "--chain-id", "-c", type=int, required=True,
        help=f"Chain ID ({', '.join(str(c) for c in CHAIN_CONFIG)})",
    )
    sign_parser.add_argument("--project-id", "-p", required=True, help="PayTheFly project ID")
    sign_parser.add_argument("--contract", required=True, help="PayTheFlyPro contract address")
    sign_parser.add_argument("--token", "-t", required=True, help="Token contract address")
    sign_parser.add_argument("--amount", "-a", required=True, help="Decimal amount, e.g. 10.5")
    sign_parser.add_argument("--serial-no", "-s", help="Serial number (default: generated)")
    sign_parser.add_argument("--deadline", "-d", help="Unix deadline (default: now + window)")
    sign_parser.add_argument("--brand", help="Brand shown on the payment page")
    sign_parser.add_argument("--redirect", help="Redirect URL after payment")
    sign_parser.add_argument("--key", "-k", help="Private key (default: $PAYTHEFLY_PRIVATE_KEY)")

    dl_parser = subparsers.add_parser("deadline", help="Print now + duration as a unix timestamp")
    dl_parser.add_argument("--duration", type=int, default=1800, help="Seconds (default 1800)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_env()

    commands = {
        "keygen": cmd_keygen,
        "address": cmd_address,
        "convert": cmd_convert,
        "sign": cmd_sign,
        "deadline": cmd_deadline,
    }
    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 0

    try:
        return handler(args)
    except PayTheFlyError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
