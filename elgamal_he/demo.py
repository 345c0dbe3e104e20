"""Demonstration run: toy key check, text round trip and homomorphic product."""

import logging
import os
import sys
from typing import Optional

import anyio

from elgamal_he.config import get_settings
from elgamal_he.crypto.elgamal import KeyPair, decrypt, encrypt, generate, multiply
from elgamal_he.crypto.encoding import Plaintext

logger = logging.getLogger(__name__)

SECRET = "The quick brown fox jumps over the lazy dog"
TOY_KEY = (17, 3, 13, 4)


async def check_toy_key() -> dict:
    key = KeyPair.from_values(*TOY_KEY)
    message = Plaintext.from_int(9)
    recovered = await decrypt(key, await encrypt(key, message))
    return {
        "check": "toy_key",
        "passed": pow(key.g, key.x, key.p) == key.y and recovered == message,
    }


async def check_text_roundtrip(key: KeyPair) -> dict:
    recovered = await decrypt(key, await encrypt(key, Plaintext.from_text(SECRET)))
    return {"check": "text_roundtrip", "passed": recovered.to_text() == SECRET}


async def check_homomorphic_product(key: KeyPair) -> dict:
    m1, m2 = 6, 7
    product = multiply(
        await encrypt(key, Plaintext.from_int(m1)),
        await encrypt(key, Plaintext.from_int(m2)),
    )
    recovered = await decrypt(key, product)
    return {"check": "homomorphic_product", "passed": recovered.value == (m1 * m2) % key.p}


async def run_demo(prime_bits: Optional[int] = None, key: Optional[KeyPair] = None) -> list[dict]:
    if key is None:
        if prime_bits is None:
            prime_bits = int(os.getenv("ELGAMAL_DEMO_PRIME_BITS", str(get_settings().prime_bits)))
        logger.info("generating a %d-bit key pair", prime_bits)
        key = await generate(prime_bits)
    return [
        await check_toy_key(),
        await check_text_roundtrip(key),
        await check_homomorphic_product(key),
    ]


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    print("=" * 60)
    print("  ElGamal demonstration")
    print("=" * 60)

    results = anyio.run(run_demo)

    failed = 0
    for r in results:
        if r["passed"]:
            print(f"  [ok]   {r['check']}")
        else:
            failed += 1
            print(f"  [FAIL] {r['check']}")

    print("-" * 60)
    print(f"  {len(results) - failed}/{len(results)} checks passed")
    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    main()
