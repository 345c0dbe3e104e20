"""Shared pytest fixtures for the ElGamal test suite."""

import pytest

from elgamal_he.crypto.elgamal import (
    MODP_2048_PRIME,
    DomainParameters,
    KeyPair,
    choose_generator,
    generate,
    generate_keypair,
)


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def toy_key() -> KeyPair:
    """Non-secure parameters with fixed values: p=17, g=3, y=13, x=4."""
    return KeyPair.from_values(17, 3, 13, 4)


@pytest.fixture()
async def small_key() -> KeyPair:
    """A freshly generated key pair over a 64-bit safe prime."""
    return await generate(prime_bits=64)


@pytest.fixture()
async def modp_key() -> KeyPair:
    """A 2048-bit key pair over the RFC 3526 safe prime with a fresh generator."""
    g = await choose_generator(MODP_2048_PRIME)
    return await generate_keypair(DomainParameters(p=MODP_2048_PRIME, g=g))
