import pytest
from Crypto.Util.number import isPrime

import elgamal_he.crypto.primes as primes
from elgamal_he.crypto.primes import is_probable_prime, random_prime


@pytest.mark.anyio
async def test_random_prime_bit_length_and_primality():
    for bits in [2, 8, 16, 32, 64, 128]:
        prime = await random_prime(bits)
        assert prime.bit_length() == bits
        assert isPrime(prime)


@pytest.mark.anyio
async def test_random_prime_restarts_instead_of_trimming(monkeypatch):
    # 15 -> 17 walks past 4 bits, so the search must start over from 8 -> 9 -> 11
    draws = iter([15, 8])

    async def fake_random_n_bits(bits):
        return next(draws)

    monkeypatch.setattr(primes, "random_n_bits", fake_random_n_bits)
    assert await random_prime(4) == 11


@pytest.mark.anyio
async def test_random_prime_rejects_tiny_sizes():
    with pytest.raises(ValueError):
        await random_prime(1)


def test_is_probable_prime():
    assert is_probable_prime(2)
    assert is_probable_prime(17)
    assert is_probable_prime(2**127 - 1)
    assert not is_probable_prime(0)
    assert not is_probable_prime(1)
    assert not is_probable_prime(561)
