import logging
from dataclasses import dataclass
from typing import Optional, Union

from Crypto.Util.number import inverse

from elgamal_he.config import MIN_PRIME_BITS, Settings, get_settings
from elgamal_he.crypto.encoding import Plaintext, parse_int
from elgamal_he.crypto.primes import is_probable_prime, random_prime
from elgamal_he.crypto.randomness import random_in_range
from elgamal_he.errors import (
    DomainMismatchError,
    InvalidKeyError,
    MissingPrivateKeyError,
    ParameterGenerationFailed,
)

logger = logging.getLogger(__name__)

# RFC 3526 group 14 (2048-bit MODP) safe prime
MODP_2048_PRIME = int(
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74"
    "020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F1437"
    "4FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF05"
    "98DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB"
    "9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
    "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF695581718"
    "3995497CEA956AE515D2261898FA051015728E5A8AACAA68FFFFFFFFFFFFFFFF",
    16,
)


@dataclass(frozen=True)
class DomainParameters:
    p: int
    g: int

    @property
    def q(self) -> int:
        return (self.p - 1) // 2


@dataclass(frozen=True)
class KeyPair:
    params: DomainParameters
    y: int
    x: Optional[int] = None

    @property
    def p(self) -> int:
        return self.params.p

    @property
    def g(self) -> int:
        return self.params.g

    @property
    def q(self) -> int:
        return self.params.q

    @property
    def has_private_key(self) -> bool:
        return self.x is not None

    def public_key(self) -> "KeyPair":
        return KeyPair(params=self.params, y=self.y)

    @classmethod
    def from_values(
        cls,
        p: Union[int, str],
        g: Union[int, str],
        y: Union[int, str],
        x: Union[int, str, None] = None,
    ) -> "KeyPair":
        """
        Build a key pair from ints, decimal strings or 0x-prefixed hex strings.

        Only structural checks are made (ranges and y == g^x mod p); p is not
        required to be a safe prime, so small toy groups are accepted.
        """
        p_i, g_i, y_i = parse_int(p), parse_int(g), parse_int(y)
        x_i = parse_int(x) if x is not None else None
        if p_i < 3:
            raise InvalidKeyError("modulus must be at least 3")
        if not 1 < g_i < p_i:
            raise InvalidKeyError("generator must lie in (1, p)")
        if not 0 < y_i < p_i:
            raise InvalidKeyError("public key must lie in (0, p)")
        if x_i is not None:
            if not 0 < x_i < p_i - 1:
                raise InvalidKeyError("private key must lie in (0, p-1)")
            if pow(g_i, x_i, p_i) != y_i:
                raise InvalidKeyError("public key does not match g^x mod p")
        return cls(params=DomainParameters(p=p_i, g=g_i), y=y_i, x=x_i)


@dataclass(frozen=True)
class Ciphertext:
    a: int
    b: int
    p: int

    def __mul__(self, other: "Ciphertext") -> "Ciphertext":
        if not isinstance(other, Ciphertext):
            return NotImplemented
        return multiply(self, other)


# ── Parameter generation ─────────────────────────────


def is_valid_generator(g: int, p: int) -> bool:
    """Reject small-order elements and generators tied to p-1 (g or g^-1 dividing it)."""
    if not 3 <= g < p:
        return False
    q = (p - 1) // 2
    p_minus_1 = p - 1
    if pow(g, 2, p) == 1:
        return False
    if pow(g, q, p) == 1:
        return False
    if p_minus_1 % g == 0:
        return False
    if p_minus_1 % inverse(g, p) == 0:
        return False
    return True


def check_parameters(params: DomainParameters, settings: Optional[Settings] = None) -> bool:
    """True when p is a safe prime and g passes every generator check."""
    if settings is None:
        settings = get_settings()
    if params.p < 5 or params.p % 2 == 0:
        return False
    if not is_probable_prime(params.p, settings) or not is_probable_prime(params.q, settings):
        return False
    return is_valid_generator(params.g, params.p)


async def _safe_prime(prime_bits: int, settings: Settings) -> int:
    for attempt in range(1, settings.max_safe_prime_attempts + 1):
        q = await random_prime(prime_bits - 1, settings)
        p = (q << 1) + 1
        if is_probable_prime(p, settings):
            logger.debug("safe prime found after %d attempt(s)", attempt)
            return p
    raise ParameterGenerationFailed(
        f"no {prime_bits}-bit safe prime after {settings.max_safe_prime_attempts} attempts"
    )


async def choose_generator(p: int, settings: Optional[Settings] = None) -> int:
    if settings is None:
        settings = get_settings()
    for _ in range(settings.max_generator_attempts):
        # 2 is excluded on purpose (Bleichenbacher)
        g = await random_in_range(3, p)
        if is_valid_generator(g, p):
            return g
    raise ParameterGenerationFailed(
        f"no generator found after {settings.max_generator_attempts} attempts"
    )


async def generate_parameters(
    prime_bits: Optional[int] = None, settings: Optional[Settings] = None
) -> DomainParameters:
    if settings is None:
        settings = get_settings()
    if prime_bits is None:
        prime_bits = settings.prime_bits
    if prime_bits < MIN_PRIME_BITS:
        raise ValueError(f"prime_bits must be at least {MIN_PRIME_BITS}")

    p = await _safe_prime(prime_bits, settings)
    g = await choose_generator(p, settings)
    logger.info("generated %d-bit domain parameters", prime_bits)
    return DomainParameters(p=p, g=g)


async def parameters_for_prime(p: int, settings: Optional[Settings] = None) -> DomainParameters:
    """Domain parameters over a known safe prime, with a freshly chosen generator."""
    if settings is None:
        settings = get_settings()
    if p < 5 or not is_probable_prime(p, settings) or not is_probable_prime((p - 1) // 2, settings):
        raise InvalidKeyError("modulus is not a safe prime")
    g = await choose_generator(p, settings)
    return DomainParameters(p=p, g=g)


async def generate_keypair(params: DomainParameters) -> KeyPair:
    x = await random_in_range(2, params.p - 1)
    y = pow(params.g, x, params.p)
    return KeyPair(params=params, y=y, x=x)


async def generate(prime_bits: Optional[int] = None, settings: Optional[Settings] = None) -> KeyPair:
    params = await generate_parameters(prime_bits, settings)
    return await generate_keypair(params)


# ── Encryption / decryption ──────────────────────────


async def encrypt(key: KeyPair, message: Plaintext, ephemeral_key: Optional[int] = None) -> Ciphertext:
    """
    Encrypt ``message`` under ``key``.

    The caller must keep ``0 <= message < p``; larger values are encrypted
    anyway and will not decrypt to the original. A supplied ephemeral key must
    lie in [1, p-1) and must never be reused under the same public key.
    """
    p = key.p
    if ephemeral_key is None:
        ephemeral_key = await random_in_range(1, p - 1)
    elif not 1 <= ephemeral_key < p - 1:
        raise InvalidKeyError("ephemeral key must lie in [1, p-1)")

    m = message.value
    if not message.fits(p):
        logger.warning("message does not fit below the modulus; decryption will not recover it")

    a = pow(key.g, ephemeral_key, p)
    b = (pow(key.y, ephemeral_key, p) * m) % p
    return Ciphertext(a=a, b=b, p=p)


async def decrypt(key: KeyPair, ciphertext: Ciphertext) -> Plaintext:
    """Blinded decryption: the secret exponent is applied to g^r * a, never to a alone."""
    if not key.has_private_key:
        raise MissingPrivateKeyError()
    if ciphertext.p != key.p:
        raise DomainMismatchError("ciphertext was produced under a different modulus")

    p = key.p
    r = await random_in_range(2, p - 1)

    a_blind = (pow(key.g, r, p) * ciphertext.a) % p
    ax = pow(a_blind, key.x, p)
    plaintext_blind = (inverse(ax, p) * ciphertext.b) % p
    plaintext = (pow(key.y, r, p) * plaintext_blind) % p
    return Plaintext(value=plaintext)


def multiply(c1: Ciphertext, c2: Ciphertext) -> Ciphertext:
    """Homomorphic product; decrypts to m1 * m2 mod p."""
    if c1.p != c2.p:
        raise DomainMismatchError("cannot combine ciphertexts from different moduli")
    p = c1.p
    return Ciphertext(a=(c1.a * c2.a) % p, b=(c1.b * c2.b) % p, p=p)
