import logging
from typing import Optional

from Crypto.Util import number

from elgamal_he.config import Settings, get_settings
from elgamal_he.crypto.randomness import random_n_bits

logger = logging.getLogger(__name__)


def is_probable_prime(n: int, settings: Optional[Settings] = None) -> bool:
    if n < 2:
        return False
    if settings is None:
        settings = get_settings()
    return bool(number.isPrime(n, false_positive_prob=settings.prime_false_positive_prob))


async def random_prime(bits: int, settings: Optional[Settings] = None) -> int:
    """
    Random probable prime with bit length exactly ``bits``.

    Starts from a random odd ``bits``-bit value and steps by 2. A walk that
    runs past ``bits`` bits is abandoned and restarted from a fresh draw, so the
    returned value is always the one that passed the primality test.
    """
    if bits < 2:
        raise ValueError("a prime needs at least 2 bits")
    if settings is None:
        settings = get_settings()

    restarts = 0
    while True:
        candidate = (await random_n_bits(bits)) | 1
        while candidate.bit_length() == bits:
            if is_probable_prime(candidate, settings):
                if restarts:
                    logger.debug("prime search restarted %d time(s) for %d bits", restarts, bits)
                return candidate
            candidate += 2
        restarts += 1
