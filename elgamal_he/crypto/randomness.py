from anyio import to_thread
from Crypto.Random import get_random_bytes as _os_random_bytes
from Crypto.Util.number import bytes_to_long

from elgamal_he.errors import InvalidRangeError


async def get_random_bytes(n: int) -> bytes:
    """Return n bytes from the OS CSPRNG without blocking the event loop."""
    if n < 0:
        raise ValueError("byte count must be non-negative")
    if n == 0:
        return b""
    return await to_thread.run_sync(_os_random_bytes, n)


def _trim(value: int, bits: int) -> int:
    excess = value.bit_length() - bits
    return value >> excess if excess > 0 else value


async def random_n_bits(bits: int) -> int:
    """Random integer whose bit length is exactly ``bits`` (top bit always set)."""
    if bits < 1:
        raise ValueError("bit count must be positive")
    buf = await get_random_bytes((bits + 7) // 8)
    return _trim(bytes_to_long(buf), bits) | (1 << (bits - 1))


async def random_in_range(min_value: int, max_value: int) -> int:
    """Uniform integer in [min_value, max_value), by rejection sampling."""
    if min_value >= max_value:
        raise InvalidRangeError(f"empty range [{min_value}, {max_value})")
    span = max_value - min_value - 1
    n_bytes = (span.bit_length() + 7) // 8
    while True:
        candidate = bytes_to_long(await get_random_bytes(n_bytes)) + min_value
        if candidate < max_value:
            return candidate
