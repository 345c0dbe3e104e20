"""
Runtime settings for parameter generation.
Every value can be overridden through the environment.
"""

import os

from pydantic import BaseModel, Field


# ── Defaults ───────────────────────────────────────
DEFAULT_PRIME_BITS = 2048
MIN_PRIME_BITS = 16
DEFAULT_MAX_SAFE_PRIME_ATTEMPTS = 100_000
DEFAULT_MAX_GENERATOR_ATTEMPTS = 10_000
DEFAULT_PRIME_FALSE_POSITIVE_PROB = 1e-12


# ── Models ─────────────────────────────────────────
class Settings(BaseModel):
    model_config = {"frozen": True}

    prime_bits: int = Field(default=DEFAULT_PRIME_BITS, ge=MIN_PRIME_BITS)
    max_safe_prime_attempts: int = Field(default=DEFAULT_MAX_SAFE_PRIME_ATTEMPTS, ge=1)
    max_generator_attempts: int = Field(default=DEFAULT_MAX_GENERATOR_ATTEMPTS, ge=1)
    prime_false_positive_prob: float = Field(default=DEFAULT_PRIME_FALSE_POSITIVE_PROB, gt=0, lt=1)


def get_settings() -> Settings:
    """Build settings from the environment. Raises pydantic.ValidationError on bad values."""
    return Settings(
        prime_bits=os.getenv("ELGAMAL_PRIME_BITS", str(DEFAULT_PRIME_BITS)),
        max_safe_prime_attempts=os.getenv(
            "ELGAMAL_MAX_SAFE_PRIME_ATTEMPTS", str(DEFAULT_MAX_SAFE_PRIME_ATTEMPTS)
        ),
        max_generator_attempts=os.getenv(
            "ELGAMAL_MAX_GENERATOR_ATTEMPTS", str(DEFAULT_MAX_GENERATOR_ATTEMPTS)
        ),
        prime_false_positive_prob=os.getenv(
            "ELGAMAL_PRIME_FALSE_POSITIVE_PROB", str(DEFAULT_PRIME_FALSE_POSITIVE_PROB)
        ),
    )
