"""Error taxonomy shared by the ElGamal modules."""


class ElGamalError(Exception):
    """Base class for every error raised by elgamal_he."""


class MissingPrivateKeyError(ElGamalError):
    """Decryption attempted with a public-only key pair."""

    def __init__(self, message: str = "key pair has no private component"):
        super().__init__(message)


class InvalidRangeError(ElGamalError, ValueError):
    """A random range was requested with min >= max."""


class ParameterGenerationFailed(ElGamalError, RuntimeError):
    """A generation loop exceeded its attempt limit."""


class InvalidKeyError(ElGamalError, ValueError):
    """Key material (or an ephemeral key) is outside its valid range."""


class DomainMismatchError(ElGamalError, ValueError):
    """Values produced under different moduli were combined."""
