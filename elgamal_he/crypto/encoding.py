"""
Conversion between caller messages and the integers ElGamal operates on.

The caller names the encoding with a MessageKind; nothing is inferred from the
Python type of the message. Byte strings map to the big-endian integer of
their raw bytes, so leading zero bytes do not survive a round trip and the
empty byte string encodes as 0.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from Crypto.Util.number import bytes_to_long, long_to_bytes


class MessageKind(str, Enum):
    BYTE_STRING = "byte_string"
    NUMERIC = "numeric"
    RAW_INTEGER = "raw_integer"


def parse_int(value: Union[int, str]) -> int:
    """Parse an int, a decimal string, or a 0x-prefixed hex string."""
    if isinstance(value, bool):
        raise TypeError("booleans are not integers here")
    if isinstance(value, int):
        return value
    text = value.strip()
    if text.lower().startswith(("0x", "-0x")):
        return int(text, 16)
    return int(text, 10)


@dataclass(frozen=True)
class Plaintext:
    value: int

    @classmethod
    def from_int(cls, value: int) -> "Plaintext":
        if value < 0:
            raise ValueError("plaintext must be non-negative")
        return cls(value=value)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Plaintext":
        return cls(value=bytes_to_long(data))

    @classmethod
    def from_text(cls, text: str, encoding: str = "utf-8") -> "Plaintext":
        return cls.from_bytes(text.encode(encoding))

    @classmethod
    def from_number(cls, number: Union[int, str]) -> "Plaintext":
        """Decimal parse; ``42`` and ``"42"`` both encode as 42."""
        return cls.from_int(int(str(number).strip(), 10))

    def to_int(self) -> int:
        return self.value

    def to_bytes(self) -> bytes:
        if self.value == 0:
            return b""
        return long_to_bytes(self.value)

    def to_text(self, encoding: str = "utf-8") -> str:
        return self.to_bytes().decode(encoding)

    def fits(self, p: int) -> bool:
        return 0 <= self.value < p

    def __int__(self) -> int:
        return self.value


def encode_message(message, kind: MessageKind) -> Plaintext:
    if kind is MessageKind.BYTE_STRING:
        if isinstance(message, str):
            return Plaintext.from_text(message)
        return Plaintext.from_bytes(bytes(message))
    if kind is MessageKind.NUMERIC:
        return Plaintext.from_number(message)
    if kind is MessageKind.RAW_INTEGER:
        return Plaintext.from_int(message)
    raise ValueError(f"unknown message kind: {kind!r}")


def decode_message(plaintext: Plaintext, kind: MessageKind):
    if kind is MessageKind.BYTE_STRING:
        return plaintext.to_bytes()
    if kind in (MessageKind.NUMERIC, MessageKind.RAW_INTEGER):
        return plaintext.to_int()
    raise ValueError(f"unknown message kind: {kind!r}")
