"""Crockford Base32 encoding for short, human-readable identifiers."""

CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"


def encode(value: int, width: int) -> str:
    """Encode a non-negative integer as exactly ``width`` Base32 characters.

    The result is left-padded with ``0``; higher digits beyond ``width`` are dropped.
    """
    if value < 0:
        raise ValueError("value must be non-negative")
    digits = []
    for _ in range(width):
        value, remainder = divmod(value, 32)
        digits.append(CROCKFORD_ALPHABET[remainder])
    return "".join(reversed(digits))


def encode_bytes(data: bytes, width: int) -> str:
    """Map each of the first ``width`` bytes to one Base32 character, padding with ``0``."""
    encoded = "".join(CROCKFORD_ALPHABET[byte % 32] for byte in data[:width])
    return encoded.ljust(width, "0")[:width]