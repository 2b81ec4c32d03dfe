"""One-time pad over the 27-symbol alphabet of capital letters and space."""

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ "
MODULUS = len(ALPHABET)
_SPACE_VALUE = MODULUS - 1


def char_value(ch: str) -> int:
    """Map a symbol to its value: 'A'..'Z' -> 0..25, ' ' -> 26."""
    if ch == " ":
        return _SPACE_VALUE
    if len(ch) == 1 and "A" <= ch <= "Z":
        return ord(ch) - ord("A")
    raise ValueError(f"invalid character {ch!r}: expected A-Z or space")


def value_char(value: int) -> str:
    """Map a value in 0..26 back to its symbol."""
    if not 0 <= value < MODULUS:
        raise ValueError(f"value {value} out of range 0..{MODULUS - 1}")
    if value == _SPACE_VALUE:
        return " "
    return chr(value + ord("A"))


def _check_key(text: str, key: str) -> None:
    if len(key) < len(text):
        raise ValueError("key too short")


def encrypt(plaintext: str, key: str) -> str:
    """Encrypt plaintext with key; the key must be at least as long."""
    _check_key(plaintext, key)
    return "".join(
        value_char((char_value(p) + char_value(k)) % MODULUS)
        for p, k in zip(plaintext, key)
    )


def decrypt(ciphertext: str, key: str) -> str:
    """Decrypt ciphertext with key; the key must be at least as long."""
    _check_key(ciphertext, key)
    return "".join(
        value_char((char_value(c) - char_value(k)) % MODULUS)
        for c, k in zip(ciphertext, key)
    )