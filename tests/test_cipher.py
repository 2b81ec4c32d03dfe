import random

import pytest

from onetimepad.cipher import ALPHABET, char_value, decrypt, encrypt, value_char


def test_space_maps_to_26():
    assert char_value(" ") == 26
    assert value_char(26) == " "


def test_letters_map_to_their_offsets():
    assert char_value("A") == 0
    assert value_char(0) == "A"


@pytest.mark.parametrize("ch", list(ALPHABET))
def test_char_value_round_trip(ch):
    assert value_char(char_value(ch)) == ch


@pytest.mark.parametrize("ch", ["a", "!", "\n", "", "AB", "["])
def test_char_value_rejects_invalid(ch):
    with pytest.raises(ValueError):
        char_value(ch)


@pytest.mark.parametrize("value", [-1, 27, 100])
def test_value_char_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        value_char(value)


def test_known_example():
    assert encrypt("HELLO", "XMCKL") == "DQNVZ"
    assert decrypt("DQNVZ", "XMCKL") == "HELLO"


def test_key_of_all_a_is_identity():
    text = "THE RED GOOSE FLIES AT MIDNIGHT"
    key = "A" * len(text)
    assert encrypt(text, key) == text
    assert decrypt(text, key) == text


def test_longer_key_uses_only_prefix():
    assert encrypt("HELLO", "XMCKLQQQQ") == encrypt("HELLO", "XMCKL")


def test_empty_text():
    assert encrypt("", "ABC") == ""
    assert decrypt("", "") == ""


def test_key_too_short():
    with pytest.raises(ValueError):
        encrypt("HELLO", "ABC")
    with pytest.raises(ValueError):
        decrypt("HELLO", "ABC")


def test_invalid_plaintext_rejected():
    with pytest.raises(ValueError):
        encrypt("hello", "ABCDE")


def test_random_round_trips():
    rng = random.Random(1234)
    for _ in range(50):
        length = rng.randrange(0, 60)
        text = "".join(rng.choice(ALPHABET) for _ in range(length))
        key = "".join(rng.choice(ALPHABET) for _ in range(length + rng.randrange(5)))
        ciphertext = encrypt(text, key)
        assert len(ciphertext) == len(text)
        assert set(ciphertext) <= set(ALPHABET)
        assert decrypt(ciphertext, key) == text