"""Generate random keys for the one-time pad."""

import random
import re
import sys

from onetimepad.cipher import ALPHABET, MODULUS

_USAGE = "ERROR! Please use the following format:\n'./{prog} num'\n"


def generate_key(length: int, rng: random.Random | None = None) -> str:
    """Return a key of `length` symbols drawn uniformly from the alphabet."""
    if rng is None:
        rng = random.Random()
    return "".join(ALPHABET[rng.randrange(MODULUS)] for _ in range(max(length, 0)))


def _parse_int(text: str) -> int:
    """Lenient integer parse: leading digits count, anything else gives 0."""
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Print a random key of the requested length to stdout."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        sys.stderr.write(_USAGE.format(prog="keygen"))
        return 1
    print(generate_key(_parse_int(argv[0])))
    return 0


if __name__ == "__main__":
    sys.exit(main())