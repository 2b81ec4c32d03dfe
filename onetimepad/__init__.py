"""One-time pad over A-Z and space: cipher, key generator, TCP servers and clients."""

__version__ = "1.0.0"

__all__ = ["cipher", "keygen", "server", "client"]