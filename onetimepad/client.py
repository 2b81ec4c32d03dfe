"""Clients that send text and key to a cipher server and print the reply."""

import re
import socket
import sys

_MAX_TEXT = 131072
_USAGE = "CLIENT - ERROR: Please use the following format:\n'./{prog} {text} key port'\n"
_VALID = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ ")


class ClientError(Exception):
    """Raised when the client cannot build or deliver a request."""


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def read_text(path: str) -> str:
    """Return the first line of `path`, which must hold only A-Z and spaces."""
    try:
        with open(path, "r", encoding="latin-1", newline="") as handle:
            line = handle.readline(_MAX_TEXT)
    except OSError as exc:
        raise ClientError(f"File '{path}' invalid.") from exc
    line = line.split("\n", 1)[0]
    if not set(line) <= _VALID:
        raise ClientError(f"File '{path}' invalid.")
    return line


def build_request(mode: str, text: str, key: str) -> str:
    """Combine mode, text and key into one request string."""
    if len(key) < len(text):
        raise ClientError("Key too short.")
    return f"{mode}{text}+{key}"


def contact_server(message: str, port: int) -> str:
    """Send `message` to the server on localhost:`port` and return its reply."""
    try:
        with socket.create_connection(("127.0.0.1", port)) as conn:
            conn.sendall(message.encode("ascii"))
            chunks = []
            while True:
                chunk = conn.recv(_MAX_TEXT)
                if not chunk:
                    break
                chunks.append(chunk)
    except ConnectionRefusedError as exc:
        raise ClientError("Connection refused.") from exc
    except OSError as exc:
        raise ClientError(f"Connection failed: {exc}") from exc
    return b"".join(chunks).decode("ascii", errors="replace").replace("\0", "")


def _run(argv: list[str] | None, mode: str, prog: str, text_name: str) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 3:
        sys.stderr.write(_USAGE.format(prog=prog, text=text_name))
        return 1
    try:
        text = read_text(argv[0])
        key = read_text(argv[1])
        request = build_request(mode, text, key)
        reply = contact_server(request, _atoi(argv[2]))
    except ClientError as exc:
        sys.stderr.write(f"CLIENT - ERROR: {exc}\n")
        return 1
    print(reply)
    return 0


def enc_main(argv: list[str] | None = None) -> int:
    """Encrypt a plaintext file with a key file via the encryption server."""
    return _run(argv, "e", "enc_client", "plaintext")


def dec_main(argv: list[str] | None = None) -> int:
    """Decrypt a ciphertext file with a key file via the decryption server."""
    return _run(argv, "d", "dec_client", "ciphertext")