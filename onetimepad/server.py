"""Cipher servers: accept requests of the form '<mode><text>+<key>' and reply."""

import re
import socket
import sys
import threading
import time
from typing import Callable

from onetimepad.cipher import decrypt, encrypt

Cipher = Callable[[str, str], str]

MAX_CONNECTIONS = 5
_MAX_REQUEST = 262147
_RECV_DELAY = 0.05
_EMPTY_REPLY = b"\0"
_USAGE = "SERVER - ERROR: Please use the following format:\n'{prog} port'\n"


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _log_error(message: str) -> None:
    sys.stderr.write(f"SERVER - ERROR: {message}\n")


def set_up(port: int) -> socket.socket:
    """Create a TCP socket bound to all interfaces on `port` and start listening."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(("", port))
        sock.listen(MAX_CONNECTIONS)
    except OSError:
        sock.close()
        raise
    return sock


def handle_request(data: bytes, cipher: Cipher, expected_client: str) -> bytes:
    """Apply `cipher` to a raw request and return the reply bytes.

    Raises ValueError when the request comes from the wrong kind of client
    or cannot be parsed.
    """
    message = data.decode("ascii")
    if not message or message[0] != expected_client:
        raise ValueError("Invalid client attempting to connect to server.")
    text, separator, key = message[1:].partition("+")
    if not separator:
        raise ValueError("Malformed request: missing key.")
    return cipher(text, key).encode("ascii")


def _handle_connection(conn: socket.socket, cipher: Cipher, expected_client: str) -> None:
    try:
        with conn:
            time.sleep(_RECV_DELAY)
            data = conn.recv(_MAX_REQUEST)
            try:
                reply = handle_request(data, cipher, expected_client)
            except ValueError as exc:
                _log_error(str(exc))
                reply = _EMPTY_REPLY
            conn.sendall(reply)
    except OSError as exc:
        _log_error(f"Connection failed: {exc}")


def serve(
    sock: socket.socket,
    cipher: Cipher,
    expected_client: str,
    max_connections: int = MAX_CONNECTIONS,
) -> None:
    """Accept connections on `sock` until it is closed, each in its own worker."""
    workers: list[threading.Thread] = []
    while True:
        try:
            conn, _ = sock.accept()
        except OSError:
            return
        workers = [worker for worker in workers if worker.is_alive()]
        if len(workers) >= max_connections:
            _log_error(f"max connections ({max_connections}) reached")
            conn.close()
            continue
        worker = threading.Thread(
            target=_handle_connection,
            args=(conn, cipher, expected_client),
            daemon=True,
        )
        worker.start()
        workers.append(worker)


def _run(argv: list[str] | None, cipher: Cipher, expected_client: str, prog: str) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        sys.stderr.write(_USAGE.format(prog=prog))
        return 1
    try:
        sock = set_up(_atoi(argv[0]))
    except OSError:
        _log_error("Binding failed.")
        return 1
    with sock:
        try:
            serve(sock, cipher, expected_client)
        except KeyboardInterrupt:
            pass
    return 0


def enc_main(argv: list[str] | None = None) -> int:
    """Run the encryption server on the port given in `argv`."""
    return _run(argv, encrypt, "e", "enc_server")


def dec_main(argv: list[str] | None = None) -> int:
    """Run the decryption server on the port given in `argv`."""
    return _run(argv, decrypt, "d", "dec_server")