# onetimepad

A small one-time pad toolkit over an alphabet of 27 characters: the
capital letters `A`–`Z` and the space. It has a key generator, an
encryption server, a decryption server, and a client for each server.
It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

### Generating a key

```
onetimepad-keygen 256 > mykey
```

Prints a random key of the requested length followed by a newline. Every
character is a capital letter or a space. The length argument is read the
way `atoi` reads it: leading digits count, and anything that does not
start with a number gives an empty key. Without an argument the command
prints a usage message and exits with status 1.

### Running the servers

```
onetimepad-enc-server 57171 &
onetimepad-dec-server 57172 &
```

Each server listens on the given port on all interfaces and runs until it
is interrupted. Every connection is handled in its own worker thread; at
most five are handled at once, and a connection that arrives while five
are in progress is closed without a reply and logged to stderr.

A request has the form `<mode><text>+<key>`, where the mode is `e` for
the encryption server and `d` for the decryption server. A request with
the wrong mode, or without the `+` separator, is logged and answered with
a single NUL byte. If the port cannot be bound, the server prints
`SERVER - ERROR: Binding failed.` and exits with status 1.

### Encrypting and decrypting

```
onetimepad-enc-client plaintext mykey 57171 > ciphertext
onetimepad-dec-client ciphertext mykey 57172
```

Each client reads the first line of the text file and of the key file,
sends both to the server on `127.0.0.1` at the given port, and prints the
server's reply (with any NUL bytes removed, so a rejected request prints
an empty line). The client prints an error to stderr and exits with
status 1 when:

- fewer than three arguments are given;
- a file cannot be read;
- a file's first line holds a character other than `A`–`Z` and the space;
- the key is shorter than the text;
- the server cannot be reached.

## Library use

```python
from onetimepad.cipher import encrypt, decrypt

ciphertext = encrypt("HELLO WORLD", "XMCKLDOGHEPZ")
assert decrypt(ciphertext, "XMCKLDOGHEPZ") == "HELLO WORLD"
```

- `onetimepad.cipher`: `char_value` maps a character to its position
  (`A` is 0, `Z` is 25, the space is 26) and `value_char` maps a position
  back. `encrypt` adds the key's values to the text's modulo 27 and
  `decrypt` subtracts them. All of them raise `ValueError` on characters
  outside the alphabet, and `encrypt`/`decrypt` raise it when the key is
  shorter than the text.
- `onetimepad.keygen.generate_key(length, rng=None)` builds a key using any
  `random.Random` instance, so keys are reproducible with a seeded
  generator.
- `onetimepad.server`: `set_up(port)` returns a listening socket,
  `handle_request(data, cipher, expected_client)` turns request bytes into
  reply bytes (raising `ValueError` for a bad request), and
  `serve(sock, cipher, expected_client, max_connections=5)` accepts
  connections until the socket is closed.
- `onetimepad.client`: `read_text(path)`, `build_request(mode, text, key)`
  and `contact_server(message, port)` raise `ClientError` on failure.

## Limitations

The keys come from Python's `random` module, which is not a
cryptographically secure generator. Traffic between clients and servers is
not encrypted or authenticated, and the clients can only reach servers on
the local machine.