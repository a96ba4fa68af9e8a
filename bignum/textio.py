from typing import IO, Iterator

from bignum.bigint import BigInt
from bignum.errors import InvalidFormat


def _read_token(stream: IO[str]) -> str:
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)

    token = []
    while ch and not ch.isspace():
        token.append(ch)
        ch = stream.read(1)

    return ''.join(token)


def read_bigint(stream: IO[str]) -> BigInt:
    """Read the next whitespace-delimited token from `stream` as a BigInt."""
    token = _read_token(stream)
    if not token:
        raise InvalidFormat(token, "end of stream")
    return BigInt(token)


def read_all(stream: IO[str]) -> Iterator[BigInt]:
    while True:
        token = _read_token(stream)
        if not token:
            return
        yield BigInt(token)


def write_bigint(stream: IO[str], value: BigInt) -> None:
    stream.write(value.to_string())
