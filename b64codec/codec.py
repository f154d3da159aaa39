"""Base64 codec (RFC 4648) with standard and URL-safe alphabets.

Encoding picks one alphabet; decoding accepts symbols and pad characters
from both, so text produced in either mode decodes without being told which.
Wrapped output (PEM and MIME line lengths) and line-break stripping on decode
are layered on top of the plain transform.
"""

from typing import Union

from b64codec.errors import InvalidSymbolError, MalformedLengthError

STANDARD_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "+/"
)
URL_SAFE_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "-_"
)
STANDARD_PAD = "="
URL_SAFE_PAD = "."

PEM_LINE_LENGTH = 64
MIME_LINE_LENGTH = 76

BytesLike = Union[bytes, bytearray, memoryview]

_STANDARD_SYMBOLS = STANDARD_ALPHABET.encode("ascii")
_URL_SAFE_SYMBOLS = URL_SAFE_ALPHABET.encode("ascii")
_PADS = frozenset(b"=.")
_LINE_BREAKS = b"\r\n"
_INVALID = 0xFF


def _build_reverse_table() -> bytes:
    table = bytearray([_INVALID]) * 256
    for symbols in (_STANDARD_SYMBOLS, _URL_SAFE_SYMBOLS):
        for idx, code in enumerate(symbols):
            table[code] = idx
    return bytes(table)


# Byte value -> 6-bit index, or _INVALID. Covers both alphabets.
_REVERSE_TABLE = _build_reverse_table()


def _as_bytes(data: Union[str, BytesLike]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(
        f"Input must be bytes-like or str, not {type(data).__name__}"
    )


def _as_symbols(encoded: Union[str, BytesLike]) -> bytes:
    if isinstance(encoded, str):
        try:
            return encoded.encode("ascii")
        except UnicodeEncodeError as exc:
            raise InvalidSymbolError(encoded[exc.start], exc.start) from None
    if isinstance(encoded, (bytes, bytearray, memoryview)):
        return bytes(encoded)
    raise TypeError(
        f"Input must be str or bytes-like, not {type(encoded).__name__}"
    )


def _index(raw: bytes, pos: int) -> int:
    value = _REVERSE_TABLE[raw[pos]]
    if value == _INVALID:
        raise InvalidSymbolError(chr(raw[pos]), pos)
    return value


def _quad(raw: bytes, pos: int) -> int:
    return (
        _index(raw, pos) << 18
        | _index(raw, pos + 1) << 12
        | _index(raw, pos + 2) << 6
        | _index(raw, pos + 3)
    )


def encode(data: Union[str, BytesLike], url_safe: bool = False) -> str:
    """Encode bytes (or UTF-8 text) to base64.

    Args:
        data: Bytes-like object, or a str which is encoded as UTF-8 first.
        url_safe: Use ``-``/``_`` and ``.`` padding instead of ``+``/``/``
            and ``=``.

    Returns:
        ASCII text of length ``ceil(len(data) / 3) * 4``.
    """
    raw = _as_bytes(data)
    symbols = _URL_SAFE_SYMBOLS if url_safe else _STANDARD_SYMBOLS
    pad = ord(URL_SAFE_PAD if url_safe else STANDARD_PAD)

    rest = len(raw) % 3
    full = len(raw) - rest
    out = bytearray((len(raw) + 2) // 3 * 4)

    o = 0
    for pos in range(0, full, 3):
        chunk = raw[pos] << 16 | raw[pos + 1] << 8 | raw[pos + 2]
        out[o] = symbols[chunk >> 18]
        out[o + 1] = symbols[chunk >> 12 & 0x3F]
        out[o + 2] = symbols[chunk >> 6 & 0x3F]
        out[o + 3] = symbols[chunk & 0x3F]
        o += 4

    if rest == 2:
        chunk = raw[full] << 8 | raw[full + 1]
        out[o:o + 4] = bytes((
            symbols[chunk >> 10],
            symbols[chunk >> 4 & 0x3F],
            symbols[chunk << 2 & 0x3F],
            pad,
        ))
    elif rest == 1:
        chunk = raw[full]
        out[o:o + 4] = bytes((
            symbols[chunk >> 2],
            symbols[chunk << 4 & 0x3F],
            pad,
            pad,
        ))

    return out.decode("ascii")


def insert_linebreaks(text: str, column_width: int) -> str:
    """Insert a newline after every ``column_width`` characters of text.

    No newline follows the final character.
    """
    if column_width < 1:
        raise ValueError(f"column_width must be positive, got {column_width}")
    if len(text) <= column_width:
        return text
    return "\n".join(
        text[pos:pos + column_width]
        for pos in range(0, len(text), column_width)
    )


def encode_wrapped(
    data: Union[str, BytesLike],
    column_width: int,
    url_safe: bool = False,
) -> str:
    """Encode to base64 and wrap the output at ``column_width`` symbols."""
    return insert_linebreaks(encode(data, url_safe=url_safe), column_width)


def encode_pem(data: Union[str, BytesLike]) -> str:
    """Encode with the standard alphabet, wrapped at 64 columns."""
    return encode_wrapped(data, PEM_LINE_LENGTH)


def encode_mime(data: Union[str, BytesLike]) -> str:
    """Encode with the standard alphabet, wrapped at 76 columns."""
    return encode_wrapped(data, MIME_LINE_LENGTH)


def decode(encoded: Union[str, BytesLike], strip_linebreaks: bool = False) -> bytes:
    """Decode base64 text produced with either alphabet.

    Args:
        encoded: Base64 text as str or bytes-like ASCII.
        strip_linebreaks: Remove ``\\n`` and ``\\r`` before decoding, for
            PEM/MIME wrapped input.

    Returns:
        The decoded bytes. Empty input yields ``b""``.

    Raises:
        MalformedLengthError: If the (stripped) length is not a positive
            multiple of 4.
        InvalidSymbolError: If a character is in neither alphabet, or a pad
            symbol appears outside the last two positions.
    """
    raw = _as_symbols(encoded)
    if not raw:
        return b""

    if strip_linebreaks:
        raw = raw.translate(None, _LINE_BREAKS)

    length = len(raw)
    if length == 0 or length % 4:
        raise MalformedLengthError(length)

    out = bytearray(length // 4 * 3)
    written = 0
    last = length - 4

    for pos in range(0, last, 4):
        chunk = _quad(raw, pos)
        out[written] = chunk >> 16
        out[written + 1] = chunk >> 8 & 0xFF
        out[written + 2] = chunk & 0xFF
        written += 3

    # Final quad may carry one or two pad symbols of either variant.
    if raw[last + 2] in _PADS:
        if raw[last + 3] not in _PADS:
            raise InvalidSymbolError(chr(raw[last + 3]), last + 3)
        chunk = _index(raw, last) << 6 | _index(raw, last + 1)
        out[written] = chunk >> 4 & 0xFF
        written += 1
    elif raw[last + 3] in _PADS:
        chunk = (
            _index(raw, last) << 12
            | _index(raw, last + 1) << 6
            | _index(raw, last + 2)
        )
        out[written] = chunk >> 10 & 0xFF
        out[written + 1] = chunk >> 2 & 0xFF
        written += 2
    else:
        chunk = _quad(raw, last)
        out[written] = chunk >> 16
        out[written + 1] = chunk >> 8 & 0xFF
        out[written + 2] = chunk & 0xFF
        written += 3

    return bytes(out[:written])


def encode_str(text: str, encoding: str = "utf-8", url_safe: bool = False) -> str:
    """Encode a text string to base64."""
    return encode(text.encode(encoding), url_safe=url_safe)


def decode_str(
    encoded: Union[str, BytesLike],
    encoding: str = "utf-8",
    strip_linebreaks: bool = False,
) -> str:
    """Decode base64 text to a string."""
    return decode(encoded, strip_linebreaks=strip_linebreaks).decode(encoding)
