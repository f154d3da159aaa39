"""b64codec - Base64 encoding and decoding (RFC 4648).

Standard and URL-safe alphabets, PEM/MIME line-wrapped output, and
alphabet-tolerant strict decoding. Provides a CLI tool and importable library.
"""

__version__ = "0.1.0"

from b64codec.errors import (  # noqa: F401
    DecodeError,
    InvalidSymbolError,
    MalformedLengthError,
)
from b64codec.codec import (  # noqa: F401
    MIME_LINE_LENGTH,
    PEM_LINE_LENGTH,
    STANDARD_ALPHABET,
    STANDARD_PAD,
    URL_SAFE_ALPHABET,
    URL_SAFE_PAD,
    decode,
    decode_str,
    encode,
    encode_mime,
    encode_pem,
    encode_str,
    encode_wrapped,
    insert_linebreaks,
)
from b64codec.cli import main  # noqa: F401
