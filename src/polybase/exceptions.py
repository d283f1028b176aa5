from typing import Optional

class MultibaseError(ValueError):
    """Base class for all multibase encoding and decoding errors."""

class UnknownTag(MultibaseError, LookupError):
    """Multibase string does not start with a registered tag."""

    def __init__(self, string: str|bytes, message: Optional[str]=None):
        if message is None:
            if string:
                message = f"Unknown multibase tag {string[:1]!r}"
            else:
                message = "Cannot determine multibase of empty input"
        super().__init__(message)
        self.string = string

class ReservedTag(UnknownTag):
    """Multibase tag is reserved and has no codec behind it."""

    def __init__(self, string: str|bytes, name: str):
        super().__init__(
            string, f"Multibase tag {string[:1]!r} is reserved for {name}"
        )
        self.name = name

class UnknownEncoding(MultibaseError, LookupError):
    """No multibase encoding with the given name."""

    def __init__(self, name: object):
        super().__init__(f"Encoding {name!r} not supported.")
        self.name = name

class InvalidSymbol(MultibaseError):
    """A symbol in the body is not part of the alphabet."""

    def __init__(self, symbol: str|bytes, position: int, encoding: Optional[str]=None):
        where = f" for {encoding}" if encoding else ""
        super().__init__(
            f"Invalid symbol {symbol!r} at position {position}{where}"
        )
        self.symbol = symbol
        self.position = position
        self.encoding = encoding

class InvalidPadding(MultibaseError):
    """Padding length or placement is not canonical."""

    def __init__(self, message: str, expected: Optional[int]=None, actual: Optional[int]=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual

class InvalidLength(MultibaseError):
    """Symbol count cannot be produced by the encoder."""

    def __init__(self, length: int, encoding: Optional[str]=None):
        where = f" for {encoding}" if encoding else ""
        super().__init__(f"Invalid input length {length}{where}")
        self.length = length
        self.encoding = encoding

class TrailingBits(MultibaseError):
    """Discarded bits of the final symbol are non-zero."""

    def __init__(self, bits: int, value: int):
        super().__init__(
            f"Non-zero trailing bits {value:0{bits}b} in final symbol"
        )
        self.bits = bits
        self.value = value

class InvalidGroup(MultibaseError):
    """A symbol group decodes to a value outside the chunk's range."""

    def __init__(self, group: str, value: int, limit: int):
        super().__init__(
            f"Symbol group {group!r} decodes to {value} which exceeds {limit}"
        )
        self.group = group
        self.value = value
        self.limit = limit

class TruncatedSymbol(MultibaseError):
    """Input ends in the middle of a multi-byte symbol."""

    def __init__(self, position: int, partial: bytes):
        super().__init__(
            f"Truncated symbol {partial!r} at byte offset {position}"
        )
        self.position = position
        self.partial = partial

class InvalidEncoding(MultibaseError):
    """Identity input bytes are not valid UTF-8 text."""

    def __init__(self, data: bytes, original: Optional[str]=None):
        super().__init__(
            f"Identity multibase requires UTF-8 text: {original or data!r}"
        )
        self.data = data
        self.original = original
