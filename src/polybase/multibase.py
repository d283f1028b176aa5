'''
Multibase codecs for encoding and decoding data in various formats. Each
encoded string starts with a single character tag naming its base, so it
can be decoded without knowing the encoding in advance.
'''

from dataclasses import dataclass
import logging
from types import MappingProxyType
from typing import Literal, Mapping, NamedTuple, Optional, cast

from . import alphabet as _abc
from .alphabet import Alphabet
from .codecs import base45 as _base45, bitpack, emoji, identity as _identity, radix, text_of
from .config import Mode, MultibaseConfig, STRICT, PERMISSIVE
from .exceptions import MultibaseError, ReservedTag, UnknownEncoding, UnknownTag

__all__ = (
    'Base', 'CodecKind', 'Decoded', 'Encoding',
    'ENCODINGS', 'CODES', 'RESERVED',
    'codec', 'codec_of', 'is_encoded', 'encode', 'decode',
    'encode_identity', 'decode_identity',
    'identity', 'base2', 'base8', 'base10', 'base16', 'base16upper',
    'base32hex', 'base32hexupper', 'base32hexpad', 'base32hexpadupper',
    'base32', 'base32upper', 'base32pad', 'base32padupper', 'base32z',
    'base36', 'base36upper', 'base45', 'base58', 'base58btc', 'base58flickr',
    'base64', 'base64pad', 'base64url', 'base64urlpad', 'base256emoji'
)

logger = logging.getLogger(__name__)

type CodecKind = Literal['identity', 'bitpack', 'radix', 'base45', 'emoji']
'''Conversion algorithm behind a multibase.'''

@dataclass(frozen=True, repr=False)
class Base:
    """A multibase: its name, its tag and how the body is converted."""
    name: str
    code: str
    kind: CodecKind
    alphabet: Optional[Alphabet] = None

    def __post_init__(self):
        assert len(self.code) == 1, 'code must be a single character'
        if self.kind != 'identity' and self.alphabet is None:
            raise ValueError(f'{self.name} requires an alphabet')

    def __call__(self, x: bytes, /) -> str:
        """Encodes the given bytes into an untagged string."""
        return self.encode(x)

    def encode(self, x: bytes, /) -> str:
        """Encodes the given bytes into an untagged string."""
        abc = cast(Alphabet, self.alphabet)
        match self.kind:
            case 'identity': return _identity.encode(x)
            case 'bitpack': return bitpack.encode(abc, x)
            case 'radix': return radix.encode(abc, x)
            case 'base45': return _base45.encode(abc, x)
            case 'emoji': return emoji.encode(abc, x)

            case _: raise TypeError(
                f"{self.name} has unsupported codec kind {self.kind!r}"
            )

    def decode(self, x: str|bytes, /, mode: Mode='strict') -> bytes:
        """Decodes an untagged string (or its UTF-8 bytes) back into bytes."""
        abc = cast(Alphabet, self.alphabet)
        match self.kind:
            case 'identity':
                if isinstance(x, str):
                    return _identity.decode(x, mode)
                return bytes(x)
            # Raw bytes are split into symbols by the codec itself
            case 'emoji': return emoji.decode(abc, x, mode)

            case 'bitpack': return bitpack.decode(abc, text_of(x), mode)
            case 'radix': return radix.decode(abc, text_of(x), mode)
            case 'base45': return _base45.decode(abc, text_of(x), mode)

            case _: raise TypeError(
                f"{self.name} has unsupported codec kind {self.kind!r}"
            )

    def __repr__(self):
        return f"multibase.{self.name}"

class Decoded(NamedTuple):
    base: Base
    data: bytes

identity = Base('identity', '\0', 'identity')
base2 = Base('base2', '0', 'bitpack', _abc.BASE2)
base8 = Base('base8', '7', 'bitpack', _abc.BASE8)
base10 = Base('base10', '9', 'radix', _abc.BASE10)
base16 = Base('base16', 'f', 'bitpack', _abc.BASE16)
base16upper = Base('base16upper', 'F', 'bitpack', _abc.BASE16_UPPER)
base32hex = Base('base32hex', 'v', 'bitpack', _abc.BASE32HEX)
base32hexupper = Base('base32hexupper', 'V', 'bitpack', _abc.BASE32HEX_UPPER)
base32hexpad = Base('base32hexpad', 't', 'bitpack', _abc.BASE32HEX_PAD)
base32hexpadupper = Base('base32hexpadupper', 'T', 'bitpack', _abc.BASE32HEX_PAD_UPPER)
base32 = Base('base32', 'b', 'bitpack', _abc.BASE32)
base32upper = Base('base32upper', 'B', 'bitpack', _abc.BASE32_UPPER)
base32pad = Base('base32pad', 'c', 'bitpack', _abc.BASE32_PAD)
base32padupper = Base('base32padupper', 'C', 'bitpack', _abc.BASE32_PAD_UPPER)
base32z = Base('base32z', 'h', 'bitpack', _abc.BASE32Z)
base36 = Base('base36', 'k', 'radix', _abc.BASE36)
base36upper = Base('base36upper', 'K', 'radix', _abc.BASE36_UPPER)
base45 = Base('base45', 'R', 'base45', _abc.BASE45)
base58btc = Base('base58btc', 'z', 'radix', _abc.BASE58_BTC)
base58flickr = Base('base58flickr', 'Z', 'radix', _abc.BASE58_FLICKR)
base64 = Base('base64', 'm', 'bitpack', _abc.BASE64)
base64pad = Base('base64pad', 'M', 'bitpack', _abc.BASE64_PAD)
base64url = Base('base64url', 'u', 'bitpack', _abc.BASE64URL)
base64urlpad = Base('base64urlpad', 'U', 'bitpack', _abc.BASE64URL_PAD)
base256emoji = Base('base256emoji', '🚀', 'emoji', _abc.BASE256_EMOJI)

# Aliases
base58 = base58btc
ALIASES: Mapping[str, Base] = MappingProxyType({'base58': base58btc})

RESERVED: Mapping[str, str] = MappingProxyType({
    # libp2p peer ids are base58btc encoded without a multibase tag
    '1': 'libp2p peer ids',
    # CIDv0 begins with Qm, is base58btc encoded and has no multibase tag
    'Q': 'CIDv0',
    # Avoids conflict with URIs
    '/': 'paths',
})
'''Tags which are taken but have no codec behind them.'''

def _registry(*bases: Base) -> tuple[Mapping[str, Base], Mapping[str, Base]]:
    names: dict[str, Base] = {}
    codes: dict[str, Base] = {}
    for base in bases:
        if base.name in names:
            raise ValueError(f'duplicate multibase name {base.name!r}')
        if other := codes.get(base.code):
            raise ValueError(
                f'{base.name} and {other.name} share multibase tag {base.code!r}'
            )
        if base.code in RESERVED:
            raise ValueError(f'{base.name} uses reserved tag {base.code!r}')
        names[base.name] = base
        codes[base.code] = base
    return MappingProxyType(names), MappingProxyType(codes)

ENCODINGS, CODES = _registry(
    identity, base2, base8, base10,
    base16, base16upper,
    base32hex, base32hexupper, base32hexpad, base32hexpadupper,
    base32, base32upper, base32pad, base32padupper, base32z,
    base36, base36upper,
    base45,
    base58btc, base58flickr,
    base64, base64pad, base64url, base64urlpad,
    base256emoji
)

type Encoding = Literal[
    'identity', 'base2', 'base8', 'base10', 'base16', 'base16upper',
    'base32hex', 'base32hexupper', 'base32hexpad', 'base32hexpadupper',
    'base32', 'base32upper', 'base32pad', 'base32padupper', 'base32z',
    'base36', 'base36upper', 'base45', 'base58', 'base58btc', 'base58flickr',
    'base64', 'base64pad', 'base64url', 'base64urlpad', 'base256emoji'
]
'''Valid multibase encodings.'''

def codec(name: Encoding|str) -> Base:
    """Returns the codec with the given name."""
    if enc := ENCODINGS.get(name) or ALIASES.get(name):
        return enc
    raise UnknownEncoding(name)

def _split(data: str|bytes) -> tuple[str, str|bytes]:
    """Splits the tag from the body."""
    if isinstance(data, str):
        return data[:1], data[1:]

    # Raw identity bodies need not be UTF-8
    if data[:1] == b'\0':
        return '\0', data[1:]
    # The tag is the first UTF-8 sequence, at most 4 bytes
    for n in range(1, 5):
        try: return data[:n].decode('utf-8'), data[n:]
        except UnicodeDecodeError:
            continue
    raise UnknownTag(data)

def _lookup(tag: str, data: str|bytes) -> Base:
    if base := CODES.get(tag):
        return base
    if reserved := RESERVED.get(tag):
        raise ReservedTag(data, reserved)
    raise UnknownTag(data)

def codec_of(data: str|bytes) -> Base:
    """Returns the codec used to encode the given data"""
    return _lookup(_split(data)[0], data)

def is_encoded(data: str|bytes) -> bool:
    """Checks if the given data starts with a known multibase tag."""
    try: codec_of(data)
    except UnknownTag:
        return False
    return True

def encode_identity(data: bytes) -> bytes:
    """Encodes data using the binary identity encoding."""
    return b'\0' + data

def decode_identity(data: bytes) -> bytes:
    """Decodes data that was encoded using the binary identity encoding."""
    if data[:1] != b'\0':
        raise UnknownTag(data, 'Data is not encoded with identity encoding.')
    return data[1:]

def encode(encoding: Encoding|Base, data: bytes) -> str:
    """Encodes the given data using the encoding that is specified."""
    enc = codec(encoding) if isinstance(encoding, str) else encoding
    return enc.code + enc.encode(data)

def _config(mode: Mode|MultibaseConfig) -> MultibaseConfig:
    match mode:
        case MultibaseConfig(): return mode
        case 'strict': return STRICT
        case 'permissive': return PERMISSIVE

        case _: raise ValueError(
            f"Unknown decode mode {mode!r}, expected 'strict' or 'permissive'"
        )

def decode(data: str|bytes, mode: Mode|MultibaseConfig='strict') -> Decoded:
    """Decode the multibase-encoded data, returning its base and bytes."""
    config = _config(mode)
    tag, body = _split(data)
    base = _lookup(tag, data)
    logger.debug("Decoding %d symbols as %s (%s)", len(body), base.name, config.mode)

    try:
        return Decoded(base, base.decode(body, config.mode))
    except MultibaseError as e:
        if config.mode == 'permissive' or not config.fallback:
            raise
        logger.debug("Strict %s decode failed, retrying permissive: %s", base.name, e)

    return Decoded(base, base.decode(body, 'permissive'))
