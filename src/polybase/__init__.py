from .alphabet import Alphabet
from .config import Mode, MultibaseConfig
from .exceptions import (
    MultibaseError, UnknownTag, ReservedTag, UnknownEncoding,
    InvalidSymbol, InvalidPadding, InvalidLength, TrailingBits,
    InvalidGroup, TruncatedSymbol, InvalidEncoding
)
from .multibase import (
    Base, Decoded, Encoding, ENCODINGS, CODES,
    codec, codec_of, is_encoded, encode, decode,
    encode_identity, decode_identity
)
# Per-base constants live in the module, eg `multibase.base58btc`
from . import alphabet, codecs, multibase

__all__ = (
    'Alphabet', 'Mode', 'MultibaseConfig',
    'MultibaseError', 'UnknownTag', 'ReservedTag', 'UnknownEncoding',
    'InvalidSymbol', 'InvalidPadding', 'InvalidLength', 'TrailingBits',
    'InvalidGroup', 'TruncatedSymbol', 'InvalidEncoding',
    'Base', 'Decoded', 'Encoding', 'ENCODINGS', 'CODES',
    'codec', 'codec_of', 'is_encoded', 'encode', 'decode',
    'encode_identity', 'decode_identity',
    'alphabet', 'codecs', 'multibase'
)
