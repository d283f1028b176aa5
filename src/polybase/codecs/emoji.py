'''
base256emoji: every byte value maps to exactly one emoji and back.
'''

from ..alphabet import Alphabet
from ..config import Mode
from ..exceptions import InvalidSymbol
from . import text_of

__all__ = ('VARIATION_SELECTOR', 'encode', 'decode')

VARIATION_SELECTOR = '\ufe0f'
'''Emoji presentation selector, appended by some renderers.'''

def encode(alphabet: Alphabet, bs: bytes) -> str:
    digits = alphabet.digits
    return ''.join(digits[b] for b in bs)

def decode(alphabet: Alphabet, s: str|bytes, mode: Mode='strict') -> bytes:
    """
    Decodes emoji text, or its raw UTF-8 bytes, back into bytes. Raw input
    which ends inside a symbol raises `TruncatedSymbol`.
    """
    s = text_of(s)
    table = alphabet.table(mode)
    out = bytearray()
    for i, symbol in enumerate(s):
        if symbol == VARIATION_SELECTOR and mode == 'permissive':
            continue
        try: out.append(table[symbol])
        except KeyError:
            raise InvalidSymbol(symbol, i, 'base256emoji') from None
    return bytes(out)
