'''
Conversion algorithms behind the multibase registry. Every codec module
exposes `encode(alphabet, data) -> str` and `decode(alphabet, text, mode)
-> bytes` over an untagged body.
'''

from ..exceptions import InvalidSymbol, TruncatedSymbol

__all__ = ('text_of',)

def text_of(data: str|bytes) -> str:
    """Returns `data` as text, decoding raw UTF-8 bytes."""
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode('utf-8')
    except UnicodeDecodeError as e:
        if e.reason == 'unexpected end of data':
            raise TruncatedSymbol(e.start, bytes(data[e.start:])) from None
        raise InvalidSymbol(bytes(data[e.start:e.end]), e.start) from None
