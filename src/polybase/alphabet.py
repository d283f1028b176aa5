'''
Symbol tables for the multibase alphabets.
'''

from dataclasses import dataclass, replace
from functools import cached_property
from types import MappingProxyType
from typing import Mapping

from .config import Mode

__all__ = (
    'Alphabet',
    'BASE2', 'BASE8', 'BASE10', 'BASE16', 'BASE16_UPPER',
    'BASE32HEX', 'BASE32HEX_UPPER', 'BASE32HEX_PAD', 'BASE32HEX_PAD_UPPER',
    'BASE32', 'BASE32_UPPER', 'BASE32_PAD', 'BASE32_PAD_UPPER', 'BASE32Z',
    'BASE36', 'BASE36_UPPER', 'BASE45', 'BASE58_BTC', 'BASE58_FLICKR',
    'BASE64', 'BASE64_PAD', 'BASE64URL', 'BASE64URL_PAD', 'BASE256_EMOJI'
)

@dataclass(frozen=True)
class Alphabet:
    """
    Ordered digit symbols of a base. The digit value of a symbol is its
    index in `digits`. `padding` is either empty or the single symbol used
    to fill out a block. With `casefold`, permissive lookups also accept the
    other case of every letter digit.
    """
    digits: str
    padding: str = ''
    casefold: bool = False

    def __post_init__(self):
        if len(self.digits) < 2:
            raise ValueError(f'alphabet needs at least 2 digits, got {self.digits!r}')
        if len(set(self.digits)) != len(self.digits):
            dups = sorted({d for d in self.digits if self.digits.count(d) > 1})
            raise ValueError(f'duplicate digits in alphabet: {dups}')
        if len(self.padding) > 1:
            raise ValueError(f'padding must be a single symbol, got {self.padding!r}')
        if self.padding and self.padding in self.digits:
            raise ValueError(f'padding {self.padding!r} is also a digit')
        if self.casefold:
            for d in self.digits:
                alt = d.swapcase()
                if alt != d and alt in self.digits:
                    raise ValueError(
                        f'cannot casefold alphabet with both {d!r} and {alt!r}'
                    )

    def __len__(self):
        return len(self.digits)

    @property
    def base(self) -> int:
        return len(self.digits)

    @property
    def zero(self) -> str:
        """Symbol for digit value 0."""
        return self.digits[0]

    @property
    def bits(self) -> int:
        """Bits per symbol, only meaningful for power-of-two bases."""
        base = len(self.digits)
        if base & (base - 1):
            raise ValueError(f'base {base} is not a power of two')
        return base.bit_length() - 1

    @cached_property
    def translation(self) -> Mapping[str, str]:
        """Alternate-case symbol -> canonical symbol."""
        if not self.casefold:
            return MappingProxyType({})
        return MappingProxyType({
            alt: d for d in self.digits if (alt := d.swapcase()) != d
        })

    @cached_property
    def _strict(self) -> Mapping[str, int]:
        return MappingProxyType({d: i for i, d in enumerate(self.digits)})

    @cached_property
    def _permissive(self) -> Mapping[str, int]:
        table = dict(self._strict)
        for alt, d in self.translation.items():
            table[alt] = table[d]
        return MappingProxyType(table)

    def table(self, mode: Mode='strict') -> Mapping[str, int]:
        """Symbol -> digit value lookup for the given decode mode."""
        return self._permissive if mode == 'permissive' else self._strict

    def upper(self) -> 'Alphabet':
        """Returns the alphabet with uppercase digits."""
        return replace(self, digits=self.digits.upper())

    def padded(self, padding: str) -> 'Alphabet':
        """Returns the alphabet with the given padding symbol."""
        return replace(self, padding=padding)

_b16 = '0123456789abcdef'
_b10 = _b16[:10]
_abc = 'abcdefghijklmnopqrstuvwxyz'
_ABC = _abc.upper()
_b58 = 'abcdefghijkmnopqrstuvwxyz'
_B58 = 'ABCDEFGHJKLMNPQRSTUVWXYZ'
_b64 = _ABC + _abc + _b10

BASE2 = Alphabet('01')
BASE8 = Alphabet(_b10[:8])
BASE10 = Alphabet(_b10)

BASE16 = Alphabet(_b16, casefold=True)
BASE16_UPPER = BASE16.upper()

BASE32HEX = Alphabet(_b10 + _abc[:22], casefold=True)
BASE32HEX_UPPER = BASE32HEX.upper()
BASE32HEX_PAD = BASE32HEX.padded('=')
BASE32HEX_PAD_UPPER = BASE32HEX_PAD.upper()

BASE32 = Alphabet(_abc + _b10[2:8], casefold=True)
BASE32_UPPER = BASE32.upper()
BASE32_PAD = BASE32.padded('=')
BASE32_PAD_UPPER = BASE32_PAD.upper()

# z-base-32 as used by Tahoe-LAFS, case-sensitive
BASE32Z = Alphabet('ybndrfg8ejkmcpqxot1uwisza345h769')

BASE36 = Alphabet(_b10 + _abc, casefold=True)
BASE36_UPPER = BASE36.upper()

# RFC 9285
BASE45 = Alphabet(f"{_b10}{_ABC} $%*+-./:", casefold=True)

BASE58_BTC = Alphabet(_b10[1:] + _B58 + _b58)
BASE58_FLICKR = Alphabet(_b10[1:] + _b58 + _B58)

BASE64 = Alphabet(f'{_b64}+/')
BASE64_PAD = BASE64.padded('=')
BASE64URL = Alphabet(f'{_b64}-_')
BASE64URL_PAD = BASE64URL.padded('=')

BASE256_EMOJI = Alphabet(
    '🚀🪐☄🛰🌌🌑🌒🌓🌔🌕🌖🌗🌘🌍🌏🌎🐉☀💻🖥💾💿😂❤😍🤣😊🙏💕😭😘👍'
    '😅👏😁🔥🥰💔💖💙😢🤔😆🙄💪😉☺👌🤗💜😔😎😇🌹🤦🎉💞✌✨🤷😱😌🌸🙌'
    '😋💗💚😏💛🙂💓🤩😄😀🖤😃💯🙈👇🎶😒🤭❣😜💋👀😪😑💥🙋😞😩😡🤪👊🥳'
    '😥🤤👉💃😳✋😚😝😴🌟😬🙃🍀🌷😻😓⭐✅🥺🌈😈🤘💦✔😣🏃💐☹🎊💘😠☝'
    '😕🌺🎂🌻😐🖕💝🙊😹🗣💫💀👑🎵🤞😛🔴😤🌼😫⚽🤙☕🏆🤫👈😮🙆🍻🍃🐶💁'
    '😲🌿🧡🎁⚡🌞🎈❌✊👋😰🤨😶🤝🚶💰🍓💢🤟🙁🚨💨🤬✈🎀🍺🤓😙💟🌱😖👶'
    '🥴▶➡❓💎💸⬇😨🌚🦋😷🕺⚠🙅😟😵👎🤲🤠🤧📌🔵💅🧐🐾🍒😗🤑🌊🤯🐷☎'
    '💧😯💆👆🎤🙇🍑❄🌴💣🐸💌📍🥀🤢👅💡💩👐📸👻🤐🤮🎼🥵🚩🍎🍊👼💍📣🥂'
)
