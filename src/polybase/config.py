'''
Decoding policy for multibase strings.
'''

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

__all__ = ('Mode', 'MultibaseConfig', 'STRICT', 'PERMISSIVE')

type Mode = Literal['strict', 'permissive']
'''Strict decoding requires canonical case, padding and trailing bits.'''

class MultibaseConfig(BaseModel):
    '''Configuration for decoding multibase strings.'''
    model_config = ConfigDict(frozen=True)

    mode: Annotated[
        Mode,
        Field(description="Decode mode used for every codec. `permissive` accepts alternate case, non-canonical padding and non-zero trailing bits.")
    ] = 'strict'
    fallback: Annotated[
        bool,
        Field(description="If a strict decode fails, retry once in permissive mode. Ignored when `mode` is already `permissive`.")
    ] = False

STRICT = MultibaseConfig()
PERMISSIVE = MultibaseConfig(mode='permissive')
