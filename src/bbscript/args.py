from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

HEADER_SIZE = 4

_INT = "Int"
_STRING16 = "String16"
_STRING32 = "String32"
_UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Arg:
    kind: str
    size: int

    INT = None
    STRING16 = None
    STRING32 = None

    @classmethod
    def unknown(cls, size: int) -> "Arg":
        return cls(_UNKNOWN, int(size))

    @property
    def is_unknown(self) -> bool:
        return self.kind == _UNKNOWN

    def __str__(self):
        if self.kind == _UNKNOWN:
            return f"Unknown({self.size})"
        return self.kind


Arg.INT = Arg(_INT, 4)
Arg.STRING16 = Arg(_STRING16, 16)
Arg.STRING32 = Arg(_STRING32, 32)

# 3-byte tokens are tried before the 1-byte one
_TOKENS = (
    (b"16s", Arg.STRING16),
    (b"32s", Arg.STRING32),
    (b"i", Arg.INT),
)


@lru_cache(maxsize=None)
def decode_args(descriptor: str, size: int) -> Tuple[Arg, ...]:
    """Decode an argument descriptor into the operand layout of an instruction.

    Recognized tokens are ``i`` (4 byte int), ``16s`` and ``32s`` (fixed
    strings). Any other byte is skipped. When the typed arguments cover less
    than ``size - 4`` bytes, the rest is reported as one trailing
    ``Unknown(n)`` argument.
    """
    if isinstance(descriptor, str):
        raw = descriptor.encode("utf-8", "surrogatepass")
    else:
        raw = bytes(descriptor)
    out = []
    used = 0
    pos = 0
    n = len(raw)
    while pos < n:
        for tok, arg in _TOKENS:
            if raw.startswith(tok, pos):
                out.append(arg)
                used += arg.size
                pos += len(tok)
                break
        else:
            pos += 1
    size = int(size)
    if size >= HEADER_SIZE and used < size - HEADER_SIZE:
        out.append(Arg.unknown(size - used - HEADER_SIZE))
    return tuple(out)


def args_size(args) -> int:
    return sum(a.size for a in args)
