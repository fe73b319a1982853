from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ._db_manager import db_path
from .args import Arg, args_size, decode_args
from .common import is_i32, is_u32
from .errors import DBFormatError, GameDBNotFound, UnknownFunction
from .named_values import NamedValues

BEGIN = "Begin"
BEGIN_JUMP_ENTRY = "BeginJumpEntry"
END = "End"
NO_BLOCK = "NoBlock"

CODE_BLOCKS = (BEGIN, BEGIN_JUMP_ENTRY, END, NO_BLOCK)


@dataclass(frozen=True)
class Function:
    id: int
    size: int
    args: str
    name: str
    code_block: str = NO_BLOCK
    named_values: NamedValues = field(default_factory=NamedValues, compare=False)

    def get_value(self, slot: int, name: str) -> int:
        return self.named_values.get_value(slot, name)

    def get_name(self, slot: int, value: int) -> Optional[str]:
        return self.named_values.get_name(slot, value)

    def get_args(self) -> Tuple[Arg, ...]:
        return decode_args(self.args, self.size)

    def args_size(self) -> int:
        return args_size(self.get_args())

    def instruction_name(self) -> str:
        if self.name:
            return self.name
        return f"Unknown{self.id}"

    def is_jump_entry(self) -> bool:
        return self.code_block == BEGIN_JUMP_ENTRY

    def check_named_values(self) -> List[int]:
        n = len(self.get_args())
        return [s for s in self.named_values.slots() if s >= n]


def _field(obj, key, idx, check, what):
    if key not in obj:
        raise DBFormatError(f"functions[{idx}]: missing field {key!r}")
    v = obj[key]
    if not check(v):
        raise DBFormatError(f"functions[{idx}].{key}: expected {what}, got {v!r}")
    return v


def _parse_named_values(raw, idx) -> NamedValues:
    where = f"functions[{idx}].namedValues"
    if not isinstance(raw, list):
        raise DBFormatError(f"{where}: expected a list of pairs")
    pairs = []
    for j, it in enumerate(raw):
        try:
            (slot, value), (slot2, name) = it
        except (TypeError, ValueError):
            raise DBFormatError(
                f"{where}[{j}]: expected [[slot, value], [slot, name]], got {it!r}"
            ) from None
        if not is_u32(slot) or not is_u32(slot2):
            raise DBFormatError(f"{where}[{j}]: bad slot {slot!r}/{slot2!r}")
        if slot != slot2:
            raise DBFormatError(f"{where}[{j}]: slot mismatch {slot} != {slot2}")
        if not is_i32(value):
            raise DBFormatError(f"{where}[{j}]: value out of i32 range: {value!r}")
        if not isinstance(name, str):
            raise DBFormatError(f"{where}[{j}]: name must be a string, got {name!r}")
        pairs.append((slot, value, name))
    try:
        return NamedValues(pairs)
    except ValueError as e:
        raise DBFormatError(f"{where}: {e}") from None


def _parse_function(obj, idx) -> Function:
    if not isinstance(obj, dict):
        raise DBFormatError(f"functions[{idx}]: expected an object, got {obj!r}")
    fid = _field(obj, "id", idx, is_u32, "u32")
    size = _field(obj, "size", idx, is_u32, "u32")
    args = _field(obj, "args", idx, lambda v: isinstance(v, str), "string")
    name = _field(obj, "name", idx, lambda v: isinstance(v, str), "string")
    block = _field(obj, "codeBlock", idx, lambda v: v in CODE_BLOCKS, "|".join(CODE_BLOCKS))
    nv = _parse_named_values(obj.get("namedValues", []), idx)
    return Function(fid, size, args, name, block, nv)


class GameDB:
    def __init__(self, functions=(), game: str = ""):
        self.game = str(game or "")
        self._functions: Tuple[Function, ...] = tuple(functions)

    @classmethod
    def load(cls, game: str, db_dir=None) -> "GameDB":
        path = db_path(game, db_dir)
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError:
            raise GameDBNotFound(path) from None
        return cls.from_json(data, game=game)

    @classmethod
    def from_json(cls, text, game: str = "") -> "GameDB":
        try:
            obj = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DBFormatError(f"invalid JSON: {e}") from e
        return cls.from_dict(obj, game=game)

    @classmethod
    def from_dict(cls, obj, game: str = "") -> "GameDB":
        if not isinstance(obj, dict) or "functions" not in obj:
            raise DBFormatError("expected an object with a 'functions' list")
        funcs = obj["functions"]
        if not isinstance(funcs, list):
            raise DBFormatError("'functions' must be a list")
        return cls((_parse_function(o, i) for i, o in enumerate(funcs)), game=game)

    def find_by_id(self, id_in: int) -> Function:
        for func in self._functions:
            if func.id == id_in:
                return func
        raise UnknownFunction(int(id_in))

    def find_by_name(self, name_in: str) -> Function:
        for func in self._functions:
            if func.name == name_in:
                return func
        raise UnknownFunction(str(name_in))

    def duplicate_ids(self) -> List[int]:
        c = Counter(f.id for f in self._functions)
        return sorted(k for k, v in c.items() if v > 1)

    def __len__(self):
        return len(self._functions)

    def __iter__(self):
        return iter(self._functions)

    def __repr__(self):
        return f"GameDB(game={self.game!r}, functions={len(self._functions)})"
