__version__ = "0.1.0"

from ._db_manager import available_games, db_path
from .args import Arg, decode_args
from .command_db import (
    BEGIN,
    BEGIN_JUMP_ENTRY,
    CODE_BLOCKS,
    END,
    NO_BLOCK,
    Function,
    GameDB,
)
from .errors import (
    BBScriptError,
    DBFormatError,
    GameDBNotFound,
    NoAssociatedValue,
    UnknownFunction,
)
from .named_values import NamedValues

__all__ = [
    "Arg",
    "BBScriptError",
    "BEGIN",
    "BEGIN_JUMP_ENTRY",
    "CODE_BLOCKS",
    "DBFormatError",
    "END",
    "Function",
    "GameDB",
    "GameDBNotFound",
    "NO_BLOCK",
    "NamedValues",
    "NoAssociatedValue",
    "UnknownFunction",
    "available_games",
    "db_path",
    "decode_args",
]
