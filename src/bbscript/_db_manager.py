import os
from pathlib import Path

DB_FOLDER = "static_db"
DB_EXT = ".json"
DB_DIR_ENV = "BBSCRIPT_DB_DIR"


def _db_dir(db_dir=None) -> Path:
    if db_dir:
        return Path(db_dir)
    base = os.environ.get(DB_DIR_ENV) or DB_FOLDER
    return Path(base)


def db_path(game: str, db_dir=None) -> Path:
    return _db_dir(db_dir) / f"{game}{DB_EXT}"


def available_games(db_dir=None):
    d = _db_dir(db_dir)
    if not d.is_dir():
        return []
    return sorted(p.stem for p in d.iterdir() if p.is_file() and p.suffix == DB_EXT)
