import os
import sys

from ._db_manager import available_games, db_path
from .command_db import GameDB
from .common import eprint, hx, is_u32, parse_int
from .errors import BBScriptError


def _prog():
    p = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "bbscript-db"
    return p or "bbscript-db"


def _get_version() -> str:
    try:
        from importlib.metadata import PackageNotFoundError, version as _pkg_version

        return _pkg_version("bbscript-db")
    except PackageNotFoundError:
        from . import __version__ as _v

        return str(_v)


def _print_version(out=None) -> None:
    if out is None:
        out = sys.stdout
    out.write(f"{_prog()} {_get_version()}\n")


def _usage(out=None):
    if out is None:
        out = sys.stderr
    p = _prog()
    out.write(f"{p} {_get_version()}\n")
    out.write(f"usage: {p} [-h] [-V|--version] [--db-dir DIR] (-l|-d|-f|-a) [args]\n")
    out.write("\n")
    out.write("Options:\n")
    out.write("  -V, --version   Show version and exit\n")
    out.write("  --db-dir DIR    Database folder (default: $BBSCRIPT_DB_DIR or static_db)\n")
    out.write("\n")
    out.write("Modes:\n")
    out.write(f"  {p} -l                     List available games\n")
    out.write(f"  {p} -d <game>              Dump every instruction\n")
    out.write(f"  {p} -f <game> <id|name>    Show one instruction (id: decimal or 0x hex)\n")
    out.write(f"  {p} -a <game>              Report database anomalies\n")


def _usage_short(out=None):
    if out is None:
        out = sys.stderr
    p = _prog()
    out.write(f"usage: {p} [-h] [-V|--version] [--db-dir DIR] (-l|-d|-f|-a) [args]\n")
    out.write(f"Try '{p} --help' for more information.\n")


def _consume_db_dir(argv):
    db_dir = None
    out = []
    it = iter(argv)
    for a in it:
        if a == "--db-dir":
            db_dir = next(it, None)
        elif a.startswith("--db-dir="):
            db_dir = a.split("=", 1)[1]
        else:
            out.append(a)
            continue
        if not db_dir or db_dir.startswith("-"):
            return None, None
    return out, db_dir


def _fmt_args(func) -> str:
    return "(" + ", ".join(str(a) for a in func.get_args()) + ")"


def _fmt_line(func) -> str:
    return "%s size=%d %s %s%s" % (
        hx(func.id),
        func.size,
        func.code_block,
        func.instruction_name(),
        _fmt_args(func),
    )


def _list(db_dir) -> int:
    for g in available_games(db_dir):
        print(g)
    return 0


def _dump(db: GameDB) -> int:
    print(f"==== {db.game} ({len(db)} functions) ====")
    for func in db:
        print(_fmt_line(func))
    return 0


def _find(db: GameDB, key: str) -> int:
    fid = parse_int(key)
    if is_u32(fid):
        func = db.find_by_id(fid)
    else:
        func = db.find_by_name(key)
    print(_fmt_line(func))
    print("args_size: %d" % func.args_size())
    if func.is_jump_entry():
        print("jump_entry: yes")
    for slot, value, name in sorted(func.named_values):
        print("  arg%d: %d = %s" % (slot, value, name))
    return 0


def _analyze(db: GameDB) -> int:
    found = 0
    for fid in db.duplicate_ids():
        print("duplicate id: %s (first declaration wins)" % hx(fid))
        found += 1
    for func in db:
        label = "%s %s" % (hx(func.id), func.instruction_name())
        if func.size < 4:
            print("%s: size %d smaller than header" % (label, func.size))
            found += 1
        bad = func.check_named_values()
        if bad:
            print("%s: named values on missing args %s" % (label, bad))
            found += 1
        args = func.get_args()
        if args and args[-1].is_unknown:
            print("%s: %d untyped trailing bytes" % (label, args[-1].size))
            found += 1
    if not found:
        print("No anomalies found.")
    return 0


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    argv, db_dir = _consume_db_dir(list(argv))
    if argv is None:
        eprint(f"{_prog()}: --db-dir requires a value")
        return 2
    if argv and argv[0] in ("-V", "--version", "version"):
        _print_version()
        return 0
    if not argv:
        _usage_short()
        return 0
    if argv[0] in ("-h", "--help", "help"):
        _usage()
        return 0
    mode = argv[0]
    rest = argv[1:]

    if mode in ("-l", "--list"):
        return _list(db_dir)

    if mode in ("-d", "--dump", "-f", "--find", "-a", "--analyze"):
        need = 2 if mode in ("-f", "--find") else 1
        if len(rest) != need:
            _usage_short()
            return 2
        try:
            db = GameDB.load(rest[0], db_dir)
            if mode in ("-d", "--dump"):
                return _dump(db)
            if mode in ("-f", "--find"):
                return _find(db, rest[1])
            return _analyze(db)
        except BBScriptError as e:
            eprint(f"{_prog()}: error: {e}")
            if not os.path.isfile(db_path(rest[0], db_dir)):
                games = available_games(db_dir)
                if games:
                    eprint("available games: " + ", ".join(games))
            return 1

    eprint(f"{_prog()}: unknown mode: {mode}")
    _usage_short()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
