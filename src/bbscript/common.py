import sys

U32_MAX = 0xFFFFFFFF
I32_MIN = -0x80000000
I32_MAX = 0x7FFFFFFF


def eprint(msg: str, errors: str = "backslashreplace") -> None:
    try:
        sys.stderr.write(msg + "\n")
        sys.stderr.flush()
    except UnicodeEncodeError:
        sys.stderr.buffer.write((msg + "\n").encode("utf-8", errors=errors))
        sys.stderr.flush()


def hx(x):
    try:
        v = int(x)
    except (TypeError, ValueError):
        return "-"
    if v < 0:
        return "-"
    if v <= 0xFFFFFFFF:
        return f"0x{v:08X}"
    return f"0x{v:X}"


def is_u32(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= U32_MAX


def is_i32(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and I32_MIN <= v <= I32_MAX


def parse_int(s: str):
    t = str(s or "").strip()
    if not t:
        return None
    try:
        if t.lower().startswith(("0x", "-0x")):
            return int(t, 16)
        return int(t, 10)
    except ValueError:
        return None
