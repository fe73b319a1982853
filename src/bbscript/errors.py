class BBScriptError(Exception):
    pass


class GameDBNotFound(BBScriptError, FileNotFoundError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(self.path)

    def __str__(self):
        return f"game database not found: {self.path}"


class DBFormatError(BBScriptError, ValueError):
    pass


class UnknownFunction(BBScriptError, KeyError):
    def __init__(self, key):
        if isinstance(key, int) and key >= 0:
            key = f"0x{key:X}"
        self.key = str(key)
        super().__init__(self.key)

    def __str__(self):
        return f"unknown function: {self.key}"


class NoAssociatedValue(BBScriptError, KeyError):
    def __init__(self, slot: int, name: str):
        self.slot = int(slot)
        self.name = str(name)
        super().__init__(self.slot, self.name)

    def __str__(self):
        return f"no value associated with name {self.name!r} for arg {self.slot}"
