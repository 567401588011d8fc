class KeylagError(Exception):
    pass


class ScriptError(KeylagError):
    pass
