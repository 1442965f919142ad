import os

_ENV_VAR = "STRUCTMAT_CHECK"
_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")

_current_check = False


def set_check_default(flag: bool) -> None:
    """Set whether constructors validate their input when called with ``check=None``."""
    global _current_check
    _current_check = bool(flag)
    os.environ[_ENV_VAR] = "1" if _current_check else "0"


def get_check_default() -> bool:
    # If user set env externally, honor it
    env = os.environ.get(_ENV_VAR)
    if env:
        value = env.strip().lower()
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
    return _current_check
