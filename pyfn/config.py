import os


__all__ = ['Config']


def _env_flag(name):
    return os.environ.get(name, "").strip().lower() not in ("", "0", "false", "no")


def _env_int(name, default):
    # unparseable values fall back to the default
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        return default


class Config(object):

    TRACE = _env_flag("PYFN_TRACE")
    TRACE_MAXLEN = _env_int("PYFN_TRACE_MAXLEN", 40)
