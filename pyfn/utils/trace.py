import functools
import collections.abc
import types

from colorama import Fore, Style

from pyfn.config import Config


__all__ = ['traced', 'warn', 'preview']


def preview(x, maxlen=None):
    """
    Short, single-line representation of a primitive's input for trace output.

    One-shot iterables are never consumed here, they are shown by kind only.
    """
    if maxlen is None: maxlen = Config.TRACE_MAXLEN

    if isinstance(x, types.GeneratorType): return "<generator>"
    if isinstance(x, collections.abc.Iterator): return f"<{type(x).__name__}>"

    ret = repr(x).replace("\n", " ")
    if len(ret) > maxlen:
        ret = ret[:max(maxlen - 3, 0)] + "..."
    return ret


def traced(fn):
    name = fn.__name__

    @functools.wraps(fn)
    def _fn(arr, *args, **kwargs):
        if Config.TRACE:
            # display colored message
            print(f"{Style.BRIGHT}{Fore.RED}*{Style.RESET_ALL} {Fore.GREEN}{Style.BRIGHT}{name}{Style.RESET_ALL}({Fore.WHITE}{Style.BRIGHT}{preview(arr)}{Style.RESET_ALL})")
        return fn(arr, *args, **kwargs)

    return _fn


def warn(msg):
    if not Config.TRACE: return
    print(f"{Style.BRIGHT}{Fore.YELLOW}WARNING:{Style.RESET_ALL} {msg}")
