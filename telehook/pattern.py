import re
from functools import lru_cache
from typing import List, Optional, Pattern

from telehook.constants import PLACEHOLDERS


@lru_cache(maxsize=256)
def compile_pattern(command: str) -> Pattern[str]:
    """
    Translate a command specifier into an anchored regular expression.

    Literal text is escaped first, so only the placeholders carry regex
    meaning:

    - ``%d`` → one or more ASCII digits
    - ``%s`` → one non-space token
    - ``%c`` → a single non-space character
    - ``%p`` → the rest of the string (may be empty)

    Parameters
    ----------
    command : str
        Specifier such as ``"/greet %s"`` or ``"/say %p"``.

    Returns
    -------
    re.Pattern
        Compiled pattern, meant to be used with ``fullmatch``.
    """
    pattern = re.escape(command)
    for placeholder, group in PLACEHOLDERS.items():
        pattern = pattern.replace(placeholder, group)
    # %d is 0-9 only, \s is ASCII whitespace only
    return re.compile(pattern, re.ASCII)


def is_exact_match(text: str, command: str) -> bool:
    return text == command


def match(text: str, command: str) -> Optional[List[str]]:
    """
    Match ``text`` against ``command`` and extract placeholder values.

    Parameters
    ----------
    text : str
        Incoming message text or callback data.
    command : str
        Command specifier.

    Returns
    -------
    list of str or None
        Captured values left to right, as raw strings. None when the whole
        text does not match.
    """
    found = compile_pattern(command).fullmatch(text)
    if found is None:
        return None
    return list(found.groups())
