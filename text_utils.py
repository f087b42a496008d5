"""
Text helpers shared by the probes - pure string transforms, no I/O.
"""

from typing import Optional


def extract_quoted(line: str) -> Optional[str]:
    """Return the text between the first and the last double quote.

    Used on os-release style lines (``KEY="value with spaces"``). A line with
    fewer than two quotes yields None. Embedded quotes are kept:
    ``A="B"C"`` gives ``B"C``.
    """
    start = line.find('"')
    end = line.rfind('"')
    if start == -1 or end <= start:
        return None
    return line[start + 1:end]


def extract_leading_version(text: str) -> str:
    """Return the first run of digits and dots, starting at the first digit.

    "bash 5.1.16(1)-release" -> "5.1.16". Text without any ASCII digit gives
    an empty string, which callers must check for.
    """
    i = 0
    while i < len(text) and not ("0" <= text[i] <= "9"):
        i += 1
    start = i
    while i < len(text) and (("0" <= text[i] <= "9") or text[i] == "."):
        i += 1
    return text[start:i]


def capitalize_first(text: str) -> str:
    """Upper-case the first character if it is an ASCII lowercase letter."""
    if text and "a" <= text[0] <= "z":
        return text[0].upper() + text[1:]
    return text


def strip_newline(text: str) -> str:
    """Cut *text* at its first newline and drop stray CR / NUL characters."""
    line = text.split("\n", 1)[0]
    return line.rstrip("\r").replace("\0", "")
