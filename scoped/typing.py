"""
Providing typing utilities.
"""

from __future__ import annotations

from textwrap import indent
from typing import TypeVar

_T = TypeVar("_T")


def _docstring_indentation(docstring: str) -> str:
    lines = [line for line in docstring.split("\n")[1:] if line.strip()]
    if not lines:
        return ""
    return " " * min(len(line) - len(line.lstrip()) for line in lines)


def threadsafe(target: _T) -> _T:
    """
    Mark a target as thread-safe.
    """
    docstring = (target.__doc__ or "").rstrip()
    paragraph = "This is thread-safe, which means you can safely use this between different threads."
    if docstring:
        paragraph = indent(paragraph, _docstring_indentation(docstring))
        target.__doc__ = f"{docstring}\n\n{paragraph}"
    else:
        target.__doc__ = paragraph
    return target
