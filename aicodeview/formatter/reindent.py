# aicodeview/formatter/reindent.py
"""
Best-effort cleanup of model output.

Strips markdown code fences the model was asked not to send, then
re-indents every line from a running bracket depth. This is a heuristic,
not a lexer: brackets inside strings or comments move the depth too, and
blocks opened by ':' (Python) are left flat.
"""
import re
from typing import List, Optional

from aicodeview.state import Language

INDENT_UNIT = "  "
OPENERS = ("{", "(", "[")
CLOSERS = ("}", ")", "]")

_OPENING_FENCE = re.compile(r"\A```[A-Za-z0-9_-]*\n")
_CLOSING_FENCE = re.compile(r"\n```\Z")
_BARE_FENCE = re.compile(r"\A```")
# whitespace plus the byte-order mark, which str.strip() keeps
_EDGE_SPACE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")


def trim(text: str) -> str:
    return _EDGE_SPACE.sub("", text)


def strip_fences(code: str) -> str:
    code = trim(code)
    code = _OPENING_FENCE.sub("", code, count=1)
    code = _CLOSING_FENCE.sub("", code, count=1)
    code = _BARE_FENCE.sub("", code, count=1)
    return code


def reindent(lines: List[str]) -> List[str]:
    depth = 0
    out = []
    for line in lines:
        line = trim(line)
        if line.startswith(CLOSERS):
            depth -= 1
        out.append(INDENT_UNIT * max(0, depth) + line)
        if line.endswith(OPENERS):
            depth += 1
    return out


def format_code(code: str, language: Optional[Language] = None) -> str:
    """Strip fences and re-indent. `language` is accepted for callers that
    already detected it; it does not change the output."""
    code = strip_fences(code)
    return "\n".join(reindent(code.split("\n")))
