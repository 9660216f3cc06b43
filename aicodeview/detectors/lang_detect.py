import re
from typing import List, Tuple

from aicodeview.state import DEFAULT_LANGUAGE, Language

# Checked in order, first hit wins. `^` anchors at the start of any line.
LANG_SIGNATURES: List[Tuple[Language, "re.Pattern[str]"]] = [
    ("python", re.compile(r"^(import|from|def|class|print)", re.MULTILINE)),
    ("javascript", re.compile(r"^(const|let|var|function|class|console)", re.MULTILINE)),
    ("java", re.compile(r"^(public|class|import|package)", re.MULTILINE)),
    ("cpp", re.compile(r"^(#include|using namespace|int main)", re.MULTILINE)),
    ("php", re.compile(r"^(<\?php|namespace|use|class)", re.MULTILINE)),
]


def detect_language(code: str) -> Language:
    for lang, pattern in LANG_SIGNATURES:
        if pattern.search(code):
            return lang
    return DEFAULT_LANGUAGE
