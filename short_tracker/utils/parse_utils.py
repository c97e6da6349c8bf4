# utils/parse_utils.py
import re

_LEADING_NUMBER = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_amount(text) -> float:
    """
    Read an amount typed into a form field.
    '120' -> 120.0, ' 75.5 ' -> 75.5, '30php' -> 30.0
    empty / non-numeric -> 0.0
    """
    if text is None:
        return 0.0
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return float(text)
    m = _LEADING_NUMBER.match(str(text).strip())
    if not m:
        return 0.0
    return float(m.group(0))


def parse_id_list(text: str) -> list[int]:
    """
    '1, 2,3' -> [1,2,3]
    empty string -> []
    non-numeric tokens are ignored, duplicates dropped
    """
    if not text.strip():
        return []
    seen = set()
    out = []
    for tok in text.split(","):
        tok = tok.strip()
        if not tok:
            continue
        if not tok.isdigit():
            continue
        n = int(tok)
        if n not in seen:
            seen.add(n)
            out.append(n)
    return out
