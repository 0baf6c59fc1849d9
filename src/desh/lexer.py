""" Lexical helpers for desh command lines. """
from .constants import SUBST_OPEN


def tokenize(segment: str) -> list[str]:
    """ Split a segment into argv. Whitespace is the only separator. """
    return segment.split()


def first_token(line: str) -> str:
    tokens = tokenize(line)
    return tokens[0] if tokens else ""


def split_segments(command: str) -> list[str]:
    """ Split a command line on pipe characters. """
    return [seg.strip() for seg in command.split("|")]


def paren_balance(line: str) -> int:
    """ Number of `$(` openers still waiting for a `)`. """
    return line.count(SUBST_OPEN) - line.count(")")


def find_substitution(text: str, start: int = 0):
    """
    Locate the first complete $(...) span at or after `start`.
    Parentheses inside the span are matched by depth, so the returned span
    is the outermost one. An opener with no matching `)` is skipped.
    Returns (begin, end) with `end` exclusive, or None.
    """
    begin = text.find(SUBST_OPEN, start)
    while begin != -1:
        depth = 0
        i = begin + len(SUBST_OPEN)
        while i < len(text):
            ch = text[i]
            if ch == "(":
                depth += 1
            elif ch == ")":
                if depth == 0:
                    return begin, i + 1
                depth -= 1
            i += 1
        begin = text.find(SUBST_OPEN, begin + len(SUBST_OPEN))
    return None
