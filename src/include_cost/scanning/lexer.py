"""Comment-aware scanning of C/C++ text.

The lexer walks the text once with a four-state machine (normal code, line
comment, block comment, string/char literal). Only text in the normal state
counts as code, and ``#include`` is only recognized there, so directives that
sit inside comments or string literals are ignored. Line splices inside a
literal and C++11 raw strings (``R"tag(...)tag"``) keep the literal open
across lines.

Macro-valued includes (``#include HEADER``) are not recognized; the
undercount is accepted.
"""

import re
from enum import Enum
from typing import Optional

from .models import IncludeDirective, ScanResult

_DIRECTIVE = re.compile(r'#[ \t]*include[ \t]*(?:"([^"\n]+)"|<([^>\n]+)>)')

# Encoding prefixes of C++11 raw string literals, longest first
_RAW_PREFIXES = ("u8R", "LR", "uR", "UR", "R")
_RAW_DELIMITER = re.compile(r'[^\s()\\]{0,16}\(')


class _State(Enum):
    NORMAL = "normal"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    STRING = "string"


def count_text_lines(text: str) -> int:
    """Physical line count; a trailing newline does not open a new line."""
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


def _raw_string_end(text: str, quote_at: int) -> Optional[int]:
    """End offset of a raw string literal whose opening quote is at ``quote_at``.

    Returns None when the quote does not open a raw string. An unterminated
    raw string runs to end of file.
    """
    for prefix in _RAW_PREFIXES:
        start = quote_at - len(prefix)
        if start >= 0 and text.startswith(prefix, start):
            break
    else:
        return None
    # fooR"x" is an identifier followed by an ordinary string
    if start > 0 and (text[start - 1].isalnum() or text[start - 1] == "_"):
        return None

    opening = _RAW_DELIMITER.match(text, quote_at + 1)
    if opening is None:
        return None
    closing = ")" + opening.group()[:-1] + '"'
    end = text.find(closing, opening.end())
    return len(text) if end < 0 else end + len(closing)


def scan_source(text: str) -> ScanResult:
    """Strip comments, count code lines and collect include directives.

    A line is a code line when something other than whitespace survives
    comment stripping. An unterminated block comment runs to end of file.
    """
    includes: list[IncludeDirective] = []
    code_lines = 0
    line_no = 1
    line_has_code = False
    state = _State.NORMAL
    quote = ""
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch == "\n":
            # Literals and line comments cannot continue past a newline
            if state is _State.STRING or state is _State.LINE_COMMENT:
                state = _State.NORMAL
            if line_has_code:
                code_lines += 1
            line_has_code = False
            line_no += 1
            i += 1
            continue

        if state is _State.LINE_COMMENT:
            end = text.find("\n", i)
            i = n if end < 0 else end
            continue

        if state is _State.BLOCK_COMMENT:
            end = text.find("*/", i)
            stop = n if end < 0 else end
            newlines = text.count("\n", i, stop)
            if newlines:
                if line_has_code:
                    code_lines += 1
                line_has_code = False
                line_no += newlines
            i = n if end < 0 else end + 2
            state = _State.NORMAL
            continue

        if state is _State.STRING:
            if ch == "\\" and i + 1 < n:
                escaped = 2 if text.startswith("\r\n", i + 1) else 1
                if text[i + escaped] == "\n":
                    # Line splice: the literal carries on onto the next line
                    code_lines += 1
                    line_no += 1
                i += 1 + escaped
                continue
            if ch == quote:
                state = _State.NORMAL
            i += 1
            continue

        if ch == "/" and i + 1 < n:
            nxt = text[i + 1]
            if nxt == "/":
                state = _State.LINE_COMMENT
                i += 2
                continue
            if nxt == "*":
                state = _State.BLOCK_COMMENT
                i += 2
                continue

        if ch == '"':
            end = _raw_string_end(text, i)
            if end is not None:
                # Every line a raw string touches holds part of the literal
                newlines = text.count("\n", i, end)
                code_lines += newlines
                line_no += newlines
                line_has_code = True
                i = end
                continue

        if ch == '"' or ch == "'":
            state = _State.STRING
            quote = ch
            line_has_code = True
            i += 1
            continue

        if ch == "#" and not line_has_code:
            match = _DIRECTIVE.match(text, i)
            if match:
                quoted, bracketed = match.group(1), match.group(2)
                includes.append(
                    IncludeDirective(
                        path=quoted if quoted is not None else bracketed,
                        system=bracketed is not None,
                        line=line_no,
                    )
                )
                line_has_code = True
                i = match.end()
                continue

        if not ch.isspace():
            line_has_code = True
        i += 1

    if line_has_code:
        code_lines += 1

    return ScanResult(
        text_lines=count_text_lines(text),
        code_lines=code_lines,
        includes=tuple(includes),
    )
