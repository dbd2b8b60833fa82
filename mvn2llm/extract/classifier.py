"""Per-line predicates used by the doc/declaration scanner.

Every predicate looks at the line with surrounding whitespace removed and
keeps no state between calls.
"""

from __future__ import annotations

BLOCK_DOC_OPEN = "/**"
BLOCK_DOC_CLOSE = "*/"
LINE_DOC_MARKER = "///"
STATEMENT_TERMINATOR = ";"


def opens_block_doc(line: str) -> bool:
    """Return True for a `/**` opener; plain `/*` and empty `/**/` never match."""
    trimmed = line.strip()
    return trimmed.startswith(BLOCK_DOC_OPEN) and not trimmed.startswith("/**/")


def closes_on_same_line(line: str) -> bool:
    """Return True when a doc opener line also carries the closer."""
    trimmed = line.strip()
    if not opens_block_doc(trimmed):
        return False
    return BLOCK_DOC_CLOSE in trimmed[len(BLOCK_DOC_OPEN):]


def closes_block_doc(line: str) -> bool:
    trimmed = line.strip()
    # ` * last words */` closes the block as well as a bare ` */`.
    return trimmed.startswith(BLOCK_DOC_CLOSE) or trimmed.endswith(BLOCK_DOC_CLOSE)


def opens_line_doc(line: str) -> bool:
    return line.strip().startswith(LINE_DOC_MARKER)


def contains_statement_terminator(text: str) -> bool:
    return STATEMENT_TERMINATOR in text


def scan_brace_depth(text: str) -> bool:
    """Return True once a `{` appears outside every parenthesis pair.

    Braces inside annotation arguments such as ``@Value({"a", "b"})`` are
    skipped because the parenthesis depth is non-zero there. Quoted string
    contents are not treated specially.
    """
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        elif char == "{" and depth == 0:
            return True
    return False


def end_of_signature(text: str) -> bool:
    """Return True when the accumulated signature text is complete."""
    return contains_statement_terminator(text) or scan_brace_depth(text)


__all__ = [
    "closes_block_doc",
    "closes_on_same_line",
    "contains_statement_terminator",
    "end_of_signature",
    "opens_block_doc",
    "opens_line_doc",
    "scan_brace_depth",
]
