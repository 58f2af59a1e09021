# sqllint/parser.py
"""
Statement splitter and parser adapter.

Key design decisions:
- Split on top-level semicolons while preserving quoted strings, quoted
  identifiers and comments (a ';' inside any of them does not end a
  statement).
- Keep the source offset of every statement so diagnostics can be mapped
  back to lines of the original text. Leading whitespace and comments are
  not part of a statement.
- Grammar is not interpreted here: every statement is handed to sqlglot and
  the resulting expression is kept as the statement AST.
"""
import logging

import sqlglot
from sqlglot.errors import ParseError, SqlglotError

logger = logging.getLogger(__name__)

DEFAULT_DIALECT = "mysql"

# key under which a statement root keeps its own source text
SOURCE_META_KEY = "source"


class Statement:
    def __init__(self, index: int, text: str, start: int, line: int, node=None):
        self.index = index
        self.text = text
        self.start = start      # offset into the script
        self.line = line        # 1-based line of the first character
        self.node = node

    def __repr__(self):
        return f"Statement(#{self.index}, line={self.line}, {self.text[:40]!r})"


class ScriptParseError(Exception):
    """The parser rejected a statement. Fatal for the whole script."""

    def __init__(self, message: str, line: int = None, statement: Statement = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.statement = statement


# -------------------------
# Top-level tokenizer (split on semicolons, respect quotes and comments)
# -------------------------
def _skip_quoted(text: str, i: int, quote: str) -> int:
    """Return the offset just past the quoted run starting at ``i``."""
    L = len(text)
    i += 1
    while i < L:
        ch = text[i]
        if ch == "\\" and quote != "`":
            i += 2
            continue
        if ch == quote:
            # doubled quote is an escape
            if i + 1 < L and text[i + 1] == quote:
                i += 2
                continue
            return i + 1
        i += 1
    return L


def _skip_comment(text: str, i: int) -> int:
    """If a comment starts at ``i`` return the offset past it, else ``i``."""
    L = len(text)
    ch = text[i]
    if ch == "#" or (ch == "-" and text.startswith("--", i)):
        nl = text.find("\n", i)
        return L if nl < 0 else nl + 1
    if ch == "/" and text.startswith("/*", i):
        end = text.find("*/", i + 2)
        return L if end < 0 else end + 2
    return i


def _skip_blank(text: str, i: int, end: int) -> int:
    """Skip whitespace and comments between ``i`` and ``end``."""
    while i < end:
        if text[i].isspace():
            i += 1
            continue
        j = _skip_comment(text, i)
        if j == i:
            break
        i = min(j, end)
    return i


def _tokenize_top_level(text: str):
    """Yield (start, end) spans of top-level statements, semicolon included."""
    spans = []
    stmt_start = 0
    i = 0
    L = len(text)
    while i < L:
        ch = text[i]
        if ch in ("'", '"', "`"):
            i = _skip_quoted(text, i, ch)
            continue

        j = _skip_comment(text, i)
        if j != i:
            i = j
            continue

        if ch == ";":
            spans.append((stmt_start, i + 1))
            stmt_start = i + 1
        i += 1

    if stmt_start < L:
        spans.append((stmt_start, L))
    return spans


def split_statements(text: str):
    """Split DDL text into Statement objects (not yet parsed)."""
    if not text:
        return []

    statements = []
    for start, end in _tokenize_top_level(text):
        start = _skip_blank(text, start, end)
        chunk = text[start:end].rstrip()
        # a lone ';' or a trailing comment is not a statement
        if not chunk or chunk == ";":
            continue
        line = text.count("\n", 0, start) + 1
        statements.append(Statement(len(statements), chunk, start, line))
    return statements


# -------------------------
# Public API
# -------------------------
def parse_statement(stmt: Statement, dialect: str = DEFAULT_DIALECT):
    """Parse one statement with sqlglot and attach its AST."""
    try:
        node = sqlglot.parse_one(stmt.text, read=dialect)
    except ParseError as e:
        line = stmt.line
        first = e.errors[0] if e.errors else {}
        if first.get("line"):
            line = stmt.line + first["line"] - 1
        description = first.get("description") or str(e)
        raise ScriptParseError(description, line=line, statement=stmt) from e
    except SqlglotError as e:
        raise ScriptParseError(str(e), line=stmt.line, statement=stmt) from e

    if node is None:
        raise ScriptParseError("no statement could be parsed", line=stmt.line, statement=stmt)

    node.meta[SOURCE_META_KEY] = stmt.text
    stmt.node = node
    return node


def parse_script(text: str, dialect: str = DEFAULT_DIALECT):
    """
    Split and parse a whole script. Raises ScriptParseError on the first
    statement the parser rejects.
    """
    statements = split_statements(text)
    for stmt in statements:
        parse_statement(stmt, dialect)
    logger.debug("parsed %d statement(s)", len(statements))
    return statements
