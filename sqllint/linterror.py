# sqllint/linterror.py
"""
Diagnostics and location resolution.

The parser gives nodes no line information, so a diagnostic is located by
searching the source: the rule hands over a text window (the statement text
it last checkpointed) and a predicate over lines, and the resolver finds
the first matching line inside that window at or after the script cursor.
"""
import logging

from .script import Script

logger = logging.getLogger(__name__)


def resolve(script: Script, window: str, predicate):
    """
    Return the 1-based number of the first line in ``window`` (searched from
    the script cursor) for which ``predicate(line)`` holds, and advance the
    cursor past it. Return None when the window is not found verbatim or no
    line inside it matches.
    """
    lines = script.lines
    if window:
        found = script.find(window)
        if found < 0:
            return None
        first = script.line_index(found)
        last = script.line_index(found + len(window) - 1)
    else:
        first = script.line_index(script.cursor)
        last = len(lines) - 1

    for idx in range(first, last + 1):
        if predicate(lines[idx]):
            script.advance(idx)
            return idx + 1
    return None


# -------------------------
# Line predicates
# -------------------------
def contains(token: str):
    return lambda line: token in line


def contains_ignore_case(token: str):
    token = token.lower()
    return lambda line: token in line.lower()


def first_line(line: str) -> bool:
    return True


# -------------------------
# Diagnostics
# -------------------------
class LintError:
    """A located rule violation. ``line`` is None when it could not be resolved."""

    def __init__(self, rule_id: str, message: str, script_name: str, line=None,
                 snippet: str = "", rule_name: str = None, statement_index: int = None):
        self.rule_id = rule_id
        self.rule_name = rule_name or rule_id
        self.message = message
        self.script_name = script_name
        self.line = line
        self.snippet = snippet
        self.statement_index = statement_index

    @classmethod
    def new(cls, rule_id: str, script: Script, window: str, message: str, predicate,
            rule_name: str = None):
        line = resolve(script, window, predicate)
        if line is not None:
            snippet = script.lines[line - 1].strip()
        else:
            snippet = window.strip().split("\n", 1)[0] if window else ""
        return cls(rule_id, message, script.name, line=line, snippet=snippet, rule_name=rule_name)

    @property
    def resolved(self) -> bool:
        return self.line is not None

    def to_dict(self):
        return {
            "rule_id": self.rule_id,
            "rule_name": self.rule_name,
            "message": self.message,
            "script": self.script_name,
            "line": self.line,
            "snippet": self.snippet,
            "statement": self.statement_index,
        }

    def __eq__(self, other):
        if not isinstance(other, LintError):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self):
        where = self.line if self.line is not None else "?"
        return f"{self.script_name}:{where}: [{self.rule_id}] {self.message}: {self.snippet}"

    def __repr__(self):
        return f"LintError({self.rule_id!r}, line={self.line!r}, {self.message!r})"


class ParseFailure(LintError):
    """The parser rejected the script. Reported once, with no rule results."""

    def __init__(self, message: str, script_name: str, line=None, snippet: str = "",
                 statement_index: int = None):
        super().__init__("parse", message, script_name, line=line, snippet=snippet,
                         rule_name="SQL parse", statement_index=statement_index)
