from typing import Dict

from ..extract import node_text
from ..linterror import LintError
from ..script import Script


class RuleBase:
    """
    Base class for rules. A rule is a visitor over one statement's AST:
      - enter(node) returns True to skip the node's children
      - leave(node) returns False once the rule has recorded its error
      - error() returns the recorded LintError or None

    A fresh instance is built for every statement, bound to its own fork of
    the script, so at most one error is recorded per rule per statement.
    """
    id = "base"
    rule_name = "Generic Rule"

    def __init__(self, script: Script, params: Dict = None):
        self.script = script
        self.params = params or {}
        self.text = ""
        self.err = None

    @property
    def name(self) -> str:
        return self.params.get("rule_name", self.rule_name)

    def checkpoint(self, node):
        """Remember the newest node text seen; location search is scoped to it."""
        text = node_text(node)
        if not self.text or text:
            self.text = text

    def fail(self, message: str, predicate) -> LintError:
        self.err = LintError.new(self.id, self.script, self.text, message, predicate,
                                 rule_name=self.name)
        return self.err

    def enter(self, node) -> bool:
        raise NotImplementedError

    def leave(self, node) -> bool:
        return self.err is None

    def error(self):
        return self.err
