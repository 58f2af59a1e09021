# sqllint/rules/necessary_field_rule.py
"""
Every CREATE TABLE must declare the bookkeeping columns listed in the
``fields`` param (default: id, created_at, updated_at).
"""
from .rule_base import RuleBase
from .. import extract
from ..linterror import contains_ignore_case

DEFAULT_FIELDS = ["id", "created_at", "updated_at"]


class NecessaryFieldRule(RuleBase):
    id = "necessary_field"
    rule_name = "Necessary Fields"

    def __init__(self, script, params=None):
        super().__init__(script, params)
        self.columns = set()

    def enter(self, node):
        self.checkpoint(node)

        if extract.is_column_def(node):
            self.columns.add(extract.column_name(node).lower())
            return True
        return False

    def leave(self, node):
        if not extract.is_create_table(node):
            return self.err is None

        required = self.params.get("fields", DEFAULT_FIELDS)
        missing = [f for f in required if f.lower() not in self.columns]
        if missing:
            self.fail(f"table '{extract.table_name(node)}' is missing necessary field(s): {', '.join(missing)}",
                      contains_ignore_case("create"))
        return self.err is None
