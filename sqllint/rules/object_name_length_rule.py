# sqllint/rules/object_name_length_rule.py
from .rule_base import RuleBase
from .. import extract
from ..linterror import contains


class ObjectNameLengthRule(RuleBase):
    id = "object_name_length"
    rule_name = "Object name <= max length"

    def _check(self, kind, obj):
        max_len = self.params.get("max_length", 64)
        if obj and len(obj) > max_len:
            self.fail(f"{kind} name '{obj}' exceeds {max_len} chars ({len(obj)})", contains(obj))

    def enter(self, node):
        self.checkpoint(node)

        if extract.is_create_table(node):
            self._check("table", extract.table_name(node))
            return self.err is not None

        if extract.is_column_def(node):
            self._check("column", extract.column_name(node))
            return True

        if extract.is_index(node):
            self._check("index", extract.index_name(node))
            return True

        return False
