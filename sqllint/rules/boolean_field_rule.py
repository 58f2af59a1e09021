# sqllint/rules/boolean_field_rule.py
"""
Boolean columns must be named with a linking verb, and columns named with a
linking verb must be boolean.

Examples:
  ❌ enabled TINYINT(1)
  ❌ is_deleted INT
  ✅ is_deleted TINYINT(1)
  ✅ has_child BOOLEAN
"""
from .rule_base import RuleBase
from .. import extract
from ..linterror import contains

BOOLEAN_TYPES = ("bool", "boolean", "tinyint(1)", "bit")
LINKING_VERBS = ("is_", "has_")


class BooleanFieldRule(RuleBase):
    id = "boolean_field"
    rule_name = "Boolean Field"

    def enter(self, node):
        self.checkpoint(node)

        if not extract.is_column_def(node):
            return False

        try:
            col_name = extract.column_name(node)
            col_type = extract.column_type(node)
        except extract.ExtractError:
            return True
        if not col_name:
            return True

        prefixed = col_name.lower().startswith(LINKING_VERBS)
        if col_type in BOOLEAN_TYPES:
            if not prefixed:
                self.fail("boolean field should start with linking-verb, e.g. is_deleted, has_child",
                          contains(col_name))
            return True

        if prefixed:
            self.fail("boolean field type should be tinyint(1) or boolean", contains(col_name))

        return True
