# sqllint/rules/float_double_rule.py
"""
Approximate numeric types lose precision; use DECIMAL instead.

Examples:
  ❌ price FLOAT
  ❌ amount DOUBLE
  ✅ price DECIMAL(10,2)
"""
from .rule_base import RuleBase
from .. import extract
from ..linterror import contains

FORBIDDEN_TYPES = ("float", "double", "real")


class FloatDoubleRule(RuleBase):
    id = "float_double"
    rule_name = "No FLOAT/DOUBLE"

    def enter(self, node):
        self.checkpoint(node)

        if not extract.is_column_def(node):
            return False

        try:
            col_name = extract.column_name(node)
            col_type = extract.column_type(node)
        except extract.ExtractError:
            return True

        # float(7,4) and double unsigned count too
        base_type = extract.base_type(col_type)
        if col_name and base_type in FORBIDDEN_TYPES:
            self.fail(f"column '{col_name}' uses {base_type}, use decimal instead",
                      contains(col_name))
        return True
