# sqllint/rules/varchar_length_rule.py
from .rule_base import RuleBase
from .. import extract
from ..linterror import contains


class VarcharLengthRule(RuleBase):
    id = "varchar_length"
    rule_name = "VARCHAR length limit"

    def enter(self, node):
        self.checkpoint(node)

        if not extract.is_column_def(node):
            return False

        try:
            col_type = extract.column_type(node)
        except extract.ExtractError:
            return True
        if not col_type.startswith("varchar("):
            return True

        max_len = self.params.get("max_length", 5000)
        length = extract.type_length(node)
        if length is not None and length > max_len:
            col_name = extract.column_name(node)
            self.fail(f"varchar column '{col_name}' length {length} exceeds {max_len}, use text instead",
                      contains(col_name))
        return True
