# sqllint/rules/table_naming_convention_rule.py
"""
Validates table naming conventions for CREATE TABLE statements.

Rules:
- Table name must start with a letter (not number or underscore)
- Only lower-case letters, digits and underscores allowed
- Schema.table patterns are allowed, but table name itself must be valid
"""
from .rule_base import RuleBase
from .column_naming_rule import validate_name
from .. import extract
from ..linterror import contains


class TableNamingConventionRule(RuleBase):
    id = "table_name"
    rule_name = "Table Naming Convention"

    def enter(self, node):
        self.checkpoint(node)

        if not extract.is_create_table(node):
            return False

        table_name = extract.table_name(node)
        is_valid, naming_error = validate_name(table_name)
        if not is_valid:
            self.fail(f"table name '{table_name}' {naming_error}", contains(table_name))
        # nothing below a CREATE TABLE is a table name
        return True
