# sqllint/rules/column_naming_rule.py
"""
Validates column naming conventions in CREATE TABLE and ALTER TABLE ADD statements.

Rules:
- Column name must start with a letter (not number or underscore)
- Only lower-case letters, digits and underscores allowed
- No hyphens, spaces or other special characters (quoted names included)
"""
from .rule_base import RuleBase
from .. import extract
from ..linterror import contains


def validate_name(name):
    """
    Validate an identifier against the lower snake_case convention.
    Returns (is_valid, error_message)
    """
    if not name:
        return False, "name is empty"

    errors = []

    # Must start with a letter
    if name[0].isdigit():
        errors.append("cannot start with a number")
    elif name[0] == '_':
        errors.append("cannot start with an underscore")
    elif not name[0].isalpha():
        errors.append(f"cannot start with '{name[0]}'")

    if any(c.isupper() for c in name):
        errors.append("must be lower case")

    # Check for invalid characters
    invalid_chars = []
    for char in name:
        if not (char.isalnum() or char == '_'):
            if char not in invalid_chars:
                invalid_chars.append(char)

    if invalid_chars:
        chars_display = ', '.join(f"'{c}'" for c in invalid_chars)
        errors.append(f"contains invalid characters: {chars_display}")

    if errors:
        return False, "; ".join(errors)
    return True, None


class ColumnNamingRule(RuleBase):
    id = "column_name"
    rule_name = "Column Naming Convention"

    def enter(self, node):
        self.checkpoint(node)

        if not extract.is_column_def(node):
            return False

        col_name = extract.column_name(node)
        if not col_name:
            return True

        is_valid, error = validate_name(col_name)
        if not is_valid:
            self.fail(f"column name '{col_name}' {error}", contains(col_name))
        return True
