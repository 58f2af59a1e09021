# sqllint/rules/column_comment_rule.py
"""
Every column must carry a COMMENT describing it.

Examples:
  ❌ name VARCHAR(64) NOT NULL
  ✅ name VARCHAR(64) NOT NULL COMMENT 'display name'
"""
from .rule_base import RuleBase
from .. import extract
from ..linterror import contains


class ColumnCommentRule(RuleBase):
    id = "column_comment"
    rule_name = "Column Comment"

    def enter(self, node):
        self.checkpoint(node)

        if not extract.is_column_def(node):
            return False

        col_name = extract.column_name(node)
        if not col_name:
            return True

        comment = extract.column_comment(node)
        if comment is None or not comment.strip():
            self.fail(f"column '{col_name}' should have a comment", contains(col_name))
        return True
