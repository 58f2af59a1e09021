# sqllint/rules/table_comment_rule.py
"""
CREATE TABLE must describe the table with a table-level COMMENT.

Examples:
  ❌ CREATE TABLE users (id BIGINT) ENGINE=InnoDB;
  ✅ CREATE TABLE users (id BIGINT) ENGINE=InnoDB COMMENT='registered users';
"""
from .rule_base import RuleBase
from .. import extract
from ..linterror import contains_ignore_case


class TableCommentRule(RuleBase):
    id = "table_comment"
    rule_name = "Table Comment"

    def enter(self, node):
        self.checkpoint(node)

        if not extract.is_create_table(node):
            return False

        comment = extract.table_comment(node)
        if comment is None or not comment.strip():
            self.fail(f"table '{extract.table_name(node)}' should have a comment",
                      contains_ignore_case("create"))
        return True
