# sqllint/rules/foreign_key_rule.py
"""
Foreign keys are enforced by the application, not by the schema.

Examples:
  ❌ CONSTRAINT fk_user FOREIGN KEY (user_id) REFERENCES users (id)
  ✅ KEY idx_user_id (user_id)
"""
from .rule_base import RuleBase
from .. import extract
from ..linterror import contains_ignore_case


class ForeignKeyRule(RuleBase):
    id = "foreign_key"
    rule_name = "No Foreign Keys"

    def enter(self, node):
        self.checkpoint(node)

        if extract.is_column_def(node):
            return True

        if extract.is_foreign_key(node):
            self.fail("foreign key is not allowed, keep the relation in application code",
                      contains_ignore_case("foreign key"))
            return True
        return False
