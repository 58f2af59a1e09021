# sqllint/rules/index_name_rule.py
"""
Validates index names inside CREATE TABLE bodies.

Rules:
- KEY / INDEX names must start with 'idx_'
- UNIQUE KEY names must start with 'uk_'
- Anonymous indexes are not checked

Examples:
  ❌ KEY name_key (name)
  ❌ UNIQUE KEY email (email)
  ✅ KEY idx_name (name)
  ✅ UNIQUE KEY uk_email (email)
"""
from .rule_base import RuleBase
from .. import extract
from ..linterror import contains


class IndexNameRule(RuleBase):
    id = "index_name"
    rule_name = "Index Naming Convention"

    def enter(self, node):
        self.checkpoint(node)

        # inline column constraints (e.g. "email VARCHAR(64) UNIQUE") have no name
        if extract.is_column_def(node):
            return True

        if not extract.is_index(node):
            return False

        name = extract.index_name(node)
        if not name:
            return True

        if extract.is_unique_index(node):
            prefix = self.params.get("unique_prefix", "uk_")
            kind = "unique index"
        else:
            prefix = self.params.get("index_prefix", "idx_")
            kind = "index"

        if not name.startswith(prefix):
            self.fail(f"{kind} name '{name}' should start with '{prefix}'", contains(name))
        return True
