# sqllint/rules/primary_key_rule.py
"""
Every CREATE TABLE must declare a primary key, either inline on a column or
as a table-level PRIMARY KEY (...) clause.

Examples:
  ❌ CREATE TABLE t (id BIGINT, name VARCHAR(64));
  ✅ CREATE TABLE t (id BIGINT PRIMARY KEY, name VARCHAR(64));
  ✅ CREATE TABLE t (id BIGINT, name VARCHAR(64), PRIMARY KEY (id));
"""
from .rule_base import RuleBase
from .. import extract
from ..linterror import contains_ignore_case


class PrimaryKeyRule(RuleBase):
    id = "primary_key"
    rule_name = "Primary Key Required"

    def __init__(self, script, params=None):
        super().__init__(script, params)
        self.has_primary_key = False

    def enter(self, node):
        self.checkpoint(node)

        if extract.is_column_def(node):
            if extract.is_primary_key(node):
                self.has_primary_key = True
            return True

        if extract.is_primary_key_constraint(node):
            self.has_primary_key = True
            return True

        return False

    def leave(self, node):
        if extract.is_create_table(node) and not self.has_primary_key:
            self.fail(f"table '{extract.table_name(node)}' should have a primary key",
                      contains_ignore_case("create"))
        return self.err is None
