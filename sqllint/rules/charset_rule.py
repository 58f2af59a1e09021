# sqllint/rules/charset_rule.py
"""
CREATE TABLE must pin its character set to one of the allowed charsets.

Examples:
  ❌ CREATE TABLE t (...) ENGINE=InnoDB;
  ❌ CREATE TABLE t (...) DEFAULT CHARSET=latin1;
  ✅ CREATE TABLE t (...) DEFAULT CHARSET=utf8mb4;
"""
from .rule_base import RuleBase
from .. import extract
from ..linterror import contains_ignore_case


class CharsetRule(RuleBase):
    id = "charset"
    rule_name = "Table Charset"

    def enter(self, node):
        self.checkpoint(node)

        if not extract.is_create_table(node):
            return False

        allowed = [c.lower() for c in self.params.get("allowed", ["utf8mb4"])]
        charset = extract.table_charset(node)
        table = extract.table_name(node)

        if charset is None:
            self.fail(f"table '{table}' should declare a charset, e.g. DEFAULT CHARSET={allowed[0]}",
                      contains_ignore_case("create"))
        elif charset not in allowed:
            self.fail(f"table '{table}' charset '{charset}' is not allowed, use one of: {', '.join(allowed)}",
                      contains_ignore_case(charset))
        return True
