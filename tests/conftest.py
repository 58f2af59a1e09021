import pytest

from sqllint import Linter, RuleEngine


def make_linter(*rule_ids, **params):
    """Linter with only ``rule_ids`` enabled; ``params`` go to every enabled rule."""
    checks = {rid: dict(enabled=True, **params) for rid in rule_ids}
    return Linter(RuleEngine(checks=checks))


@pytest.fixture
def lint():
    def _lint(text, *rule_ids, **params):
        return make_linter(*rule_ids, **params).lint(text, name="test.sql")
    return _lint


GOOD_TABLE = """\
CREATE TABLE users (
  id bigint NOT NULL AUTO_INCREMENT COMMENT 'primary key',
  name varchar(64) NOT NULL COMMENT 'display name',
  is_deleted tinyint(1) NOT NULL COMMENT 'soft delete flag',
  created_at datetime NOT NULL COMMENT 'creation time',
  updated_at datetime NOT NULL COMMENT 'last update time',
  PRIMARY KEY (id),
  KEY idx_name (name)
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COMMENT='registered users';
"""


@pytest.fixture
def good_table():
    return GOOD_TABLE
