import logging

from sqllint import Linter, LintError, ParseFailure, RuleEngine, lint_sql_text
from sqllint.rules.rule_base import RuleBase
from sqllint.linterror import first_line

from conftest import make_linter


class ExplodingRule(RuleBase):
    id = "exploding"
    rule_name = "Exploding"

    def enter(self, node):
        raise RuntimeError("boom")


class LostRule(RuleBase):
    """Fails with a text window that is not in the script."""
    id = "lost"
    rule_name = "Lost"

    def enter(self, node):
        self.text = "this text is nowhere"
        self.fail("always fails", first_line)
        return True


class CountingRule(RuleBase):
    id = "counting"
    rule_name = "Counting"
    instances = []

    def __init__(self, script, params=None):
        super().__init__(script, params)
        CountingRule.instances.append(self)
        self.visited = 0

    def enter(self, node):
        self.visited += 1
        return False


def test_concrete_scenarios():
    linter = make_linter("boolean_field")
    assert linter.lint("CREATE TABLE t (id int, is_deleted tinyint(1), has_flag bit);") == []

    errors = linter.lint("CREATE TABLE t (is_deleted int);\nCREATE TABLE u (enabled bit);")
    assert [e.line for e in errors] == [1, 2]


def test_same_column_in_two_statements_resolves_to_its_own_line():
    text = (
        "CREATE TABLE a (\n"
        "  id int,\n"
        "  enabled tinyint(1)\n"
        ");\n"
        "CREATE TABLE b (\n"
        "  id int,\n"
        "  enabled tinyint(1)\n"
        ");\n"
    )
    errors = make_linter("boolean_field").lint(text)
    assert [e.line for e in errors] == [3, 7]


def test_identical_statements_resolve_to_distinct_lines():
    text = "CREATE TABLE a (enabled bit);\nCREATE TABLE a (enabled bit);\n"
    errors = make_linter("boolean_field").lint(text)
    assert [e.line for e in errors] == [1, 2]


def test_rule_runs_fresh_on_every_statement():
    text = "CREATE TABLE a (enabled bit);\nCREATE TABLE b (is_ok bit);\nCREATE TABLE c (is_x int);"
    errors = make_linter("boolean_field").lint(text)
    assert [e.statement_index for e in errors] == [0, 2]


def test_order_is_statement_then_rule():
    text = "CREATE TABLE A (enabled bit);\nCREATE TABLE B (enabled bit);"
    linter = Linter(RuleEngine(checks={
        "table_name": {"enabled": True},
        "boolean_field": {"enabled": True},
    }))
    errors = linter.lint(text)
    assert [(e.statement_index, e.rule_id) for e in errors] == [
        (0, "table_name"), (0, "boolean_field"), (1, "table_name"), (1, "boolean_field"),
    ]


def test_idempotent():
    text = "CREATE TABLE T (\n  is_deleted int,\n  price float\n);\nCREATE TABLE u (enabled bit);"
    linter = Linter()
    first = linter.lint(text, name="x.sql")
    second = linter.lint(text, name="x.sql")
    assert first
    assert first == second


def test_parse_error_is_fatal_for_the_script():
    text = "CREATE TABLE a (enabled bit);\n\nCREATE TABLE b (id int;\n"
    errors = make_linter("boolean_field").lint(text, name="bad.sql")
    assert len(errors) == 1
    assert isinstance(errors[0], ParseFailure)
    assert errors[0].line == 3
    assert errors[0].statement_index == 1
    assert errors[0].script_name == "bad.sql"


def test_empty_script():
    assert Linter().lint("") == []
    assert Linter().lint("-- nothing here\n") == []


def test_rule_fault_is_isolated(caplog):
    engine = RuleEngine(checks={"boolean_field": {"enabled": True}})
    engine.register(ExplodingRule)
    with caplog.at_level(logging.ERROR, logger="sqllint.linter"):
        errors = Linter(engine).lint("CREATE TABLE t (enabled bit);")
    assert [e.rule_id for e in errors] == ["boolean_field", "exploding"]
    assert errors[1].message == "rule failed: boom"
    assert errors[1].line == 1
    assert "exploding" in caplog.text


def test_unresolved_location_is_reported_and_logged(caplog):
    engine = RuleEngine(checks={})
    engine.register(LostRule)
    with caplog.at_level(logging.WARNING, logger="sqllint.linter"):
        errors = Linter(engine).lint("CREATE TABLE t (id int);")
    assert len(errors) == 1
    assert isinstance(errors[0], LintError)
    assert errors[0].line is None
    assert errors[0].message == "always fails"
    assert "could not locate" in caplog.text


def test_fresh_instance_per_statement_and_rule():
    CountingRule.instances.clear()
    engine = RuleEngine(checks={})
    engine.register(CountingRule)
    Linter(engine).lint("CREATE TABLE a (id int);\nCREATE TABLE b (id int);")
    assert len(CountingRule.instances) == 2
    first, second = CountingRule.instances
    assert first is not second
    assert first.script is not second.script
    assert all(r.visited > 0 for r in CountingRule.instances)


def test_lint_sql_text_groups_by_statement():
    text = "CREATE TABLE a (enabled bit);\nCREATE TABLE b (is_ok bit);"
    results, summary = lint_sql_text(text, checks={"boolean_field": {"enabled": True}})
    assert summary == {"total": 2, "passed": 1, "failed": 1, "violations": 1, "parse_error": None}
    assert results[0]["line"] == 1
    assert results[0]["validations"][0].startswith("❌ Boolean Field:")
    assert results[0]["diagnostics"][0]["rule_id"] == "boolean_field"
    assert results[1]["validations"] == []


def test_lint_sql_text_parse_error():
    results, summary = lint_sql_text("CREATE TABLE b (id int;", checks={"boolean_field": {"enabled": True}})
    assert results == []
    assert summary["parse_error"]
