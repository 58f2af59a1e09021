# sqllint/linter.py
import logging

from .engine import RuleEngine
from .linterror import LintError, ParseFailure
from .parser import DEFAULT_DIALECT, ScriptParseError, parse_script, split_statements
from .script import Script
from .visitor import accept

logger = logging.getLogger(__name__)


class Linter:
    """
    Runs every active rule over every statement of a script.

    Each (statement, rule) pair gets a fresh rule instance bound to its own
    fork of the script, with the cursor at the start of the statement. A
    rule's failure never stops the other rules or statements.
    """

    def __init__(self, engine: RuleEngine = None, dialect: str = DEFAULT_DIALECT):
        self.engine = engine if engine is not None else RuleEngine()
        self.dialect = dialect

    def lint(self, text: str, name: str = "<input>"):
        """Return the ordered list of LintErrors for ``text``."""
        script = Script(name, text)

        try:
            statements = parse_script(text, self.dialect)
        except ScriptParseError as e:
            logger.info("%s: parse failed at line %s: %s", name, e.line, e.message)
            snippet = ""
            if e.line is not None and 0 < e.line <= len(script.lines):
                snippet = script.lines[e.line - 1].strip()
            index = e.statement.index if e.statement is not None else None
            return [ParseFailure(e.message, name, line=e.line, snippet=snippet, statement_index=index)]

        errors = []
        for stmt in statements:
            for rule_cls, params in self.engine.get_active_rules():
                err = self._run_rule(rule_cls, params, script, stmt)
                if err is None:
                    continue
                err.statement_index = stmt.index
                if not err.resolved:
                    logger.warning("%s: could not locate [%s] in statement #%d (line %d); reporting without a line",
                                   name, err.rule_id, stmt.index, stmt.line)
                errors.append(err)
        return errors

    def _run_rule(self, rule_cls, params, script, stmt):
        try:
            rule = rule_cls(script.fork(stmt.start), params)
            accept(stmt.node, rule)
            return rule.error()
        except Exception as e:
            logger.exception("rule '%s' failed on statement #%d", rule_cls.id, stmt.index)
            return LintError(rule_cls.id, f"rule failed: {e}", script.name, line=stmt.line,
                             snippet=stmt.text.split("\n", 1)[0],
                             rule_name=params.get("rule_name"))


def lint_sql_text(text, checks_path=None, checks=None, name="<input>", dialect=DEFAULT_DIALECT):
    """
    Lint SQL text and group the diagnostics by statement for reports.
    Return (results, summary).
    """
    engine = RuleEngine(checks_config_path=checks_path, checks=checks)
    diagnostics = Linter(engine, dialect=dialect).lint(text, name=name)

    if diagnostics and isinstance(diagnostics[0], ParseFailure):
        failure = diagnostics[0]
        summary = {
            "total": 0,
            "passed": 0,
            "failed": 0,
            "violations": 0,
            "parse_error": str(failure),
        }
        return [], summary

    by_statement = {}
    for err in diagnostics:
        by_statement.setdefault(err.statement_index, []).append(err)

    results = []
    passed = 0
    failed = 0
    for stmt in split_statements(text):
        found = by_statement.get(stmt.index, [])
        if found:
            failed += 1
        else:
            passed += 1
        results.append({
            "index": stmt.index,
            "line": stmt.line,
            "query": stmt.text,
            "validations": [f"❌ {e.rule_name}: {e.message} (line {e.line if e.line is not None else '?'})"
                            for e in found],
            "diagnostics": [e.to_dict() for e in found],
        })

    summary = {
        "total": len(results),
        "passed": passed,
        "failed": failed,
        "violations": len(diagnostics),
        "parse_error": None,
    }
    return results, summary
