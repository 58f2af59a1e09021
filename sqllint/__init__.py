from .engine import RuleEngine
from .linter import Linter, lint_sql_text
from .linterror import LintError, ParseFailure
from .script import Script

__all__ = ["Linter", "LintError", "ParseFailure", "RuleEngine", "Script", "lint_sql_text"]
