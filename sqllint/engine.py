import importlib
import json
import logging
import pkgutil

from .rules.rule_base import RuleBase

RULES_PACKAGE = "sqllint.rules"

logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Rule registry. Maps rule id to rule class and selects the active rules
    from a checks config:

        {"boolean_field": {"enabled": true, "rule_name": "...", ...params}}

    Without a config every discovered rule is active with its defaults.
    """

    def __init__(self, checks_config_path=None, checks=None):
        if checks is None and checks_config_path is not None:
            with open(checks_config_path, "r", encoding="utf-8") as f:
                checks = json.load(f)
        self.config = checks

        self.rules = {}         # id → rule class object
        self.active_rules = []  # (rule class, params), in registration order

        self._discover_rules()
        self._load_active_rules()

    def _discover_rules(self):
        """Dynamically discover all rules under sqllint.rules.*"""
        rules_pkg = importlib.import_module(RULES_PACKAGE)

        for _, name, _ in pkgutil.iter_modules(rules_pkg.__path__):
            mod = importlib.import_module(f"{RULES_PACKAGE}.{name}")

            # find classes inheriting RuleBase
            for attr in dir(mod):
                obj = getattr(mod, attr)
                if (
                    isinstance(obj, type)
                    and issubclass(obj, RuleBase)
                    and obj is not RuleBase
                ):
                    rid = getattr(obj, "id", None)
                    if rid and rid not in self.rules:
                        self.rules[rid] = obj

    def register(self, rule_cls, params=None):
        """Add a rule class outside sqllint.rules and activate it."""
        self.rules[rule_cls.id] = rule_cls
        self.active_rules.append((rule_cls, self._params(rule_cls, params or {})))

    @staticmethod
    def _params(rule_cls, params):
        # Inject rule name into params for access inside rule
        params = dict(params)  # copy
        params.setdefault("rule_name", rule_cls.rule_name)
        return params

    def _load_active_rules(self):
        """Collect the rules that are enabled in config."""
        if self.config is None:
            for rule_cls in self.rules.values():
                self.active_rules.append((rule_cls, self._params(rule_cls, {})))
            return

        for rid, params in self.config.items():

            # Skip disabled rules
            if not params.get("enabled", False):
                continue

            rule_cls = self.rules.get(rid)

            if rule_cls is None:
                logger.warning("Rule '%s' not found in code. Skipping.", rid)
                continue

            self.active_rules.append((rule_cls, self._params(rule_cls, params)))

    def get_active_rules(self):
        return self.active_rules

    def get_active_ids(self):
        return [rule_cls.id for rule_cls, _ in self.active_rules]
