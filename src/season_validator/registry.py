"""Rule registry with auto-discovery of ValidationRule subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from pathlib import Path

from season_validator.models.enums import Severity, ValidationMode
from season_validator.rules.base import ValidationRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Discovers and manages all ValidationRule implementations.

    Auto-discovers rules by scanning the rules/ package tree for concrete
    subclasses of ValidationRule that declare a ``rule_id``. New rules are
    added by placing a .py file in the matching severity subdirectory.
    """

    def __init__(self) -> None:
        self._rules: dict[str, ValidationRule] = {}

    def discover_rules(self) -> None:
        """Scan the rules package tree and register all ValidationRule subclasses."""
        import season_validator.rules as rules_pkg

        rules_path = Path(rules_pkg.__file__).parent  # type: ignore[arg-type]
        self._scan_package(rules_pkg.__name__, str(rules_path))
        logger.debug("Discovered %d validation rules", len(self._rules))

    def _scan_package(self, package_name: str, package_path: str) -> None:
        """Recursively import all modules under a package and register rules."""
        for _, module_name, _ in pkgutil.walk_packages(
            [package_path], prefix=package_name + "."
        ):
            try:
                module = importlib.import_module(module_name)
            except ImportError as exc:
                logger.warning("Skipping rule module %s: %s", module_name, exc)
                continue

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, ValidationRule)
                    and attr is not ValidationRule
                    and getattr(attr, "rule_id", None) is not None
                    and not getattr(attr, "__abstractmethods__", set())
                ):
                    self.register(attr())

    def register(self, rule: ValidationRule) -> None:
        """Register a rule instance by its rule_id."""
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> ValidationRule | None:
        """Retrieve a rule by its rule_id."""
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[ValidationRule]:
        """Return all registered rules in catalog order (V01.1 first)."""
        return sorted(self._rules.values(), key=lambda r: r.rule_id)

    def get_rules_for_mode(self, mode: ValidationMode) -> list[ValidationRule]:
        """Rules that run in *mode*, in catalog order."""
        return [r for r in self.get_all_rules() if r.applies_to(mode)]

    def get_rules_by_severity(self, *severities: Severity) -> list[ValidationRule]:
        """Rules in any of the given severity tiers, in catalog order."""
        return [r for r in self.get_all_rules() if r.severity in severities]

    @property
    def rule_ids(self) -> list[str]:
        """List all registered rule IDs."""
        return list(self._rules.keys())


def _discovered() -> RuleRegistry:
    registry = RuleRegistry()
    registry.discover_rules()
    return registry


def all_rules() -> list[ValidationRule]:
    """The full catalog, V01-V14."""
    return _discovered().get_all_rules()


def critical_rules() -> list[ValidationRule]:
    """Structural rules V01-V05, the bundle used for the save gate."""
    return _discovered().get_rules_by_severity(Severity.CRITICAL)


def blocking_rules() -> list[ValidationRule]:
    """Consistency and reference rules V06-V13."""
    return _discovered().get_rules_by_severity(Severity.BLOCKING)
