"""Rule registry for formcheck.

Maps field identifiers to their FieldRule. A registry is built once
(usually from a form definition) and is read-only afterwards, so it can
be shared freely between evaluations.
"""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from formcheck.validation.types import (
    DuplicateFieldError,
    FieldRule,
    FormDefinitionError,
)


class RuleRegistry:
    """Immutable mapping of field identifier -> FieldRule.

    Lookups for unknown fields return None, which the evaluator treats as
    "unconstrained".

    Example:
        registry = RuleRegistry.from_rules([
            FieldRule(field="email", required=True, message="Invalid email"),
        ])
        rule = registry.lookup("email")
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: dict[str, FieldRule] | None = None):
        """
        Raises:
            FormDefinitionError: If a key differs from its rule's field
        """
        rules = dict(rules or {})
        for field_id, rule in rules.items():
            if field_id != rule.field:
                raise FormDefinitionError(
                    f"Rule for field '{rule.field}' is registered under '{field_id}'"
                )
        self._rules = MappingProxyType(rules)

    @classmethod
    def from_rules(cls, rules: Iterable[FieldRule]) -> "RuleRegistry":
        """Build a registry from rule records, keeping declaration order.

        Raises:
            DuplicateFieldError: If two rules share a field identifier
        """
        collected: dict[str, FieldRule] = {}
        for rule in rules:
            if rule.field in collected:
                raise DuplicateFieldError(
                    f"Field '{rule.field}' has more than one rule"
                )
            collected[rule.field] = rule
        return cls(collected)

    def lookup(self, field_id: str) -> FieldRule | None:
        """Get the rule for a field, or None if the field is unconstrained."""
        return self._rules.get(field_id)

    def is_registered(self, field_id: str) -> bool:
        return field_id in self._rules

    def fields(self) -> list[str]:
        """List registered field identifiers in declaration order."""
        return list(self._rules)

    def __iter__(self) -> Iterator[FieldRule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._rules

    def __setattr__(self, name, value):
        if hasattr(self, "_rules"):
            raise AttributeError("RuleRegistry is read-only")
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return f"RuleRegistry(fields={self.fields()!r})"
