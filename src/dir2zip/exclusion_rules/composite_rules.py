"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules excludes it. The archiver
    uses this to combine exact-path exclusions with optional gitignore patterns.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from dir2zip.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> from dir2zip.exclusion_rules.path_rules import PathExclusionRules
        >>> composite = CompositeExclusionRules(
        ...     [PathExclusionRules(["sub/c.txt"]), GitIgnoreExclusionRules(patterns=["*.log"])]
        ... )
        >>> composite.exclude("sub/c.txt")
        True
        >>> composite.exclude("debug.log")
        True
        >>> composite.exclude("a.txt")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine, evaluated in order.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)
