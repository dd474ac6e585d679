"""Optional exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from dir2zip.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    These rules are opt-in and are combined with the exact-path rules through
    :class:`~dir2zip.exclusion_rules.composite_rules.CompositeExclusionRules`. They
    never change how exact exclusion paths are matched. Patterns are matched with
    the pathspec library the same way Git does, so globs, ``**``, directory-only
    patterns (ending in "/") and negations are all supported.

    The tree walker queries directories with a trailing "/" as well, so a pattern
    such as ``build/`` prunes the whole ``build`` directory.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules(patterns=["*.pyc", "!keep.pyc"])
        >>> rules.exclude("pkg/mod.pyc")
        True
        >>> rules.exclude("keep.pyc")
        False
        >>> rules.exclude("mod.py")
        False
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        patterns: Optional[Iterable[str]] = None,
    ):
        """Initialize with patterns from files and/or explicit pattern strings.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.
            patterns: Individual patterns, added after the file patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])

        if rules_files is not None:
            self.load_rules(rules_files)
        for pattern in patterns or ():
            self.add_rule(pattern)

    def exclude(self, path: str) -> bool:
        return self.spec.match_file(path)

    def has_rules(self) -> bool:
        return len(self.spec.patterns) > 0

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Later patterns may override earlier ones, particularly negations.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                gitignore_content = f.read().splitlines()

            self._extend(PathSpec.from_lines(GitWildMatchPattern, gitignore_content).patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("node_modules/")
            >>> rules.exclude("node_modules/")
            True
        """
        self._extend([GitWildMatchPattern(rule)])

    def _extend(self, patterns: Iterable[GitWildMatchPattern]) -> None:
        # Rebuild the spec so any compiled matcher sees the new patterns
        self.spec = PathSpec([*self.spec.patterns, *patterns])
