"""Exclusion by exact relative path."""

from os import PathLike
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Sequence, Set, Union

from dir2zip.paths import normalize_relative_path
from dir2zip.types import PathType

from .base_rules import BaseExclusionRules


class PathExclusionRules(BaseExclusionRules):
    """Exclusion rules matching exact paths relative to the source root.

    Every exclusion entry is normalized once when added: redundant separators,
    "." segments and trailing slashes are removed and host separators become "/".
    A candidate path is excluded only when its normalized form is equal to one of
    the stored entries. There is no wildcard or prefix matching: excluding a
    directory skips that directory node (and therefore everything below it, since
    the walker never descends into it), while ``sub/*.txt`` matches nothing.

    Entries that point outside the root (``../other``), absolute paths and entries
    that never match a visited node are accepted and simply have no effect.

    Attributes:
        paths (FrozenSet[str]): The normalized exclusion entries.

    Example:
        >>> rules = PathExclusionRules(["./sub/", "docs//notes.md"])
        >>> sorted(rules.paths)
        ['docs/notes.md', 'sub']
        >>> rules.exclude("sub")
        True
        >>> rules.exclude("sub/b.txt")
        False
        >>> rules.exclude("docs/notes.md")
        True
    """

    def __init__(self, paths: Optional[Iterable[PathType]] = None):
        """Initialize the rules from an iterable of relative paths.

        Args:
            paths: Relative paths to exclude. Empty strings and "." are ignored since
                they would name the root itself.
        """
        self._paths: Set[str] = set()
        for path in paths or ():
            self.add_rule(str(path))

    @property
    def paths(self) -> FrozenSet[str]:
        return frozenset(self._paths)

    def exclude(self, path: str) -> bool:
        if not self._paths:
            return False
        return normalize_relative_path(path) in self._paths

    def has_rules(self) -> bool:
        return bool(self._paths)

    def add_rule(self, rule: str) -> None:
        """Add one relative path to the exclusion set.

        Example:
            >>> rules = PathExclusionRules()
            >>> rules.add_rule("build/")
            >>> rules.exclude("build")
            True
        """
        if not rule:
            return
        normalized = normalize_relative_path(rule)
        if normalized != ".":
            self._paths.add(normalized)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load exclusion paths from one or more files, one path per line.

        Blank lines and lines starting with "#" are skipped. Surrounding whitespace
        is stripped from each line.

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
                for line in f.read().splitlines():
                    line = line.strip()
                    if line and not line.startswith("#"):
                        self.add_rule(line)
