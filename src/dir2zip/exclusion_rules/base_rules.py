from abc import ABC, abstractmethod
from typing import Sequence, Union

from dir2zip.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    The tree walker consults an exclusion rules object for every node it visits,
    passing the node's forward-slash path relative to the source root. Concrete
    implementations decide whether that node is skipped: exact relative paths
    (:class:`~dir2zip.exclusion_rules.path_rules.PathExclusionRules`) or
    gitignore-style patterns
    (:class:`~dir2zip.exclusion_rules.git_rules.GitIgnoreExclusionRules`).

    Example:
        >>> from dir2zip.exclusion_rules.path_rules import PathExclusionRules
        >>> rules = PathExclusionRules(["sub/c.txt"])
        >>> rules.exclude("sub/c.txt")
        True
        >>> rules.exclude("sub/b.txt")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The file or directory path to check, relative to the root of
                the directory being archived and using forward slashes.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def has_rules(self) -> bool:
        """Report whether any rule is configured. Assumed True unless overridden."""
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Rule types that can't be loaded from files use this default implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
