# neki_lang/application/processing/patterns.py

"""Per-extension path patterns deciding which values are translatable"""

# Standard library imports
from collections.abc import Iterable
from collections.abc import Mapping
from logging import getLogger
from re import Pattern
from re import compile
from re import error as RegexError

logger = getLogger(__name__)


class PatternSet:
    """Compiled patterns for one file extension

    A path matches when any pattern finds a match anywhere in it; patterns
    that need whole-path matching anchor themselves with `^` and `$`. An
    empty set never matches.
    """

    __slots__ = ("_patterns",)

    def __init__(self, patterns: Iterable[str]) -> None:
        self._patterns: tuple[Pattern[str], ...] = tuple(compile(p) for p in patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    @property
    def patterns(self) -> list[str]:
        """Source text of the compiled patterns, in configuration order"""
        return [p.pattern for p in self._patterns]

    def matches(self, path: str) -> bool:
        """Check whether any pattern matches the pointer path"""
        return any(p.search(path) for p in self._patterns)


class PatternConfig:
    """Pattern sets keyed by file extension

    Built once per run and only read afterwards. Extensions absent from the
    mapping are not processed at all.
    """

    __slots__ = ("_sets",)

    def __init__(self, patterns: Mapping[str, Iterable[str]]) -> None:
        """Compile every pattern of every extension

        Args:
            patterns: Mapping of extension (e.g. `item` or `item.patch`) to
                regular expressions

        Raises:
            ValueError: If any pattern is not a valid regular expression
        """
        self._sets: dict[str, PatternSet] = {}
        for extension, raw_patterns in patterns.items():
            raw_patterns = list(raw_patterns)
            try:
                self._sets[extension] = PatternSet(raw_patterns)
            except RegexError as e:
                raise ValueError(
                    f"Invalid pattern {e.pattern!r} for extension {extension!r}: {e}"
                ) from e
            logger.debug(f"Compiled {len(raw_patterns)} patterns for .{extension}")

    @property
    def extensions(self) -> list[str]:
        """Configured extensions, in configuration order"""
        return list(self._sets)

    def has(self, extension: str) -> bool:
        """Check whether files with this extension are processed"""
        return extension in self._sets

    def matcher_for(self, extension: str) -> PatternSet | None:
        """Get the pattern set for an extension, None if it is not configured"""
        return self._sets.get(extension)
