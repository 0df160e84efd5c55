"""Per-test options records for a specification-test suite.

An options file sits next to (or above) a spec test and tells the runner which
implementations should skip the test, which are expected to fail it, and which
may produce mismatching warnings. Records found along a directory hierarchy
are merged root-to-leaf into the effective options of a single test.

Example
-------
>>> parent = SpecOptions.from_yaml(":todo:\\n- libsass\\n")
>>> child = SpecOptions.from_yaml(":ignore_for:\\n- dart-sass\\n")
>>> options = parent.merge(child)
>>> options.get_mode("dart-sass")
'ignore'
>>> options.get_mode("libsass")
'todo'
>>> options.precision()
10
"""

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

IGNORE_FOR = ":ignore_for"
TODO = ":todo"
WARNING_TODO = ":warning_todo"
PRECISION = ":precision"

# Keys whose value is a list of implementation names
LIST_KEYS = (IGNORE_FOR, TODO, WARNING_TODO)

DEFAULT_PRECISION = 10

_QUOTED_KEY_RE = re.compile(r"'(:[^']+)':")


def normalize_option_key(key: str) -> str:
    """Return the symbolic form of a list option key.

    Parameters
    ----------
    key : str
        Either the symbolic key (``":todo"``) or its bare name (``"todo"``)

    Returns
    -------
    str
        The symbolic key

    Raises
    ------
    ValueError
        If the key does not name a list option
    """
    symbolic = key if key.startswith(":") else f":{key}"
    if symbolic not in LIST_KEYS:
        raise ValueError(
            f"Unknown option key: '{key}'. Available: {list(LIST_KEYS)}"
        )
    return symbolic


def _freeze(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy decoded data, turning list options into tuples."""
    frozen = {}
    for key, value in data.items():
        if key in LIST_KEYS and isinstance(value, list):
            value = tuple(value)
        frozen[key] = value
    return frozen


@dataclass(frozen=True)
class SpecOptions:
    """Immutable options of a spec test case.

    Every method that "modifies" the options returns a new instance; the
    receiver is never changed.

    Attributes
    ----------
    data : Mapping[str, Any]
        Read-only view of the decoded option fields keyed by their symbolic
        names. Keys other than the known options are kept as-is and written
        back by ``to_yaml``.
    """

    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "data", MappingProxyType(_freeze(self.data)))

    @classmethod
    def from_yaml(cls, content: str) -> "SpecOptions":
        """Create options from YAML text.

        An empty document produces options with no fields set. Malformed
        YAML raises ``yaml.YAMLError`` unchanged.
        """
        return cls(yaml.safe_load(content) or {})

    @classmethod
    def empty(cls) -> "SpecOptions":
        """Create options with no fields set."""
        return cls()

    @property
    def is_empty(self) -> bool:
        """Whether these options have no effect on test semantics."""
        for key, value in self.data.items():
            if key == PRECISION:
                if value is not None and value != DEFAULT_PRECISION:
                    return False
            elif value:
                return False
        return True

    def merge(self, other: "SpecOptions") -> "SpecOptions":
        """Layer ``other`` on top of these options.

        List options are concatenated (ours first, no deduplication). The
        precision of ``other`` wins when it has one.

        Parameters
        ----------
        other : SpecOptions
            More specific options, e.g. from a deeper directory

        Returns
        -------
        SpecOptions
            Merged options
        """
        merged: Dict[str, Any] = {
            key: [*(self.data.get(key) or ()), *(other.data.get(key) or ())]
            for key in LIST_KEYS
        }
        precision = other.data.get(PRECISION)
        if precision is None:
            precision = self.data.get(PRECISION)
        if precision is not None:
            merged[PRECISION] = precision
        logger.debug("Merged options %s with %s", self.data, other.data)
        return SpecOptions(merged)

    def get_mode(self, impl: str) -> Optional[str]:
        """Get the run mode of ``impl``: ``"ignore"``, ``"todo"`` or None.

        Ignore takes priority over todo.
        """
        if self.has_for_impl(impl, IGNORE_FOR):
            return "ignore"
        if self.has_for_impl(impl, TODO):
            return "todo"
        return None

    def is_warning_todo(self, impl: str) -> bool:
        """Whether warning mismatches are tolerated for ``impl``."""
        return self.has_for_impl(impl, WARNING_TODO)

    def has_for_impl(self, impl: str, key: str) -> bool:
        """Whether option ``key`` has an entry containing ``impl``.

        Entries match by substring, so ``"dart-sass: unsupported"`` matches
        the implementation ``"dart-sass"``.
        """
        entries = self.data.get(normalize_option_key(key))
        if not entries:
            return False
        return any(impl in str(entry) for entry in entries)

    def precision(self) -> int:
        """Get the numeric precision, defaulting to 10."""
        value = self.data.get(PRECISION)
        return DEFAULT_PRECISION if value is None else value

    def add_impl(self, impl: str, key: str) -> "SpecOptions":
        """Return these options with ``impl`` appended to option ``key``.

        Duplicates are not checked.
        """
        key = normalize_option_key(key)
        data = dict(self.data)
        data[key] = [*(self.data.get(key) or ()), impl]
        logger.debug("Added %s to %s", impl, key)
        return SpecOptions(data)

    def remove_impl(self, impl: str, key: str) -> "SpecOptions":
        """Return these options without the first ``key`` entry matching ``impl``.

        Parameters
        ----------
        impl : str
            Implementation name, matched by substring
        key : str
            List option to remove from

        Returns
        -------
        SpecOptions
            ``self`` when the option is absent or nothing matches. When the
            only entry is removed the option is dropped entirely rather than
            left as an empty list.
        """
        key = normalize_option_key(key)
        entries = self.data.get(key)
        if not entries:
            return self

        index = next((i for i, entry in enumerate(entries) if impl in str(entry)), None)
        if index is None:
            return self

        data = dict(self.data)
        if len(entries) == 1:
            del data[key]
        else:
            data[key] = [*entries[:index], *entries[index + 1:]]
        logger.debug("Removed %s from %s", entries[index], key)
        return SpecOptions(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary (lists instead of tuples)."""
        return {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in self.data.items()
        }

    def to_yaml(self) -> str:
        """Convert to YAML text with symbolic keys left unquoted."""
        text = yaml.safe_dump(self.to_dict(), sort_keys=False)
        return _QUOTED_KEY_RE.sub(r"\1:", text)
