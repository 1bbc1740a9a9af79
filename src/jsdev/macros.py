"""Macro table for name lookup and registration.

The table maps macro names to an optional target call name. It is built
once before scanning and never changes afterwards.

Thread Safety:
MacroTable is immutable after creation. Safe to share.
Use MacroTableBuilder for mutable construction.

Example:
    >>> builder = MacroTableBuilder()
    >>> builder.register("debug")
    >>> builder.register_spec("log:console.log")
    >>> table = builder.build()
    >>> table.get("log").target
    'console.log'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from jsdev.charsets import is_identifier
from jsdev.errors import ConfigError


@dataclass(frozen=True, slots=True)
class Macro:
    """One registered macro.

    Attributes:
        name: Name that follows ``/*`` in the source
        target: Call name wrapped around the body, or None for a bare block
    """

    name: str
    target: str | None = None

    def __str__(self) -> str:
        if self.target is None:
            return self.name
        return f"{self.name}:{self.target}"


class MacroTable:
    """Immutable, ordered table of macros.

    When two entries share a name the first one registered wins.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_macros", "_by_name")

    def __init__(self, macros: tuple[Macro, ...]) -> None:
        """Initialize table with pre-validated entries.

        Use MacroTableBuilder to create instances.
        """
        self._macros = macros
        by_name: dict[str, Macro] = {}
        for macro in macros:
            by_name.setdefault(macro.name, macro)
        self._by_name = by_name

    def match(self, candidate: str) -> int | None:
        """Find the first entry whose name equals candidate.

        Args:
            candidate: Identifier read after ``/*``

        Returns:
            Index of the entry, or None if nothing matches
        """
        for index, macro in enumerate(self._macros):
            if macro.name == candidate:
                return index
        return None

    def get(self, name: str) -> Macro | None:
        """Get the macro registered under name."""
        return self._by_name.get(name)

    @property
    def names(self) -> tuple[str, ...]:
        """All registered names in registration order."""
        return tuple(macro.name for macro in self._macros)

    def __getitem__(self, index: int) -> Macro:
        return self._macros[index]

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Macro]:
        return iter(self._macros)

    def __len__(self) -> int:
        return len(self._macros)

    def __repr__(self) -> str:
        return f"MacroTable({', '.join(str(m) for m in self._macros)})"


def parse_macro_spec(spec: str) -> Macro:
    """Parse a command-line word of the form ``name`` or ``name:target``.

    There must be no spaces around the colon.

    Raises:
        ConfigError: If either part is empty or malformed
    """
    name, colon, target = spec.partition(":")
    if not is_identifier(name):
        raise ConfigError(spec)
    if colon and not is_identifier(target):
        raise ConfigError(spec)
    return Macro(name, target if colon else None)


class MacroTableBuilder:
    """Mutable builder for MacroTable.

    Register macros, then call build() to create an immutable table.

    Example:
        >>> builder = MacroTableBuilder()
        >>> builder.register("alarm", "alert")
        >>> table = builder.build()
    """

    __slots__ = ("_macros",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._macros: list[Macro] = []

    def register(self, name: str, target: str | None = None) -> MacroTableBuilder:
        """Register a macro.

        Args:
            name: Macro name
            target: Optional call name

        Returns:
            Self for chaining

        Raises:
            ConfigError: If name or target is empty or malformed
        """
        if not is_identifier(name):
            raise ConfigError(name if target is None else f"{name}:{target}")
        if target is not None and not is_identifier(target):
            raise ConfigError(f"{name}:{target}")
        self._macros.append(Macro(name, target))
        return self

    def register_spec(self, spec: str) -> MacroTableBuilder:
        """Register a macro from a ``name[:target]`` word.

        Returns:
            Self for chaining
        """
        self._macros.append(parse_macro_spec(spec))
        return self

    def register_all(self, specs: Iterable[str]) -> MacroTableBuilder:
        """Register several ``name[:target]`` words."""
        for spec in specs:
            self.register_spec(spec)
        return self

    def build(self) -> MacroTable:
        """Build immutable table from registered macros."""
        return MacroTable(tuple(self._macros))

    def __len__(self) -> int:
        return len(self._macros)


def build_macro_table(specs: Iterable[str]) -> MacroTable:
    """Build a table straight from ``name[:target]`` words.

    Example:
        >>> build_macro_table(["debug", "log:console.log"]).names
        ('debug', 'log')
    """
    return MacroTableBuilder().register_all(specs).build()
