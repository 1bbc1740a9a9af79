"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (safe to share)
- Module-level caching (no per-call allocation)

Usage:
    from jsdev.charsets import PRE_REGEXP

    if left in PRE_REGEXP:
        ...
"""

import string

# End of input. Never a member of any set below.
EOF = ""

# Characters after which a bare slash opens a regexp literal instead of
# dividing. Keep this exact set; output compatibility depends on it.
PRE_REGEXP: frozenset[str] = frozenset("(,=:[!&|?{};")

# String literal openers: single, double and template quotes
QUOTES: frozenset[str] = frozenset("'\"`")

# Macro names and targets
IDENTIFIER_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_$.")
MAX_NAME_LENGTH = 80

# Condition delimiters. Kinds are not matched against each other.
OPENERS: frozenset[str] = frozenset("({[")
CLOSERS: frozenset[str] = frozenset(")}]")

# Whitespace that may separate a macro header from its body
SEPARATORS: frozenset[str] = frozenset(" \t")


def is_significant(char: str) -> bool:
    """Check if char counts as the left neighbour of a slash.

    Spaces and control characters do not.
    """
    return char > " "


def is_identifier(text: str) -> bool:
    """Check if text is a valid macro name or target."""
    return 0 < len(text) <= MAX_NAME_LENGTH and all(c in IDENTIFIER_CHARS for c in text)
