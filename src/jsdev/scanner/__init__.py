"""Single-pass macro-comment scanner for JSDev.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (mixin composition + main loop)
├── expander.py          # Macro expansion shapes
└── scanners/            # Context-specific scanners
    ├── literal.py       # String and regexp literals
    ├── condition.py     # Balanced macro condition
    └── stuff.py         # Macro body up to */

Usage:
    >>> import io
    >>> from jsdev.macros import build_macro_table
    >>> from jsdev.scanner import Scanner
    >>> out = io.StringIO()
    >>> Scanner(io.StringIO("/*debug x=1*/"), out, build_macro_table(["debug"])).run()
    >>> out.getvalue()
    '{x=1;}'

"""

from jsdev.scanner.core import Scanner

__all__ = ["Scanner"]
