"""Static site generator for lightly marked-up plain-text posts.

This package exposes the CLI entry points used by the ``mksite`` console
script. Callers that render pages programmatically use
:class:`mksite.document.DocumentAssembler` directly.

Exports
-------
- ``app``: Cyclopts application holding the ``build`` and ``render`` commands.
- ``main``: Convenience function that runs the app and returns an exit code.

Examples
--------
>>> from mksite import main
>>> main(["build"])  # doctest: +SKIP
0
>>> from mksite import app
>>> app.name  # doctest: +SKIP
('mksite',)
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
