"""Console entry point for ``python -m log_chain``.

Delegates to :func:`log_chain.cli.main` so the module invocation and the
``log-chain`` console script share exit-code handling.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
