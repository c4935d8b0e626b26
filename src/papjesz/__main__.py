"""Allow ``python -m papjesz``."""

from __future__ import annotations

from papjesz.cli.main import main

raise SystemExit(main())
