"""Entry point for ``python -m schema_names``."""

from schema_names.cli import main

raise SystemExit(main())
