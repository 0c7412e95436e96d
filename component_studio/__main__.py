"""Allow ``python -m component_studio``."""

from component_studio.cli import main

raise SystemExit(main())
