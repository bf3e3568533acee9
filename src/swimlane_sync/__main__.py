"""Allow running as ``python -m swimlane_sync``."""

from swimlane_sync.cli import main

main()
