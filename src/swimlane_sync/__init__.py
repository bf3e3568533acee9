"""swimlane-sync - Keeps dashboard swimlanes in line with issue labels."""

__version__ = "0.1.0"
