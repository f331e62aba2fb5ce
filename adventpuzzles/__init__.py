"""Solutions to advent programming puzzles from the 2015 and 2023 events, one module per day."""

__version__ = "0.1.0"