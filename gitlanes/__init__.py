"""gitlanes - lane and color layout for git history graphs."""

__version__ = "0.1.0"
