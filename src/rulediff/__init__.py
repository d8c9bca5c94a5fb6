"""rulediff - detect rule modules touched by a branch and build a regression config."""

__version__ = "0.1.0"
