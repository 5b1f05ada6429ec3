"""Client for tracking R&D tax-relief claims and their linked projects."""

__version__ = "0.1.0"
