"""Rent-vs-buy monthly projection and scenario stress-testing engine."""

__version__ = "0.1.0"
