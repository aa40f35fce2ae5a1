"""Slab income-tax estimator: pure calculator, FastAPI app, browser form and CLI."""

__version__ = "0.1.0"
