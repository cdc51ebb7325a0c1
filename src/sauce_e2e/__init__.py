"""Sauce Demo E2E - page-object purchase flow suite for saucedemo.com."""

__version__ = "0.1.0"
