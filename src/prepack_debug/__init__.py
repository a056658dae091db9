"""
prepack-debug: compile fb-www bundles with Prepack and report how React
components were evaluated.
"""

__version__ = "0.1.0"
