"""Lua Documentation Generator.

Extracts API documentation from annotated comment blocks in Lua
sources and renders it as a browsable static site.
"""

__version__ = "0.1.0"
