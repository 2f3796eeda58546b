"""Argument parsing — flag extraction, typed values, and context resolution.

Pure functions over a raw argument line and an optional display
context snapshot. Nothing here performs I/O or mutates shared state.
"""
