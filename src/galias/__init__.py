"""galias CLI entry point.

This package provides a Click-based CLI that maps short aliases such as
`co`, `pr` or `hr` onto git and hub invocations. See `g help` for details.
"""
