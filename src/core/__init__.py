"""
Core 2D coordinate utility: numeric representations, value types and
geometric queries.

Modules here are pure: the only side effect is diagnostic output through
an explicit reporter in src.core.geometry.calculator.
"""
