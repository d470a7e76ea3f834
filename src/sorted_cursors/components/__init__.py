"""Concrete comparators, cursors, pools and combinators."""
