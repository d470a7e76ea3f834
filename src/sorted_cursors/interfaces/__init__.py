"""Protocol definitions for comparators, cursors and pooled iterators."""
