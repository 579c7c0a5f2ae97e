# path: src/runtime/__init__.py

"""
Runtime wiring package for the slide solver.

Holds the glue that stitches together:
- maps (reading and reporting)
- slide_nav (search)
- monitoring (events)

Usage:
    python -m cli.solve_maps puzzles/sample_ice.txt
"""
