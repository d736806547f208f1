"""Puts the repository root on ``sys.path`` for the ``dense_grid`` test suite."""
