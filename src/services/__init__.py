"""
Mail handlers that can be chained in a worker.

This package contains the spy, thief and inspector stages, plus the
real delivery stage that always runs last.
"""

__all__ = ['spy', 'thief', 'inspector', 'delivery']
