"""
dictbreak - Dictionary-driven word segmentation for scripts written without spaces.

Divides runs of Burmese (Myanmar) text into words using dictionary lookups,
bounded lookahead and a heuristic resynchronization scan. Script ranges are
chosen by the caller; the engine only divides what it is handed.
"""

__version__ = "0.1.0"
