"""scopectl - Search-scope membership engine.

Decides which resources of a hierarchical file tree belong to a
text-search operation: minimal root sets, file name patterns and
derived-resource exclusion.
"""

__version__ = "0.1.0"
