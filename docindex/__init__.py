"""docindex - Client-side Implementors Index.

This package hands generated implementor tables to a documentation page:
- Fragment definitions (one ImplementorTable per trait)
- The registrar that delivers a table to the page hook or the pending slot
- The page-side aggregator that builds an "Implementors" section
"""

__version__ = "0.1.0"
