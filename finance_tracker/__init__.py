"""Mini README: Core package initializer for the personal finance tracker.

The tracker records income and expenses, keeps them in a dated flat text
file with running closing balances and reports savings. Subpackages:
``finance`` (ledger domain), ``storage`` (file format) and ``interface``
(console menu). Only the logging helper is re-exported here to keep imports
light.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
