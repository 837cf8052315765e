"""
dotconf - persistent hierarchical configuration for applications

Values are read and written through dot-delimited paths, persisted to a
JSON file on disk, and observable for change.
"""

from dotconf.core import ConfigStore, DotconfError, InvalidArgumentError
from dotconf.core.utils import escape_key

__version__ = "1.0.0"
__all__ = [
    "ConfigStore",
    "DotconfError",
    "InvalidArgumentError",
    "escape_key",
    "__version__",
]
