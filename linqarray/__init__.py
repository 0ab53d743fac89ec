r"""
'  _     ___ _   _  ___    _
' | |   |_ _| \ | |/ _ \  / \   _ __ _ __ __ _ _   _
' | |    | ||  \| | | | |/ _ \ | '__| '__/ _` | | | |
' | |___ | || |\  | |_| / ___ \| |  | | | (_| | |_| |
' |_____|___|_| \_|\__\_\_/   \_\_|  |_|  \__,_|\__, |
'                                               |___/
"""

import logging

# expose the main class
from .sequence import QueryableSequence

# expose the factory functions
from .factories import (
    wrap,
    empty,
    from_range,
    as_linq,
    Q
)

# expose the error raised by first()
from .errors import NotFoundError

# library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "QueryableSequence",
    "wrap",
    "empty",
    "from_range",
    "as_linq",
    "Q",
    "NotFoundError"
]
