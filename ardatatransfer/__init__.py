"""Python bindings for enums of the ARDataTransfer native data transfer library"""

# imports
from .data_transfer.resume_flag import (
    ResumeFlag,
    value_of,
    from_integer,
    from_name,
    describe,
)
from .data_transfer.resume_flag_describer import ResumeFlagDescriber
from .version import __version__

__all__ = [
    "__version__",
    "ResumeFlag",
    "ResumeFlagDescriber",
    "value_of",
    "from_integer",
    "from_name",
    "describe",
]
