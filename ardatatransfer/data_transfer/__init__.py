"""Enums used by the native downloaders and uploaders"""

from .resume_flag import ResumeFlag
from .resume_flag_describer import ResumeFlagDescriber

__all__ = [
    "ResumeFlag",
    "ResumeFlagDescriber",
]
