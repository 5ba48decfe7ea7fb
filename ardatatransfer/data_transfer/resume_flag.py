"""Python copy of the native eARDATATRANSFER_DOWNLOADER_RESUME enum"""

# imports
import enum
from ..utilities.config import DATA_TRANSFER_CONST


class ResumeFlag(enum.IntEnum):
    """
    Whether the downloader should resume a partially-transferred file or start it over.

    Members are integers with the same values as the native enum, so they can be
    passed anywhere the native value is expected. Looking up an integer that has no
    member returns :attr:`~ResumeFlag.UNKNOWN` instead of raising an error, so values
    added on the native side later still map to something.
    """

    def __new__(cls, value, description=None):
        member = int.__new__(cls, value)
        member._value_ = value
        member._description = description
        return member

    UNKNOWN = (
        DATA_TRANSFER_CONST.INT32_MIN,
        DATA_TRANSFER_CONST.UNKNOWN_ENUM_VALUE_DESCRIPTION,
    )
    RESUME_FALSE = 0
    RESUME_TRUE = 1

    @classmethod
    def _missing_(cls, value):
        # only called for values with no member
        if isinstance(value, int):
            return cls.UNKNOWN
        return None

    #################### PROPERTIES ####################

    @property
    def description(self):
        """
        The human-readable description of the flag, or None if it doesn't have one
        """
        return self._description

    @property
    def native_name(self):
        """
        The name of the corresponding enumerator in the native header
        """
        if self is ResumeFlag.UNKNOWN:
            return DATA_TRANSFER_CONST.NATIVE_UNKNOWN_ENUM_VALUE_NAME
        return f"{DATA_TRANSFER_CONST.NATIVE_ENUM_PREFIX}{self.name}"

    @property
    def is_known(self):
        """
        False for the :attr:`~ResumeFlag.UNKNOWN` sentinel, True otherwise
        """
        return self is not ResumeFlag.UNKNOWN

    #################### PUBLIC FUNCTIONS ####################

    def get_value(self):
        """
        The integer value of the flag, as used by the native library

        :rtype: int
        """
        return self._value_

    def describe(self):
        """
        The flag's description if it has one, otherwise its name

        :rtype: str
        """
        if self._description is not None:
            return self._description
        return self.name

    def __str__(self):
        return self.describe()

    #################### CLASS METHODS ####################

    @classmethod
    def from_integer(cls, value):
        """
        Get the flag for a native integer value

        :param value: the native value of the enum
        :type value: int

        :return: the flag with the given value, or :attr:`~ResumeFlag.UNKNOWN`
            if the value isn't one of the known flags
        :rtype: :class:`~ResumeFlag`

        :raises ValueError: if `value` isn't an int (floats are rejected even when
            they hold a whole number)
        """
        if not isinstance(value, int):
            raise ValueError(
                f"ERROR: resume flags are looked up from ints, not {type(value).__name__}"
            )
        return cls(value)

    @classmethod
    def from_name(cls, name):
        """
        Get the flag for a symbolic name like "RESUME_TRUE" or a native enumerator name
        like "ARDATATRANSFER_DOWNLOADER_RESUME_TRUE" (case is ignored)

        :param name: the name to look up
        :type name: str

        :return: the flag with the given name, or :attr:`~ResumeFlag.UNKNOWN`
            if the name doesn't match any of the known flags
        :rtype: :class:`~ResumeFlag`
        """
        name = name.strip().upper()
        for flag in cls:
            if name in (flag.name, flag.native_name.upper()):
                return flag
        return cls.UNKNOWN

    @classmethod
    def from_bool(cls, resume):
        """
        Get the flag to use for a transfer that should (or should not) be resumed

        :param resume: True if a partially-transferred file should be resumed
        :type resume: bool

        :rtype: :class:`~ResumeFlag`
        """
        return cls.RESUME_TRUE if resume else cls.RESUME_FALSE


def value_of(flag):
    """
    Return the native integer value of a :class:`~ResumeFlag`
    """
    return flag.get_value()


def from_integer(value):
    """
    Return the :class:`~ResumeFlag` for a native integer value
    (:attr:`~ResumeFlag.UNKNOWN` if there isn't one)
    """
    return ResumeFlag.from_integer(value)


def from_name(name):
    """
    Return the :class:`~ResumeFlag` for a symbolic or native name
    (:attr:`~ResumeFlag.UNKNOWN` if there isn't one)
    """
    return ResumeFlag.from_name(name)


def describe(flag):
    """
    Return the description of a :class:`~ResumeFlag`, falling back to its name
    """
    return flag.describe()
