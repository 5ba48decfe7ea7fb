"""Custom argument parser and associated functions"""

# imports
from openmsitoolbox import OpenMSIArgumentParser
from .config import DATA_TRANSFER_CONST

#################### CALLBACK FUNCTIONS ####################


def int32(argval):
    """
    make sure a given value is an integer that fits in a signed 32-bit native int
    """
    try:
        argval = int(argval)
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"ERROR: could not convert {argval} to an integer in int32! Exception: {exc}"
        ) from exc
    if not DATA_TRANSFER_CONST.INT32_MIN <= argval <= DATA_TRANSFER_CONST.INT32_MAX:
        raise ValueError(
            f"ERROR: invalid argument: {argval} must fit in a signed 32-bit integer!"
        )
    return argval


def resume_flag_arg(argstring):
    """
    convert a string argument into a native resume flag value (an int) or
    a flag name (a str), raising an exception if it's neither
    """
    argstring = str(argstring).strip()
    try:
        return int32(argstring)
    except ValueError as exc:
        if argstring.isidentifier():
            return argstring
        raise ValueError(
            f"ERROR: {argstring} is neither a 32-bit integer nor a resume flag name!"
        ) from exc


#################### ARGUMENT PARSER CLASS ####################


class ARDataTransferArgumentParser(OpenMSIArgumentParser):
    """
    An ArgumentParser with the arguments used by ardatatransfer programs.

    All constructor arguments get passed to the underlying :class:`argparse.ArgumentParser` object.

    Arguments for the parser are defined in the
    :attr:`~ARDataTransferArgumentParser.ARGUMENTS` class variable, which is a dictionary.
    The keys are names of arguments, and the values are lists. The first entry in each
    list is a string reading "positional" or "optional" depending on the type of argument,
    and the second entry is a dictionary of keyword arguments to send to
    :func:`argparse.ArgumentParser.add_argument`.
    """

    ARGUMENTS = {
        **OpenMSIArgumentParser.ARGUMENTS,
        "resume_flags": [
            "positional",
            {
                "nargs": "+",
                "type": resume_flag_arg,
                "help": (
                    "Native integer values (like 0 or 1) or names (like RESUME_TRUE or "
                    "ARDATATRANSFER_DOWNLOADER_RESUME_TRUE) of downloader resume flags"
                ),
            },
        ],
    }
