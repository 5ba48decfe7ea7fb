"""Constants used for native enum bindings and for some default parameter values"""

# imports
import os, logging


def level_name_from_env(env_var_name, default="info"):
    """
    Return the (lowercase) logging level name given by an environment variable,
    or the default if the variable is unset or isn't a level name
    """
    name = os.environ.get(env_var_name, "").strip()
    if name and isinstance(logging.getLevelName(name.upper()), int):
        return name.lower()
    return default


class DataTransferConstants:
    """
    Constants mirrored from the native data transfer library, plus logging defaults
    """

    # bounds of the signed 32-bit integers backing native enums
    INT32_MIN = -(2**31)
    INT32_MAX = 2**31 - 1
    # description attached to the "unknown" value of every generated enum
    UNKNOWN_ENUM_VALUE_DESCRIPTION = "Dummy value for all unknown cases"
    # prefix shared by the native downloader enumerator names
    NATIVE_ENUM_PREFIX = "ARDATATRANSFER_DOWNLOADER_"
    # native name of the "unknown" resume flag value
    NATIVE_UNKNOWN_ENUM_VALUE_NAME = (
        "eARDATATRANSFER_DOWNLOADER_RESUME_UNKNOWN_ENUM_VALUE"
    )
    # name of the environment variable overriding the default console log level
    LOGGER_STREAM_LEVEL_ENV_VAR = "ARDATATRANSFER_LOGGER_STREAM_LEVEL"
    # level name at/above which messages are logged to the console by default
    DEFAULT_LOGGER_STREAM_LEVEL = level_name_from_env(LOGGER_STREAM_LEVEL_ENV_VAR)


DATA_TRANSFER_CONST = DataTransferConstants()
