# imports
import pathlib
from ardatatransfer.utilities.config import DATA_TRANSFER_CONST


class TestRoutineConstants:
    """
    constants used in running tests
    """

    # Paths to locations inside the code base
    TEST_DIR_PATH = (pathlib.Path(__file__).parent.parent).resolve()
    PACKAGE_ROOT_DIR = TEST_DIR_PATH.parent / "ardatatransfer"

    # native values of the resume flags, keyed by name
    NATIVE_RESUME_VALUES = {
        "UNKNOWN": -2147483648,
        "RESUME_FALSE": 0,
        "RESUME_TRUE": 1,
    }
    # integers that don't match any resume flag
    UNMATCHED_INTEGERS = [
        -1,
        2,
        3,
        100,
        DATA_TRANSFER_CONST.INT32_MIN + 1,
        DATA_TRANSFER_CONST.INT32_MAX,
        2**40,
        -(2**40),
    ]
    # number of threads and lookups per thread in the concurrent lookup test
    N_LOOKUP_THREADS = 16
    N_LOOKUPS_PER_THREAD = 500


TEST_CONST = TestRoutineConstants()
