"""Helper classes/constants used throughout ardatatransfer"""

from .argument_parsing import ARDataTransferArgumentParser
from .config import DATA_TRANSFER_CONST

__all__ = [
    "ARDataTransferArgumentParser",
    "DATA_TRANSFER_CONST",
]
