"""Resolve native values or names to downloader resume flags and log what they mean"""

# imports
from openmsitoolbox import LogOwner, Runnable
from ..utilities.config import DATA_TRANSFER_CONST
from ..utilities.argument_parsing import ARDataTransferArgumentParser
from .resume_flag import ResumeFlag


class ResumeFlagDescriber(LogOwner, Runnable):
    """
    Class that looks up :class:`~.ResumeFlag` values and logs their descriptions

    Values that don't match any known flag are reported as
    :attr:`~.ResumeFlag.UNKNOWN` with a warning, never as an error.
    """

    ARGUMENT_PARSER_TYPE = ARDataTransferArgumentParser

    #################### PUBLIC FUNCTIONS ####################

    @staticmethod
    def resolve(value):
        """
        Get the :class:`~.ResumeFlag` for a native integer value or a flag name

        :param value: the integer value or name of the flag
        :type value: int or str

        :return: the matching flag, or :attr:`~.ResumeFlag.UNKNOWN`
        :rtype: :class:`~.ResumeFlag`
        """
        if isinstance(value, str):
            return ResumeFlag.from_name(value)
        return ResumeFlag.from_integer(value)

    def describe_values(self, values):
        """
        Resolve each value to a flag, logging its name, integer value, and description

        :param values: native integer values and/or flag names
        :type values: list

        :return: a list of (value, flag) tuples in the order the values were given
        :rtype: list(tuple)
        """
        resolved = []
        for value in values:
            flag = self.resolve(value)
            if flag is ResumeFlag.UNKNOWN and not self._names_unknown(value):
                self.logger.warning(
                    f"WARNING: {value!r} is not a recognized resume flag "
                    f"and will be treated as {flag.name}"
                )
            self.logger.info(
                f"{value} -> {flag.name} ({flag.get_value()}): {flag.describe()}"
            )
            resolved.append((value, flag))
        return resolved

    #################### PRIVATE HELPER FUNCTIONS ####################

    @staticmethod
    def _names_unknown(value):
        """
        True if the value explicitly refers to the UNKNOWN sentinel itself
        """
        if isinstance(value, str):
            return value.strip().upper() in (
                ResumeFlag.UNKNOWN.name,
                DATA_TRANSFER_CONST.NATIVE_UNKNOWN_ENUM_VALUE_NAME.upper(),
            )
        return value == DATA_TRANSFER_CONST.INT32_MIN

    #################### CLASS METHODS ####################

    @classmethod
    def get_command_line_arguments(cls):
        superargs, superkwargs = super().get_command_line_arguments()
        args = [*superargs, "resume_flags"]
        kwargs = {
            **superkwargs,
            "logger_stream_level": DATA_TRANSFER_CONST.DEFAULT_LOGGER_STREAM_LEVEL,
        }
        return args, kwargs

    @classmethod
    def run_from_command_line(cls, args=None):
        """
        Run a :class:`~ResumeFlagDescriber` directly from the command line

        Calls :func:`~describe_values` on the flags given as command line (or given) arguments

        :param args: the list of arguments to send to the parser instead of getting them
            from sys.argv
        :type args: list, optional

        :return: the (value, flag) tuples that were described
        :rtype: list(tuple)
        """
        parser = cls.get_argument_parser()
        args = parser.parse_args(args=args)
        init_args, init_kwargs = cls.get_init_args_kwargs(args)
        describer = cls(*init_args, **init_kwargs)
        return describer.describe_values(args.resume_flags)


def main(args=None):
    """
    Main method to run from command line
    """
    ResumeFlagDescriber.run_from_command_line(args)


if __name__ == "__main__":
    main()
