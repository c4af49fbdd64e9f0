class PiCalculatorError(Exception):
    """Base class for invalid command-line input"""


class ArgumentCountError(PiCalculatorError):
    """Wrong number of command-line arguments

    Bases: PiCalculatorError"""


class MethodRangeError(PiCalculatorError):
    """Method is not one of 1, 2 or 3

    Bases: PiCalculatorError"""


class PrecisionRangeError(PiCalculatorError):
    """Precision is outside the supported number of decimal places

    Bases: PiCalculatorError"""
