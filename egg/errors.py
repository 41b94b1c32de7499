from __future__ import annotations


class EggError(Exception):
    """ Base class for all Egg errors"""
    pass


class EggSyntaxError(EggError):
    """ Raised by the parser, and by special forms used with the wrong shape"""

    def __init__(self, message: str, pos: int | None = None):
        super().__init__(message)
        # Offset into the source text, when the error comes from the parser
        self.pos = pos


class EggEvaluationError(EggError):
    """ Base class for errors raised while evaluating a program"""


class EggUnboundSymbol(EggEvaluationError):
    """ Raised when an identifier is not bound in any enclosing scope"""

    def __init__(self, name: str):
        super().__init__(f"Undefined binding: {name}")
        self.name = name


class EggTypeError(EggEvaluationError):
    """ Raised when a value of the wrong type is applied or passed to a builtin"""


class EggArityError(EggEvaluationError):
    """ Raised when a function is called with the wrong number of arguments"""


class EggIndexError(EggEvaluationError):
    """ Raised when element() reads outside an array"""


class EggZeroDivisionError(EggEvaluationError):
    """ Raised when / is given a zero divisor"""


class EggOverflowError(EggEvaluationError):
    """ Raised when an arithmetic result does not fit in a float"""
