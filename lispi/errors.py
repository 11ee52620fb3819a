class LispiError(Exception):
    """ Base class for all lispi errors"""
    pass

class LispiSyntaxError(LispiError):
    """ Raised by the reader when source text is malformed"""

class LispiIncompleteInput(LispiSyntaxError):
    """ Raised when source ends inside an open form or string"""

class LispiInvalidSymbol(LispiError):
    """ Raised when a non-symbol is used where a name is required"""

class LispiUnboundSymbol(LispiError):
    """ Raised when a symbol is used before it is bound"""

class LispiArityError(LispiError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class LispiTypeError(LispiError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class LispiEmptyListError(LispiError):
    """ Raised when head or rest is taken of the empty list"""

class LispiRecurOutsideFunction(LispiError):
    """ Raised when recur appears outside the tail position of a function body"""

class LispiImportError(LispiError):
    """ Raised when an imported file cannot be resolved or read"""

class LispiInvalidExpression(LispiError):
    """ Raised for structurally invalid forms such as ()"""

class LispiDivisionByZero(LispiError):
    """ Raised when dividing by zero"""

class LispiStackExhausted(LispiError):
    """ Raised when non-tail recursion runs out of stack"""
