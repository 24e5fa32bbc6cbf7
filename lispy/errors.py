
class LispyError(Exception):
    """ Base class for all lispy errors"""
    pass

class LispySyntaxError(LispyError):
    """ Raised when the reader meets malformed input"""
    pass

class LispyUnboundSymbol(LispyError, LookupError):
    """ Raised when a symbol is used before it is bound"""
    pass

class LispyTypeError(LispyError, TypeError):
    """ Raised when a value has the wrong shape for an operation"""

class LispyArityError(LispyError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class LispyStructureError(LispyError):
    """ Raised when list structure cannot be walked or extended"""

class LispyRecursionError(LispyError):
    """ Raised when evaluation exceeds the host recursion limit"""
