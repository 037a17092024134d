"""
Exceptions raised while building LDIF change records.

Every failure here is a violation of the caller's input contract and
is raised eagerly, when the offending object is constructed.
"""


class LDIFError(Exception):
    """Invalid LDIF input"""

    def __init__(self, argument=None, message=None):
        Exception.__init__(self, argument, message)
        self.argument = argument
        self.message = message

    def __str__(self):
        s = self.__doc__
        details = [x for x in (self.argument, self.message) if x]
        if details:
            s = ': '.join([s] + details)
        return s + '.'


class NullArgumentError(LDIFError, TypeError):
    """Required argument is missing"""


class OutOfRangeError(LDIFError, ValueError):
    """Argument is outside its allowed range"""


def checkNotNull(argument, value, message=None):
    if value is None:
        raise NullArgumentError(argument, message)
    return value


def checkName(argument, value, what):
    """
    Validate a required textual name (a DN, an attribute type or an
    attribute description).

    @param argument: the parameter name, reported in the error.
    @param value: the candidate value.
    @param what: human readable description, eg. "attribute type".

    @raises NullArgumentError: value is None.
    @raises OutOfRangeError: value is not a string, or is empty or
        contains only whitespace.
    """
    checkNotNull(argument, value, 'The %s can not be null' % what)
    if not isinstance(value, str):
        raise OutOfRangeError(
            argument, 'The %s must be a string, not %s'
            % (what, type(value).__name__))
    if not value.strip():
        raise OutOfRangeError(
            argument, 'The %s can not be empty or whitespace' % what)
    return value
