"""
    Encoding / decoding utilities
"""

from ldifwriter.errors import checkNotNull, OutOfRangeError

BINARY_TYPES = (bytes, bytearray, memoryview)


def is_binary(value):
    return isinstance(value, BINARY_TYPES)


def check_value(value):
    """
    Make sure value is something that can be written as an attribute
    value, i.e. text or a byte sequence. Byte sequences are frozen to
    bytes so later changes to a caller's bytearray are not seen.
    """
    checkNotNull('value', value, 'The attribute value can not be null')
    if isinstance(value, str):
        return value
    if is_binary(value):
        return bytes(value)
    raise OutOfRangeError(
        'value', 'Unsupported attribute value type %s' % type(value).__name__)


def to_bytes(value):
    """
    Converts an attribute value to its bytes representation:

    * Encodes to utf-8 if the value is a unicode string
    * Copies any bytes-like value into bytes()
    """
    value = check_value(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    return value


def check_values(values):
    """
    Turn an attribute's values into a tuple of checked values. None
    means no values, a single str or byte sequence means one value.
    """
    if values is None:
        return ()
    if isinstance(values, (str,) + BINARY_TYPES):
        values = (values,)
    try:
        values = iter(values)
    except TypeError:
        raise OutOfRangeError(
            'values', 'Attribute values must be a sequence, not %s'
            % type(values).__name__)
    return tuple([check_value(v) for v in values])
