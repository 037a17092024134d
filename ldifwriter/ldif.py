"""
Support for writing directory change records as LDIF.

You probably want to use this only indirectly, as in
ChangeAdd(...).dump(), see ldifwriter.delta.

"""

# RFC2849: The LDAP Data Interchange Format (LDIF) - Technical Specification

import base64

from twisted.python import log

from ldifwriter import config, interfaces
from ldifwriter._encoder import check_value, is_binary, to_bytes
from ldifwriter.errors import checkName, checkNotNull, OutOfRangeError

# Longest physical line written, continuation lines included. Counted
# in characters, so a non-ASCII attribute description can take more
# octets than this.
MAX_LINE_LENGTH = 76

SEP = '\n'

_UNSAFE_INIT_CHARS = frozenset('\0\n\r :<')
_UNSAFE_CHARS = frozenset('\0\n\r')


def isSafeInitChar(s):
    """
    Whether the first character of s may start an unencoded value.

    SAFE-INIT-CHAR is any ASCII character except NUL, LF, CR, SPACE,
    colon and less-than. The empty string has no initial character
    and is considered safe.
    """
    checkNotNull('value', s)
    if not s:
        return True
    c = s[0]
    return ord(c) <= 127 and c not in _UNSAFE_INIT_CHARS


def isSafeString(s):
    """
    Whether s can be written after "type: " without base64 encoding.

    >>> isSafeString('ascii chars')
    True
    >>> isSafeString('EndsWithSpace ')
    False
    """
    checkNotNull('value', s)
    if not s:
        return True
    if not isSafeInitChar(s):
        return False
    # RFC2849 note 8: values ending with SPACE should be base64 encoded.
    if s.endswith(' '):
        return False
    for c in s:
        if ord(c) > 127 or c in _UNSAFE_CHARS:
            return False
    return True


def toBase64(value):
    """
    Base64 encode text (as utf-8) or a byte sequence, on one line.
    """
    return base64.b64encode(to_bytes(value)).decode('ascii')


def attributeAsLDIF(attribute, value):
    """
    Return the attrval-spec line for one value, without line separator
    and without folding.

    @param attribute: the attribute description, eg. "cn" or
        "userCertificate;binary".
    @param value: the value, text or bytes. Bytes are always base64
        encoded, text only when it is not a safe string.
    """
    checkName('attribute', attribute, 'attribute description')
    value = check_value(value)
    if is_binary(value) or not isSafeString(value):
        return '%s:: %s' % (attribute, toBase64(value))
    return '%s: %s' % (attribute, value)


def wrap(line):
    """
    Fold a logical line so that no physical line is longer than
    MAX_LINE_LENGTH. Continuation lines start with a single space.

    Splits purely on column count. Removing the first character of
    every continuation line and joining everything back together
    gives the original line.
    """
    checkNotNull('line', line)
    if len(line) <= MAX_LINE_LENGTH:
        return line
    width = MAX_LINE_LENGTH - 1
    lines = [line[:MAX_LINE_LENGTH]]
    for i in range(MAX_LINE_LENGTH, len(line), width):
        lines.append(' ' + line[i:i + width])
    return SEP.join(lines)


def asLDIF(lines):
    """
    Fold and join logical lines into one LDIF block, terminated by
    a line separator.
    """
    return ''.join([wrap(x) + SEP for x in lines])


def _header():
    return 'version: 1' + SEP + SEP


def manyAsLDIF(records, versionHeader=None):
    """
    Write several change records as one LDIF document.

    @param records: iterable of IChangeRecord providers.
    @param versionHeader: start the document with "version: 1". If
        None, the [ldif] version-header configuration option decides.
    """
    checkNotNull('records', records)
    records = list(records)
    for record in records:
        if not interfaces.IChangeRecord.providedBy(record):
            raise OutOfRangeError(
                'records', '%r is not a change record' % (record,))
    if versionHeader is None:
        versionHeader = config.useVersionHeader()

    s = []
    if versionHeader:
        s.append(_header())
    s.append(SEP.join([record.dump() for record in records]))
    log.msg('Wrote %d LDIF change records' % len(records), debug=True)
    return ''.join(s)
