from zope.interface import Attribute, Interface


class IChangeRecord(Interface):
    """
    One LDIF change record: an add, modify or delete of a single
    directory entry.

    >>> r = ChangeDelete('cn=foo,dc=example,dc=com')
    >>> print(r.dump().rstrip())
    dn: cn=foo,dc=example,dc=com
    changetype: delete

    """

    distinguishedName = Attribute("The DN of the entry the change applies to.")

    change = Attribute("The ChangeType of this record.")

    def dump():
        """
        Render the record as an LDIF change block.

        Every line, the last one included, is terminated by a line
        separator. Lines are folded to at most 76 columns.

        @rtype: str
        """

    def toWire():
        """
        The dump() of this record encoded as utf-8.

        @rtype: bytes
        """


class IModSpec(Interface):
    """
    A single add, delete or replace operation of a modify change
    record, scoped to one attribute type.
    """

    modSpecType = Attribute("The ModSpecType of this operation.")

    attributeType = Attribute(
        "Attribute type written on the operation line, eg. 'userCertificate'.")

    attributeDescription = Attribute(
        "Attribute description written on the value lines, "
        "eg. 'userCertificate;binary'. Same as attributeType unless "
        "given explicitly.")

    attributeValues = Attribute("Tuple of the values, in output order.")

    def asLDIF():
        """
        The logical lines of this operation, neither folded nor
        terminated: the operation line, one line per value, and the
        closing "-".

        @rtype: list of str
        """
