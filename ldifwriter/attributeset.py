from ldifwriter._encoder import check_values
from ldifwriter.errors import checkName
from ldifwriter.insensitive import InsensitiveString


class LDIFAttribute(tuple):
    def __new__(cls, attributeType, values=None):
        """
        Represents all the values for one attribute of an entry being
        added. An entry might have "cn" or "objectClass" or "uid"
        attributes, and this class represents each of those.

        You can find the name of the attribute (eg. "uid") with the
        ``.attributeType`` member variable.

        The values are the items of this tuple, in the order they were
        given, which is also the order they are written in. Nothing is
        sorted or deduplicated.

        @param attributeType: the type of the attribute, eg "uid".
        @type attributeType: str
        @param values: values for this attribute, eg. ["jsmith"]. Each
            is a str or a byte sequence. None means no values.
        """
        checkName('attributeType', attributeType, 'attribute type')
        self = super(LDIFAttribute, cls).__new__(cls, check_values(values))
        self._attributeType = InsensitiveString(attributeType)
        return self

    @property
    def attributeType(self):
        return self._attributeType

    @property
    def attributeValues(self):
        return tuple(self)

    def __repr__(self):
        attributes = ', '.join([repr(x) for x in self])
        return '%s(%r, [%s])' % (
            self.__class__.__name__,
            str(self.attributeType),
            attributes)

    def __eq__(self, other):
        """
        Note that LDIFAttributes can also be compared against a list
        or tuple of values. In that case the attributeType will be
        ignored. Value order is significant.
        """
        if isinstance(other, LDIFAttribute):
            if self.attributeType != other.attributeType:
                return False
            return tuple(self) == tuple(other)
        if isinstance(other, (str, bytes, bytearray, memoryview)):
            return NotImplemented
        try:
            return tuple(self) == tuple(other)
        except TypeError:
            return NotImplemented

    def __ne__(self, other):
        r = self.__eq__(other)
        if r is NotImplemented:
            return r
        return not r

    def __hash__(self):
        # Same hash as a plain tuple of the values, which compares equal.
        return hash(tuple(self))
