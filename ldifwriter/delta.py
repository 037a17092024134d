"""
Changes to directory entries, written as LDIF change records.

A change record is one of ChangeAdd, ChangeModify or ChangeDelete.
Each owns the DN of the entry it applies to and only the payload its
kind needs. All of them are validated when constructed and immutable
afterwards, so dump() cannot fail.

>>> print(ChangeModify('cn=foo,dc=example,dc=com', [
...     ModSpec(ModSpecType.REPLACE, 'sn', ['bar']),
...     ]).dump().rstrip())
dn: cn=foo,dc=example,dc=com
changetype: modify
replace: sn
sn: bar
-
"""

import enum

from zope.interface import implementer

from ldifwriter import interfaces, ldif
from ldifwriter._encoder import check_values
from ldifwriter.attributeset import LDIFAttribute
from ldifwriter.errors import checkName, checkNotNull, OutOfRangeError


class ChangeType(enum.Enum):
    ADD = 'add'
    MODIFY = 'modify'
    DELETE = 'delete'


class ModSpecType(enum.Enum):
    ADD = 'add'
    REPLACE = 'replace'
    DELETE = 'delete'


def _checkEnum(enumType, argument, value):
    if isinstance(value, enumType):
        return value
    try:
        return enumType(value)
    except (ValueError, TypeError):
        raise OutOfRangeError(
            argument, 'Unknown %s %r' % (enumType.__name__, value))


def _checkDN(dn):
    return checkName('distinguishedName', dn, 'distinguished name')


@implementer(interfaces.IModSpec)
class ModSpec(object):
    def __init__(self, modSpecType, attributeType, attributeValues=None,
                 attributeDescription=None):
        """
        One operation of a modify change record.

        @param modSpecType: a ModSpecType, or its value ('add',
            'replace' or 'delete').
        @param attributeType: the attribute type the operation applies
            to, written on the "add:"/"delete:"/"replace:" line.
        @param attributeValues: values for the operation, in output
            order. None or empty means no values, which for replace
            and delete means "all values" and for add is an error.
        @param attributeDescription: written in front of every value
            instead of attributeType, eg. "userCertificate;binary".
        """
        self._modSpecType = _checkEnum(ModSpecType, 'modSpecType', modSpecType)
        self._attributeType = checkName(
            'attributeType', attributeType, 'attribute type')
        if attributeDescription is None:
            attributeDescription = attributeType
        self._attributeDescription = checkName(
            'attributeDescription', attributeDescription,
            'attribute description')
        self._attributeValues = check_values(attributeValues)

        if (self._modSpecType is ModSpecType.ADD
                and not self._attributeValues):
            raise OutOfRangeError(
                'attributeValues',
                'At least one attribute value must be present '
                'with an Add mod-spec')

    @property
    def modSpecType(self):
        return self._modSpecType

    @property
    def attributeType(self):
        return self._attributeType

    @property
    def attributeDescription(self):
        return self._attributeDescription

    @property
    def attributeValues(self):
        return self._attributeValues

    def asLDIF(self):
        r = ['%s: %s' % (self._modSpecType.value, self._attributeType)]
        for v in self._attributeValues:
            r.append(ldif.attributeAsLDIF(self._attributeDescription, v))
        r.append('-')
        return r

    def __iter__(self):
        return iter(self._attributeValues)

    def __len__(self):
        return len(self._attributeValues)

    def __repr__(self):
        r = '%s(%s, %r, %r' % (self.__class__.__name__,
                                self._modSpecType,
                                self._attributeType,
                                list(self._attributeValues))
        if self._attributeDescription != self._attributeType:
            r += ', attributeDescription=%r' % self._attributeDescription
        return r + ')'

    def _key(self):
        return (self._modSpecType,
                self._attributeType,
                self._attributeDescription,
                self._attributeValues)

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())


class _WireMixin(object):
    def toWire(self):
        return self.dump().encode('utf-8')

    def __str__(self):
        return self.dump()


@implementer(interfaces.IChangeRecord)
class ChangeAdd(_WireMixin):
    def __init__(self, distinguishedName, attributes=None):
        """
        Add an entry.

        @param distinguishedName: DN of the new entry.
        @param attributes: the attributes of the new entry, in output
            order: LDIFAttribute instances, (attributeType, values)
            pairs, or a mapping of attributeType to values. None means
            no attributes.
        """
        self._distinguishedName = _checkDN(distinguishedName)
        if attributes is None:
            attributes = ()
        elif hasattr(attributes, 'items'):
            attributes = attributes.items()
        self._attributes = tuple([self._toAttribute(a) for a in attributes])

    @staticmethod
    def _toAttribute(attribute):
        if isinstance(attribute, LDIFAttribute):
            return attribute
        if isinstance(attribute, (tuple, list)) and len(attribute) == 2:
            attributeType, values = attribute
            return LDIFAttribute(attributeType, values)
        raise OutOfRangeError(
            'attributes', '%r is not an LDIF attribute' % (attribute,))

    @property
    def distinguishedName(self):
        return self._distinguishedName

    @property
    def change(self):
        return ChangeType.ADD

    @property
    def ldifAttributes(self):
        return self._attributes

    @property
    def attributeTypes(self):
        return tuple([str(a.attributeType) for a in self._attributes])

    def get(self, attributeType, default=None):
        """
        The first attribute with the given type, compared without
        regard to case, or default.
        """
        for a in self._attributes:
            if a.attributeType == attributeType:
                return a
        return default

    def __getitem__(self, attributeType):
        a = self.get(attributeType)
        if a is None:
            raise KeyError(attributeType)
        return a

    def __contains__(self, attributeType):
        return self.get(attributeType) is not None

    def __iter__(self):
        return iter(self._attributes)

    def __len__(self):
        return len(self._attributes)

    def dump(self):
        lines = [ldif.attributeAsLDIF('dn', self._distinguishedName)]
        for a in self._attributes:
            for v in a:
                lines.append(ldif.attributeAsLDIF(a.attributeType, v))
        return ldif.asLDIF(lines)

    def __repr__(self):
        return '%s(%r, %r)' % (self.__class__.__name__,
                               self._distinguishedName,
                               list(self._attributes))

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return (self._distinguishedName == other._distinguishedName
                and self._attributes == other._attributes)

    def __hash__(self):
        return hash((self._distinguishedName, self._attributes))


@implementer(interfaces.IChangeRecord)
class ChangeModify(_WireMixin):
    def __init__(self, distinguishedName, modSpecs):
        """
        Modify the attributes of an entry.

        @param distinguishedName: DN of the entry.
        @param modSpecs: the operations, in the order they are applied.
            At least one is required.
        """
        self._distinguishedName = _checkDN(distinguishedName)
        checkNotNull('modSpecs', modSpecs,
                     'The mod-spec collection can not be null')
        modSpecs = tuple(modSpecs)
        if not modSpecs:
            raise OutOfRangeError(
                'modSpecs', 'At least one mod-spec is required')
        for m in modSpecs:
            if not interfaces.IModSpec.providedBy(m):
                raise OutOfRangeError(
                    'modSpecs', '%r is not a mod-spec' % (m,))
        self._modSpecs = modSpecs

    @property
    def distinguishedName(self):
        return self._distinguishedName

    @property
    def change(self):
        return ChangeType.MODIFY

    @property
    def modSpecs(self):
        return self._modSpecs

    def __iter__(self):
        return iter(self._modSpecs)

    def __len__(self):
        return len(self._modSpecs)

    def dump(self):
        lines = [ldif.attributeAsLDIF('dn', self._distinguishedName),
                 ldif.attributeAsLDIF('changetype', ChangeType.MODIFY.value)]
        for m in self._modSpecs:
            lines.extend(m.asLDIF())
        return ldif.asLDIF(lines)

    def __repr__(self):
        return '%s(%r, %r)' % (self.__class__.__name__,
                               self._distinguishedName,
                               list(self._modSpecs))

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return (self._distinguishedName == other._distinguishedName
                and self._modSpecs == other._modSpecs)

    def __hash__(self):
        return hash((self._distinguishedName, self._modSpecs))


@implementer(interfaces.IChangeRecord)
class ChangeDelete(_WireMixin):
    def __init__(self, distinguishedName):
        self._distinguishedName = _checkDN(distinguishedName)

    @property
    def distinguishedName(self):
        return self._distinguishedName

    @property
    def change(self):
        return ChangeType.DELETE

    def dump(self):
        return ldif.asLDIF([
            ldif.attributeAsLDIF('dn', self._distinguishedName),
            ldif.attributeAsLDIF('changetype', ChangeType.DELETE.value),
            ])

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self._distinguishedName)

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self._distinguishedName == other._distinguishedName

    def __hash__(self):
        return hash(self._distinguishedName)
