class InsensitiveString(str):
    """A str subclass that performs all matching without regard to case."""

    def __eq__(self, other):
        if isinstance(other, str):
            return self.lower() == other.lower()
        else:
            return super(InsensitiveString, self).__eq__(other)

    def __ne__(self, other):
        if isinstance(other, str):
            return self.lower() != other.lower()
        else:
            return super(InsensitiveString, self).__ne__(other)

    def __hash__(self):
        return hash(self.lower())

    def __contains__(self, other):
        if isinstance(other, str):
            return other.lower() in self.lower()
        else:
            return super(InsensitiveString, self).__contains__(other)
