class DescriptorParsingError(ValueError):
    """Error while parsing a Bitcoin Output Descriptor from its string representation"""

    def __init__(self, message: str):
        self.message: str = message
        super().__init__(message)


class InvalidCharacterError(DescriptorParsingError):
    """A character outside of the descriptor input charset"""

    def __init__(self, char: str, index: int):
        self.char: str = char
        self.index: int = index
        super().__init__(f"Invalid character '{char}' at position {index} in descriptor")


class MissingChecksumError(DescriptorParsingError):
    def __init__(self, message: str = "Missing checksum"):
        super().__init__(message)


class ChecksumMismatchError(DescriptorParsingError):
    pass


class MissingPathNotationError(DescriptorParsingError):
    def __init__(
        self,
        message: str = "Descriptor must contain either multipath notation (<0;1>/* or <0;1>/NUM) or path notation (0/* or 1/*)",
    ):
        super().__init__(message)


class NoPathMarkerFoundError(DescriptorParsingError):
    def __init__(
        self,
        message: str = "Descriptor must contain /0/* or /1/* paths to fold into multipath notation",
    ):
        super().__init__(message)


class MultipathError(DescriptorParsingError):
    """A multipath (BIP389) key expression violates the BIP's constraints"""


class TupleInOriginError(MultipathError):
    def __init__(
        self, message: str = "Multipath specifier cannot appear in origin [xfp/path]"
    ):
        super().__init__(message)


class DuplicateTupleValueError(MultipathError):
    def __init__(self, message: str = "Duplicate values not allowed in multipath tuple"):
        super().__init__(message)


class MultipleTuplesPerKeyError(MultipathError):
    def __init__(
        self, message: str = "Only one multipath specifier allowed per Key Expression"
    ):
        super().__init__(message)


class MalformedTupleValueError(MultipathError):
    pass


class NetworkMismatchError(ValueError):
    """The extended keys of a descriptor don't belong to the requested network"""

    def __init__(self, message: str):
        self.message: str = message
        super().__init__(message)
