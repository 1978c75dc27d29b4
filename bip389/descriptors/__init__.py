from .checksum import descsum_check, descsum_checksum, descsum_create
from .errors import (
    ChecksumMismatchError,
    DescriptorParsingError,
    DuplicateTupleValueError,
    InvalidCharacterError,
    MalformedTupleValueError,
    MissingChecksumError,
    MissingPathNotationError,
    MultipathError,
    MultipleTuplesPerKeyError,
    NetworkMismatchError,
    NoPathMarkerFoundError,
    TupleInOriginError,
)
from .multipath import MultipathTuple, find_multipath_tuples, validate_multipath
from .parsing import (
    DescriptorPaths,
    fold_to_multipath,
    parse_paths,
    split_checksum,
    strip_checksum,
)
