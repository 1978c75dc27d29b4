from collections import namedtuple

from .checksum import descsum_check, descsum_create
from .errors import (
    ChecksumMismatchError,
    DescriptorParsingError,
    MissingChecksumError,
    MissingPathNotationError,
    NoPathMarkerFoundError,
)
from .multipath import MULTIPATH_RE, check_origins, validate_multipath

# The receive and change descriptors of a wallet.
DescriptorPaths = namedtuple("DescriptorPaths", ["external", "internal"])

EXTERNAL_STEP = "0/*"
INTERNAL_STEP = "1/*"
EXTERNAL_PATH = "/0/*"
INTERNAL_PATH = "/1/*"
MULTIPATH_PATH = "/<0;1>/*"


def strip_checksum(desc_str):
    """Get the descriptor without its checksum, if any. The checksum isn't checked."""
    return desc_str.split("#")[0]


def split_checksum(desc_str, strict=False):
    """Removes and check the provided checksum.
    If not told otherwise, this won't fail on a missing checksum.

    :param strict: whether to require the presence of the checksum.
    """
    desc_split = desc_str.split("#")
    if len(desc_split) != 2:
        if strict:
            raise MissingChecksumError()
        return desc_split[0]

    descriptor, checksum = desc_split
    if not descsum_check(desc_str):
        raise ChecksumMismatchError(
            f"Checksum '{checksum}' is invalid for '{descriptor}'"
        )

    return descriptor


def parse_paths(desc_str):
    """Get the external and internal descriptors from a single descriptor.

    The descriptor may either use a multipath specifier (<0;1>/*, <0h;1h>/*, or <A;B>/NUM)
    or be one of the two descriptors of the pair (with a 0/* or 1/* step). A multipath
    specifier is always expanded to a wildcard step.

    Generated descriptors don't have a checksum. A descriptor returned as is keeps its own.
    """
    descriptor = strip_checksum(desc_str)
    check_origins(descriptor)

    if MULTIPATH_RE.search(descriptor) is not None:
        validate_multipath(descriptor)

        external = MULTIPATH_RE.sub(lambda m: f"{m.group(1)}{m.group(2)}/*", descriptor)
        internal = MULTIPATH_RE.sub(lambda m: f"{m.group(3)}{m.group(4)}/*", descriptor)
        return DescriptorPaths(external, internal)

    if EXTERNAL_STEP in desc_str:
        internal = descriptor.replace(EXTERNAL_STEP, INTERNAL_STEP)
        return DescriptorPaths(desc_str, internal)

    if INTERNAL_STEP in desc_str:
        external = descriptor.replace(INTERNAL_STEP, EXTERNAL_STEP)
        return DescriptorPaths(external, desc_str)

    raise MissingPathNotationError()


def fold_to_multipath(external, internal=None):
    """Get a single multipath descriptor (with checksum) out of a receive or change
    descriptor.

    Every /0/* and /1/* step is replaced by /<0;1>/*.

    :param internal: the change descriptor, if the pair is available. It must only differ
                     from the external one by its derivation steps.
    """
    descriptor = strip_checksum(external)
    if EXTERNAL_PATH not in descriptor and INTERNAL_PATH not in descriptor:
        raise NoPathMarkerFoundError()

    multipath_desc = descriptor.replace(EXTERNAL_PATH, MULTIPATH_PATH).replace(
        INTERNAL_PATH, MULTIPATH_PATH
    )

    if internal is not None:
        internal_desc = strip_checksum(internal)
        folded_internal = internal_desc.replace(EXTERNAL_PATH, MULTIPATH_PATH).replace(
            INTERNAL_PATH, MULTIPATH_PATH
        )
        if folded_internal != multipath_desc:
            raise DescriptorParsingError(
                f"External descriptor '{descriptor}' and internal descriptor '{internal_desc}' don't belong to the same wallet"
            )

    validate_multipath(multipath_desc)
    return descsum_create(multipath_desc)
