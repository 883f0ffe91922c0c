import re

from multiformats import CID, multihash

from . import errors
from .types import Digest

SHA1_DIGEST_SIZE = 20
CID_VERSION = 1
CID_CODEC = 'git-raw'
HASH_FUNCTION = 'sha1'
CID_BASE = 'base32'

_HEX_DIGEST = re.compile(rb'(?:[0-9a-f]{2})*')


def digest_to_cid(digest: Digest) -> CID:
    """
    Wrap a raw SHA-1 digest as a v1 'git-raw' CID.

    The binary form is <version> <codec> <hash function> <length> <digest>.
    """
    digest = bytes(digest)
    if len(digest) != SHA1_DIGEST_SIZE:
        raise errors.InvalidDigestLength(len(digest))

    mh = multihash.wrap(digest, HASH_FUNCTION)
    return CID(CID_BASE, CID_VERSION, CID_CODEC, mh)


def hex_to_cid(value: bytes) -> CID:
    if not _HEX_DIGEST.fullmatch(value):
        raise errors.InvalidHexDigest(value)
    return digest_to_cid(bytes.fromhex(value.decode('ascii')))
