import logging

from . import errors
from .types import ObjectKind

logger = logging.getLogger(__name__)

NUL = 0x00
SP = ord(' ')
LF = ord('\n')

MAX_OBJECT_SIZE = 2 ** 64 - 1


def split_at_first(buffer: bytes, sentinel: int) -> tuple[bytes, bytes] | None:
    """
    Split `buffer` at the first occurrence of the `sentinel` byte.

    The sentinel itself is dropped from both halves. Returns None if the
    sentinel does not occur.
    """
    parts = split_from(buffer, sentinel, 0)
    if parts is None:
        return None
    before, end = parts
    return before, buffer[end:]


def split_from(buffer: bytes, sentinel: int, start: int) -> tuple[bytes, int] | None:
    """
    Like split_at_first, but scans from `start` and returns the bytes before
    the sentinel together with the offset just past it, leaving the rest of
    `buffer` uncopied.
    """
    index = buffer.find(sentinel, start)
    if index == -1:
        return None
    return buffer[start:index], index + 1


def parse_header(buffer: bytes) -> tuple[bytes, ObjectKind]:
    """
    Strip the '<type> <size>\\x00' header of a serialized git object.

    Returns the payload and the object kind. The declared size must match the
    payload length exactly.
    """
    parts = split_at_first(buffer, NUL)
    if parts is None:
        raise errors.MissingNullTerminator()
    header, payload = parts

    parts = split_at_first(header, SP)
    if parts is None:
        raise errors.MalformedHeader(header)
    type_, size = parts

    try:
        kind = ObjectKind(type_.decode('ascii'))
    except ValueError:
        raise errors.UnknownObjectType(type_) from None

    # bytes.isdigit() only accepts ASCII digits, so signs, spaces and
    # underscores that int() would tolerate are rejected here
    if not size.isdigit():
        raise errors.InvalidSizeField(size)
    # Sizes are unsigned 64 bit, which has at most 20 digits
    if len(size.lstrip(b'0')) > 20:
        raise errors.InvalidSizeField(size)
    declared = int(size)
    if declared > MAX_OBJECT_SIZE:
        raise errors.InvalidSizeField(size)

    if len(payload) != declared:
        raise errors.SizeMismatch(declared, len(payload))

    logger.debug('Parsed %s object header, %d bytes', kind.value, declared)
    return payload, kind
