import logging

from . import data, errors
from . import types
from .data import LF, NUL, SP, split_at_first, split_from
from .hashing import SHA1_DIGEST_SIZE, digest_to_cid, hex_to_cid

logger = logging.getLogger(__name__)


def parse_object(buffer: bytes) -> types.Node:
    return parse_object_with_kind(buffer)[0]


def parse_object_with_kind(buffer: bytes) -> tuple[types.Node, types.ObjectKind]:
    payload, kind = data.parse_header(buffer)

    if kind == types.ObjectKind.BLOB:
        node = parse_blob(payload)
    elif kind == types.ObjectKind.TREE:
        node = parse_tree(payload)
    elif kind == types.ObjectKind.COMMIT:
        node = parse_commit(payload)
    else:
        raise errors.UnsupportedObjectKind(kind)
    return node, kind


def parse_blob(payload: bytes) -> types.Blob:
    return types.Blob(data=bytes(payload))


def parse_tree(payload: bytes) -> types.Tree:
    """
    A tree is a sequence of entries of the form

        <mode> <name>\\x00<20 byte SHA-1 of the tree or blob>

    There is no delimiter after the hash, its fixed width marks the start of
    the next entry. The payload must be consumed exactly.
    """
    entries = []
    offset = 0
    while offset < len(payload):
        entry, offset = _parse_tree_entry(payload, offset)
        entries.append(entry)

    names = {entry.name for entry in entries}
    if len(names) != len(entries):
        logger.debug('Tree has %d entries but only %d distinct names',
                     len(entries), len(names))
    return types.Tree(entries=tuple(entries))


def _parse_tree_entry(payload: bytes, offset: int) -> tuple[types.TreeEntry, int]:
    parts = split_from(payload, SP, offset)
    if parts is None:
        raise errors.MissingEntryMode(offset)
    mode, start = parts

    parts = split_from(payload, NUL, start)
    if parts is None:
        raise errors.MissingEntryName(offset)
    name, start = parts

    end = start + SHA1_DIGEST_SIZE
    if end > len(payload):
        raise errors.TruncatedEntryHash(offset, len(payload) - start)
    digest = payload[start:end]

    entry = types.TreeEntry(
        mode=_decode(mode, 'mode', errors.NonUtf8EntryField),
        name=_decode(name, 'name', errors.NonUtf8EntryField),
        cid=digest_to_cid(digest),
    )
    return entry, end


def parse_commit(payload: bytes) -> types.Commit:
    """
    A commit is a header and a message separated by a blank line:

        tree <tree hash>
        parent <first parent hash>
        parent <second parent hash>
        author <user info>
        committer <user info>

        <message>

    Hashes are hex encoded. The message is not kept.
    """
    tree = None
    parents = []
    users = {}

    offset = 0
    while True:
        parts = split_from(payload, LF, offset)
        if parts is None:
            raise errors.UnexpectedEndOfHeader()
        line, offset = parts

        if not line:
            break

        parts = split_at_first(line, SP)
        if parts is None:
            raise errors.MalformedHeaderLine(line)
        key, value = parts

        if key == b'tree':
            if tree is not None:
                raise errors.DuplicateTreeField()
            tree = hex_to_cid(value)
        elif key == b'parent':
            parents.append(hex_to_cid(value))
        elif key in (b'author', b'committer'):
            field = key.decode()
            if field in users:
                raise errors.DuplicateField(field)
            users[field] = parse_user_info(value)
        else:
            raise errors.UnrecognizedHeaderField(key)

    if tree is None:
        raise errors.MissingRequiredField('tree')
    for field in ('author', 'committer'):
        if field not in users:
            raise errors.MissingRequiredField(field)

    logger.debug('Parsed commit with %d parents', len(parents))
    return types.Commit(tree=tree, parents=tuple(parents),
                        author=users['author'], committer=users['committer'])


def parse_user_info(value: bytes) -> types.UserInfo:
    # <name> <<email>> <timestamp> <timezone>
    parts = split_at_first(value, ord('<'))
    if parts is None:
        raise errors.MissingEmailOpenBracket()
    name, rest = parts
    if not name.endswith(b' '):
        raise errors.MalformedUserInfo("expected a space before '<'")
    name = name[:-1]

    parts = split_at_first(rest, ord('>'))
    if parts is None:
        raise errors.MissingEmailCloseBracket()
    email, rest = parts
    if not rest.startswith(b' '):
        raise errors.MalformedUserInfo("expected a space after '>'")
    rest = rest[1:]

    parts = split_at_first(rest, SP)
    if parts is None:
        raise errors.MalformedDateField(rest)
    timestamp, timezone = parts

    return types.UserInfo(
        name=_decode(name, 'name'),
        email=_decode(email, 'email'),
        timestamp=_decode(timestamp, 'timestamp'),
        timezone=_decode(timezone, 'timezone'),
    )


def _decode(value: bytes, field: str, error=errors.NonUtf8Field) -> str:
    try:
        return value.decode('utf-8')
    except UnicodeDecodeError as e:
        raise error(field) from e
