import enum
from typing import NamedTuple, Protocol, TypeAlias

from multiformats import CID

Link: TypeAlias = CID  # a reference to another object, by content identifier
Digest: TypeAlias = bytes  # raw 20 byte SHA-1 digest


class ObjectKind(enum.Enum):
    BLOB = 'blob'
    TREE = 'tree'
    COMMIT = 'commit'
    TAG = 'tag'


class Node(Protocol):
    def links(self) -> list[Link]:
        ...


class UserInfo(NamedTuple):
    name: str
    email: str
    timestamp: str  # unix seconds, kept as written
    timezone: str  # e.g. '-0600'


class TreeEntry(NamedTuple):
    mode: str
    name: str
    cid: CID


class Blob(NamedTuple):
    data: bytes

    def links(self) -> list[Link]:
        return []


class Tree(NamedTuple):
    entries: tuple[TreeEntry, ...]

    def by_name(self) -> dict[str, TreeEntry]:
        # Later entries overwrite earlier ones with the same name
        return {entry.name: entry for entry in self.entries}

    def get(self, name: str) -> TreeEntry | None:
        return self.by_name().get(name)

    def links(self) -> list[Link]:
        return [entry.cid for entry in self.entries]


class Commit(NamedTuple):
    tree: CID
    parents: tuple[CID, ...]
    author: UserInfo
    committer: UserInfo

    def links(self) -> list[Link]:
        return [self.tree, *self.parents]
