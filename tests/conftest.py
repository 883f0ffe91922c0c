import hashlib

import pytest

# SHA-1 of "test" (`echo -n "test" | sha1sum`)
TEST_SHA1 = 'a94a8fe5ccb19ba61c4c0873d391e987982fbbd3'

# header: 'commit 180'
INIT_COMMIT = (
    b'tree 7cee6dfa7d13e124220d2c04923f0cb0347ba27c\n'
    b'author Moloch <pure_machinery@example.com> 1517911033 -0600\n'
    b'committer Jaden Doe <j.doe@example.com> 1517914295 +0100\n'
    b'\n'
    b'Initial commit.\n'
)


def sha1(data: bytes) -> bytes:
    return hashlib.sha1(data).digest()


def serialize(type_: str, payload: bytes) -> bytes:
    return f'{type_} {len(payload)}'.encode() + b'\x00' + payload


def tree_entry(mode: str, name: str, digest: bytes) -> bytes:
    return f'{mode} {name}'.encode() + b'\x00' + digest


@pytest.fixture
def d1():
    return sha1(b'a.txt contents')


@pytest.fixture
def d2():
    return sha1(b'dir contents')
