"""
Errors raised while decoding git objects.

Every error is a GitObjectError and belongs to exactly one family:
FramingError, ObjectTypeError, EncodingError or SemanticError.
"""


class GitObjectError(ValueError):
    pass


# Framing

class FramingError(GitObjectError):
    pass


class MissingNullTerminator(FramingError):
    def __init__(self):
        super().__init__('Invalid git object, missing null byte after header')


class MalformedHeader(FramingError):
    def __init__(self, header: bytes):
        self.header = header
        super().__init__(f"Invalid git object header {header!r}, expected '<type> <size>'")


class SizeMismatch(FramingError):
    def __init__(self, declared: int, actual: int):
        self.declared = declared
        self.actual = actual
        super().__init__(f'Size mismatch: {declared} bytes declared, '
                         f'but payload is {actual} bytes')


class MissingEntryMode(FramingError):
    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(f'Could not read mode of tree entry at offset {offset}')


class MissingEntryName(FramingError):
    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(f'Could not read name of tree entry at offset {offset}')


class TruncatedEntryHash(FramingError):
    def __init__(self, offset: int, remaining: int):
        self.offset = offset
        self.remaining = remaining
        super().__init__(f'Tree entry hash at offset {offset} is truncated: '
                         f'expected 20 bytes, {remaining} remaining')


class UnexpectedEndOfHeader(FramingError):
    def __init__(self):
        super().__init__('Commit header ended without a blank line')


class MalformedHeaderLine(FramingError):
    def __init__(self, line: bytes):
        self.line = line
        super().__init__(f"Invalid commit header line {line!r}, expected '<name> <value>'")


class MissingEmailOpenBracket(FramingError):
    def __init__(self):
        super().__init__('User info is missing an email enclosed in angle brackets')


class MissingEmailCloseBracket(FramingError):
    def __init__(self):
        super().__init__("User info email is missing a closing angle bracket ('>')")


class MalformedUserInfo(FramingError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f'Malformed user info: {reason}')


class MalformedDateField(FramingError):
    def __init__(self, value: bytes):
        self.value = value
        super().__init__(f"User info date {value!r} must be '<unix timestamp> <timezone offset>'")


# Object types

class ObjectTypeError(GitObjectError):
    pass


class UnknownObjectType(ObjectTypeError):
    def __init__(self, token: bytes):
        self.token = token
        super().__init__(f'Invalid object type: expected one of "blob", "tree", '
                         f'"commit" or "tag", got {token!r}')


class UnsupportedObjectKind(ObjectTypeError, NotImplementedError):
    def __init__(self, kind):
        self.kind = kind
        super().__init__(f'Parsing {kind.value} objects is not implemented')


# Encoding

class EncodingError(GitObjectError):
    pass


class InvalidSizeField(EncodingError):
    def __init__(self, value: bytes):
        self.value = value
        super().__init__(f'Object size {value!r} is not a decimal integer')


class NonUtf8Field(EncodingError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f'Field {field!r} contains non utf-8 characters')


class NonUtf8EntryField(NonUtf8Field):
    pass


class InvalidHexDigest(EncodingError):
    def __init__(self, value: bytes):
        self.value = value
        super().__init__(f'Hash {value!r} is not valid lowercase hexadecimal')


# Semantics

class SemanticError(GitObjectError):
    pass


class InvalidDigestLength(SemanticError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f'Cannot convert digest to CID: SHA-1 digests are 20 bytes, '
                         f'this is {length} bytes')


class DuplicateField(SemanticError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f'Invalid second {field} entry found')


class DuplicateTreeField(DuplicateField):
    def __init__(self):
        super().__init__('tree')


class MissingRequiredField(SemanticError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing header field '{field}'")


class UnrecognizedHeaderField(SemanticError):
    def __init__(self, field: bytes):
        self.field = field
        super().__init__(f'Unrecognized commit header field name: {field!r}')
