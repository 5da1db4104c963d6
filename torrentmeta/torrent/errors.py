class MetainfoError(Exception):
    """Base class for every metainfo decode failure."""


class InvalidBencode(MetainfoError):
    def __init__(self, reason: str):
        super().__init__(f"Not a valid bencoded value: {reason}")
        self.reason = reason


class NotADict(MetainfoError):
    def __init__(self, field: str, found: str):
        super().__init__(f"Expected a dictionary for '{field}', found {found}")
        self.field = field
        self.found = found


class EmptyFilePath(MetainfoError):
    def __init__(self):
        super().__init__("File entry has an empty 'path' list")


class MalformedPieces(MetainfoError):
    def __init__(self, length: int):
        super().__init__(
            f"'pieces' is {length} bytes long, which is not a multiple of 20"
        )
        self.length = length


# Missing required fields, one class per (structure, key) pair.


class MissingField(MetainfoError):
    key = ""
    container = ""

    def __init__(self):
        super().__init__(f"{self.container} does not contain '{self.key}'")


class MissingAnnounce(MissingField):
    key = "announce"
    container = "Metainfo"


class MissingCreationDate(MissingField):
    key = "creation date"
    container = "Metainfo"


class MissingInfo(MissingField):
    key = "info"
    container = "Metainfo"


class MissingInfoPrivate(MissingField):
    key = "private"
    container = "Info"


class MissingInfoName(MissingField):
    key = "name"
    container = "Info"


class MissingInfoPieceLength(MissingField):
    key = "piece length"
    container = "Info"


class MissingInfoPieces(MissingField):
    key = "pieces"
    container = "Info"


class MissingInfoFiles(MissingField):
    key = "files"
    container = "Info"


class MissingLength(MissingField):
    key = "length"
    container = "Info"


class MissingInfoFileLength(MissingField):
    key = "length"
    container = "File entry"


class MissingInfoFilePath(MissingField):
    key = "path"
    container = "File entry"


# Present but of the wrong kind.


class FieldTypeError(MetainfoError):
    expected = ""

    def __init__(self, key: str, reason: str):
        super().__init__(f"'{key}' is not {self.expected}: {reason}")
        self.key = key
        self.reason = reason


class NotANumber(FieldTypeError):
    expected = "a number"


class NotAString(FieldTypeError):
    expected = "a string"


class NotAList(FieldTypeError):
    expected = "a list"


class NotAStringList(FieldTypeError):
    expected = "a list of strings"


class NotANumberList(FieldTypeError):
    expected = "a list of numbers"
