from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FileEntry:
    length: int
    path: tuple[str, ...]

    @property
    def joined_path(self) -> str:
        return "/".join(self.path)


@dataclass(frozen=True, slots=True)
class SingleFileInfo:
    length: int
    is_private: bool
    name: str
    piece_length: int
    pieces: tuple[str, ...]  # uppercase hex SHA1 digests

    @property
    def total_length(self) -> int:
        return self.length

    @property
    def piece_count(self) -> int:
        return len(self.pieces)


@dataclass(frozen=True, slots=True)
class MultiFileInfo:
    files: tuple[FileEntry, ...]
    is_private: bool
    name: str
    piece_length: int
    pieces: tuple[str, ...]

    @property
    def total_length(self) -> int:
        return sum(f.length for f in self.files)

    @property
    def piece_count(self) -> int:
        return len(self.pieces)


Info = SingleFileInfo | MultiFileInfo


@dataclass(frozen=True, slots=True)
class Metainfo:
    """A decoded .torrent document; ``info`` decides single vs multi-file."""

    announce: str
    created_by: str | None
    creation_date: int
    comment: str | None
    info: Info

    @property
    def is_multi_file(self) -> bool:
        return isinstance(self.info, MultiFileInfo)
