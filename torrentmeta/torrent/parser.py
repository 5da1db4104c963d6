import bencodepy
from pathlib import Path
from typing import Callable
from torrentmeta.torrent import errors
from torrentmeta.torrent.errors import EmptyFilePath, InvalidBencode, MetainfoError
from torrentmeta.torrent.fields import (
    Node,
    as_dict,
    as_list,
    as_string,
    as_string_list,
    as_u8,
    as_u64,
    optional,
    require,
)
from torrentmeta.torrent.metadata import (
    FileEntry,
    Info,
    Metainfo,
    MultiFileInfo,
    SingleFileInfo,
)
from torrentmeta.torrent.pieces import decode_pieces
import logging

logger = logging.getLogger(__name__)


def decode_file_entry(node: Node) -> FileEntry:
    entry = as_dict(node, "files")
    length = require(entry, "length", errors.MissingInfoFileLength, as_u64)
    path = require(entry, "path", errors.MissingInfoFilePath, as_string_list)
    if not path:
        raise EmptyFilePath()
    return FileEntry(length=length, path=path)


def _decode_files(node: Node, key: str) -> tuple[FileEntry, ...]:
    return tuple(decode_file_entry(item) for item in as_list(node, key))


def _decode_common_info(info: dict) -> tuple[bool, str, int, tuple[str, ...]]:
    # fields shared by both info layouts, probed after the layout key
    private = require(info, "private", errors.MissingInfoPrivate, as_u8)
    name = require(info, "name", errors.MissingInfoName, as_string)
    piece_length = require(
        info, "piece length", errors.MissingInfoPieceLength, as_u64
    )
    pieces = require(
        info, "pieces", errors.MissingInfoPieces, lambda node, _: decode_pieces(node)
    )
    return private != 0, name, piece_length, pieces


def decode_single_file_info(node: Node) -> SingleFileInfo:
    info = as_dict(node, "info")
    length = require(info, "length", errors.MissingLength, as_u64)
    is_private, name, piece_length, pieces = _decode_common_info(info)
    return SingleFileInfo(
        length=length,
        is_private=is_private,
        name=name,
        piece_length=piece_length,
        pieces=pieces,
    )


def decode_multi_file_info(node: Node) -> MultiFileInfo:
    info = as_dict(node, "info")
    files = require(info, "files", errors.MissingInfoFiles, _decode_files)
    is_private, name, piece_length, pieces = _decode_common_info(info)
    return MultiFileInfo(
        files=files,
        is_private=is_private,
        name=name,
        piece_length=piece_length,
        pieces=pieces,
    )


def decode_document(node: Node, decode_info: Callable[[Node], Info]) -> Metainfo:
    """
    Decode the top-level metainfo dictionary.

    ``decode_info`` selects the info layout. Required fields are checked in a
    fixed order and the first failure is raised; ``created by`` and
    ``comment`` fall back to ``None`` when absent or malformed.
    """
    root = as_dict(node, "metainfo")
    announce = require(root, "announce", errors.MissingAnnounce, as_string)
    created_by = optional(root, "created by", as_string)
    creation_date = require(
        root, "creation date", errors.MissingCreationDate, as_u64
    )
    info = require(root, "info", errors.MissingInfo, lambda n, _: decode_info(n))
    comment = optional(root, "comment", as_string)
    return Metainfo(
        announce=announce,
        created_by=created_by,
        creation_date=creation_date,
        comment=comment,
        info=info,
    )


def decode_tree(root: Node) -> Metainfo:
    """
    Decode a bencode value tree into a ``Metainfo``.

    The multi-file layout is tried first, then the single-file one. When both
    fail the single-file error is raised, chained to the multi-file error.
    """
    try:
        return decode_document(root, decode_multi_file_info)
    except MetainfoError as multi_error:
        logger.debug(f"Not a multi-file torrent: {multi_error}")
        try:
            return decode_document(root, decode_single_file_info)
        except MetainfoError as single_error:
            raise single_error from multi_error


def decode_metainfo(data: bytes) -> Metainfo:
    try:
        root = bencodepy.decode(data)
    except bencodepy.BencodeDecodeError as e:
        raise InvalidBencode(str(e)) from e
    return decode_tree(root)


def parse_torrent_file(path: Path) -> Metainfo:
    logger.info(f"Parsing torrent file: {path}")

    with path.open("rb") as f:
        metainfo = decode_metainfo(f.read())

    info = metainfo.info
    if metainfo.is_multi_file:
        logger.info(
            f"Parsed multi-file torrent: {info.name} ({len(info.files)} files, {info.total_length} bytes)"
        )
    else:
        logger.info(f"Parsed single-file torrent: {info.name} ({info.total_length} bytes)")
    return metainfo
