from torrentmeta.torrent.errors import MalformedPieces, MissingInfoPieces
from torrentmeta.torrent.fields import Node, node_kind
import logging

logger = logging.getLogger(__name__)

PIECE_HASH_LENGTH = 20  # SHA1 digest size


def split_pieces(raw: bytes) -> tuple[str, ...]:
    """Split concatenated piece hashes into uppercase hex digests, in order."""
    if len(raw) % PIECE_HASH_LENGTH:
        raise MalformedPieces(len(raw))
    return tuple(
        raw[i : i + PIECE_HASH_LENGTH].hex().upper()
        for i in range(0, len(raw), PIECE_HASH_LENGTH)
    )


def decode_pieces(node: Node) -> tuple[str, ...]:
    match node:
        case bytes() | bytearray():
            return split_pieces(bytes(node))
        case _:
            # only a byte string can carry piece hashes
            logger.debug(f"'pieces' is {node_kind(node)}, not a byte string")
            raise MissingInfoPieces()
