"""
Span harvesting: walk a tree-sitter CST and record every meaningful node.
"""
from pathlib import Path
from typing import List, Optional, Union

from tree_sitter import Node

from spanmut.exceptions import ParserError
from spanmut.logging_config import logger
from spanmut.parser.config import EXCLUDED_KINDS, validate_extension
from spanmut.parser.language_manager import get_parser
from spanmut.scanner import read_source
from spanmut.schemas import HarvestedSource, SpanRecord


def harvest(
    source: Union[str, bytes],
    language: str = "rust",
    path: Optional[str] = None,
) -> HarvestedSource:
    """
    Parse ``source`` and return it paired with its ordered span records.

    The walk is pre-order: a node is recorded before its descendants and
    after every fully-visited earlier sibling. The root node is not
    recorded; traversal starts at its first child.

    Raises:
        ParserError: If tree-sitter cannot produce a tree for the source.
    """
    source_bytes = source.encode("utf-8") if isinstance(source, str) else source
    parser = get_parser(language)
    label = path or "<memory>"

    try:
        tree = parser.parse(source_bytes)
    except Exception as e:
        raise ParserError(label, str(e)) from e
    if tree is None:
        raise ParserError(label, "parser returned no tree")

    char_count = len(source_bytes.decode("utf-8"))
    spans: List[SpanRecord] = []

    cursor = tree.walk()
    if not cursor.goto_first_child():
        return HarvestedSource(source=source_bytes, spans=spans, path=path, language=language)

    depth = 1
    while depth > 0:
        record = _record_node(cursor.node, char_count)
        if record is not None:
            spans.append(record)

        if cursor.goto_first_child():
            depth += 1
            continue

        while depth > 0 and not cursor.goto_next_sibling():
            cursor.goto_parent()
            depth -= 1

    logger.debug(f"Harvested {len(spans)} spans from {label}")
    return HarvestedSource(source=source_bytes, spans=spans, path=path, language=language)


def _record_node(node: Node, char_count: int) -> Optional[SpanRecord]:
    if node.type in EXCLUDED_KINDS:
        return None

    # Byte offsets past the character count only happen with multi-byte
    # text near the end of the file; such nodes are dropped.
    if node.end_byte > char_count:
        return None

    return SpanRecord(
        kind=node.type,
        start_byte=node.start_byte,
        end_byte=node.end_byte,
        start_point=(node.start_point[0], node.start_point[1]),
        end_point=(node.end_point[0], node.end_point[1]),
    )


def harvest_file(file_path: Path, language: Optional[str] = None) -> HarvestedSource:
    """
    Read and harvest a single file. The language defaults to the one
    registered for the file's extension.
    """
    if language is None:
        language = validate_extension(file_path.suffix)
    content = read_source(file_path)
    return harvest(content, language=language, path=str(file_path))
