"""
Go Source Front End

Tree-sitter based parsing of Go source into the Go syntax model the
declaration translator consumes.
"""

from godecl.ast import nodes
from godecl.ast.extractor import GoExtractor, extract_file
from godecl.ast.parser import GoParser, get_parser


def parse_source(source: str) -> nodes.File:
    """Parse Go source text into a nodes.File."""
    return extract_file(get_parser().parse(source))


def parse_file(file_path: str) -> nodes.File:
    """Read and parse a Go source file into a nodes.File."""
    tree, _ = get_parser().parse_file(file_path)
    return extract_file(tree)


__all__ = [
    "nodes",
    # Parser
    "GoParser",
    "get_parser",
    # Extraction
    "GoExtractor",
    "extract_file",
    "parse_source",
    "parse_file",
]
