"""
Tree-sitter Parser Wrapper

Handles tree-sitter parsing of Go source and syntax-error detection.
"""

from pathlib import Path
from typing import Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from godecl.configs import get_logger
from godecl.exceptions import ParseError, SourceFileError

logger = get_logger("ast.parser")


# File extensions accepted without a warning
GO_EXTENSIONS = {".go"}


class GoParser:
    """
    Tree-sitter based parser for Go.

    Lazily initializes the language and parser on first use.
    """

    def __init__(self):
        self._language: Optional[Language] = None
        self._parser: Optional[Parser] = None

    def _get_parser(self) -> Parser:
        """Get or create the tree-sitter Parser."""
        if self._parser is None:
            self._language = Language(tree_sitter_go.language())
            self._parser = Parser(self._language)
            logger.debug("Loaded tree-sitter Go grammar")
        return self._parser

    def is_supported(self, file_path: str) -> bool:
        """Check if a file looks like Go source."""
        return Path(file_path).suffix.lower() in GO_EXTENSIONS

    def parse(self, source: str) -> Tree:
        """
        Parse Go source code.

        Args:
            source: Source code as string

        Returns:
            Tree-sitter Tree

        Raises:
            ParseError: If the source has syntax errors
        """
        tree = self._get_parser().parse(source.encode("utf-8"))
        if tree.root_node.has_error:
            error_node = find_error(tree.root_node)
            if error_node is None:
                raise ParseError("Parsing error")
            line, column = error_node.start_point[0] + 1, error_node.start_point[1] + 1
            what = "missing " + error_node.type if error_node.is_missing else "syntax error"
            raise ParseError(f"Parsing error: {what} at {line}:{column}", line=line, column=column)
        return tree

    def parse_file(self, file_path: str) -> tuple[Tree, str]:
        """
        Parse a Go source file.

        Args:
            file_path: Path to the source file

        Returns:
            Tuple of (Tree, source text)

        Raises:
            SourceFileError: If the file can't be read
            ParseError: If the source has syntax errors
        """
        if not self.is_supported(file_path):
            logger.warning(f"{file_path} does not have a .go extension, parsing anyway")

        try:
            source = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceFileError(f"File not opened: {e}", {"path": file_path}) from e

        return self.parse(source), source


def find_error(node: Node) -> Optional[Node]:
    """Return the first ERROR or missing node in document order."""
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = find_error(child)
            if found is not None:
                return found
    return None


# Global parser instance (lazy singleton)
_parser: Optional[GoParser] = None


def get_parser() -> GoParser:
    """Get the global GoParser instance."""
    global _parser
    if _parser is None:
        _parser = GoParser()
    return _parser
