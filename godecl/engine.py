"""
Translation Engine

Wires the front end to the translators: source text or file in, declaration
list or JSON document out.
"""

from godecl.ast import get_parser, extract_file
from godecl.configs import get_logger
from godecl.translate import Declaration, encode_declarations, translate_file

logger = get_logger("engine")


def translate_source(source: str) -> list[Declaration]:
    """
    Parse and translate Go source text.

    Raises:
        ParseError: If the source has syntax errors
        TranslationError: On the first unsupported construct
    """
    file = extract_file(get_parser().parse(source))
    return translate_file(file)


def translate_path(file_path: str) -> list[Declaration]:
    """
    Parse and translate a Go source file.

    Raises:
        SourceFileError: If the file can't be read
        ParseError: If the source has syntax errors
        TranslationError: On the first unsupported construct
    """
    tree, _ = get_parser().parse_file(file_path)
    declarations = translate_file(extract_file(tree))
    logger.debug(f"Translated {len(declarations)} declarations from {file_path}")
    return declarations


def render_source(source: str) -> str:
    """Go source text to the final JSON document."""
    return encode_declarations(translate_source(source))


def render_path(file_path: str) -> str:
    """Go source file to the final JSON document."""
    return encode_declarations(translate_path(file_path))
