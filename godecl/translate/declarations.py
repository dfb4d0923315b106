"""
Declaration Translator

Walks a file's top-level declarations in order and turns each one into zero
or more Declaration values. Grouped declarations expand per spec (types) or
per name (consts, vars); imports collapse to one element per declaration.
"""

from godecl.ast import nodes
from godecl.configs import get_logger
from godecl.exceptions import ErrorKind, TranslationError
from godecl.translate.models import Const, Declaration, Func, Import, Type, Var
from godecl.translate.types import translate_field, translate_signature, translate_type

logger = get_logger("translate")


def translate_declarations(decls: list[nodes.Decl]) -> list[Declaration]:
    """
    Translate a file's declaration sequence.

    Args:
        decls: Top-level declarations in source order

    Returns:
        Declarations in the same order, grouped specs expanded in place

    Raises:
        TranslationError: On the first unsupported construct
    """
    result: list[Declaration] = []
    for decl in decls:
        if isinstance(decl, nodes.GenDecl):
            result.extend(_translate_gen_decl(decl))
        elif isinstance(decl, nodes.FuncDecl):
            result.append(translate_func_decl(decl))
        else:
            logger.warning(f"Ignoring declaration {_decl_kind(decl)}")
    return result


def translate_file(file: nodes.File) -> list[Declaration]:
    """Translate every top-level declaration of a parsed file."""
    logger.debug(f"Translating package {file.package} ({len(file.decls)} declarations)")
    return translate_declarations(file.decls)


def _translate_gen_decl(decl: nodes.GenDecl) -> list[Declaration]:
    if decl.tok == "import":
        return [Import()]

    if decl.tok == "type":
        out: list[Declaration] = []
        for spec in decl.specs:
            if spec.type_params is not None:
                logger.warning(f"Ignoring type parameters for type {spec.name.name}")
            out.append(Type(spec.name.name, translate_type(spec.type)))
        return out

    if decl.tok == "const":
        return [Const(ident.name) for spec in decl.specs for ident in spec.names]

    if decl.tok == "var":
        return [Var(ident.name) for spec in decl.specs for ident in spec.names]

    raise TranslationError(
        ErrorKind.UNEXPECTED_DECLARATION_KEYWORD,
        f"Unexpected declaration with keyword {decl.tok}",
        {"keyword": decl.tok},
    )


def translate_func_decl(decl: nodes.FuncDecl) -> Func:
    """Translate a function or method declaration."""
    receiver = None
    if decl.recv is not None:
        groups = decl.recv.items
        if len(groups) != 1 or len(groups[0].names) != 1:
            raise TranslationError(
                ErrorKind.UNEXPECTED_RECEIVER_ARITY,
                f"Function {decl.name.name} has unexpected number of receivers",
                {"function": decl.name.name},
            )
        group = groups[0]
        receiver = translate_field(group.names[0].name, group.type)

    return Func(decl.name.name, receiver, translate_signature(decl.type))


def _decl_kind(decl: object) -> str:
    if isinstance(decl, nodes.BadDecl):
        return decl.kind
    return type(decl).__name__
