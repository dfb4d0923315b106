"""
Go Syntax Extractor

Converts a tree-sitter Go tree into the Go syntax model (godecl.ast.nodes).
Only top-level declarations and the type expressions inside them are
modelled; function bodies and initializer values are skipped.
"""

from typing import Optional

from tree_sitter import Node, Tree

from godecl.ast import nodes

# Literal node types and the go/token kind they correspond to
LITERAL_KINDS = {
    "int_literal": "INT",
    "float_literal": "FLOAT",
    "imaginary_literal": "IMAG",
    "rune_literal": "CHAR",
    "interpreted_string_literal": "STRING",
    "raw_string_literal": "STRING",
}

IDENTIFIER_TYPES = {"identifier", "type_identifier", "field_identifier", "package_identifier"}

# Interface members that declare a method (grammar versions differ)
METHOD_ELEM_TYPES = {"method_elem", "method_spec"}

# Constraint terms: a type, or a union of types (`~int | ~uint`)
TYPE_ELEM_TYPES = {"type_elem", "constraint_elem", "type_constraint"}


class GoExtractor:
    """Builds a nodes.File from a parsed Go source tree."""

    def extract(self, tree: Tree) -> nodes.File:
        """
        Extract the package name and top-level declarations.

        Args:
            tree: Parsed tree-sitter tree (already checked for syntax errors)

        Returns:
            File with declarations in source order
        """
        package = ""
        decls: list[nodes.Decl] = []

        for node in self.named_children(tree.root_node):
            nt = node.type

            if nt == "package_clause":
                name_node = self.find_child(node, "package_identifier")
                if name_node:
                    package = self.get_node_text(name_node)
            elif nt == "import_declaration":
                decls.append(self._import_declaration(node))
            elif nt == "const_declaration":
                decls.append(self._value_declaration(node, "const", "const_spec"))
            elif nt == "var_declaration":
                decls.append(self._value_declaration(node, "var", "var_spec"))
            elif nt == "type_declaration":
                decls.append(self._type_declaration(node))
            elif nt in ("function_declaration", "method_declaration"):
                decls.append(self._function_declaration(node))
            else:
                decls.append(nodes.BadDecl(kind=nt, text=self.get_node_text(node)))

        return nodes.File(package=package, decls=decls)

    # -------------------------------------------------------------------------
    # Declarations
    # -------------------------------------------------------------------------

    def _import_declaration(self, node: Node) -> nodes.GenDecl:
        specs: list[nodes.Spec] = []
        for spec in self.walk_tree(node, "import_spec"):
            path_node = spec.child_by_field_name("path")
            name_node = spec.child_by_field_name("name")
            path = self.get_node_text(path_node).strip('"`') if path_node else ""
            name = nodes.Ident(self.get_node_text(name_node)) if name_node else None
            specs.append(nodes.ImportSpec(path=path, name=name))
        return nodes.GenDecl(tok="import", specs=specs)

    def _value_declaration(self, node: Node, tok: str, spec_type: str) -> nodes.GenDecl:
        specs: list[nodes.Spec] = []
        # Specs sit directly under the declaration or inside a *_spec_list
        for spec in self.walk_tree(node, spec_type):
            names = self._names(spec)
            specs.append(nodes.ValueSpec(names=names))
        return nodes.GenDecl(tok=tok, specs=specs)

    def _type_declaration(self, node: Node) -> nodes.GenDecl:
        specs: list[nodes.Spec] = []
        for spec in self.named_children(node):
            if spec.type not in ("type_spec", "type_alias"):
                continue
            name_node = spec.child_by_field_name("name")
            type_node = spec.child_by_field_name("type")
            type_params = spec.child_by_field_name("type_parameters")
            specs.append(nodes.TypeSpec(
                name=nodes.Ident(self.get_node_text(name_node)),
                type=self.build_type(type_node),
                type_params=self._type_parameters(type_params),
                assign=spec.type == "type_alias",
            ))
        return nodes.GenDecl(tok="type", specs=specs)

    def _function_declaration(self, node: Node) -> nodes.FuncDecl:
        name_node = node.child_by_field_name("name")
        receiver = node.child_by_field_name("receiver")
        func_type = self._signature(node)
        func_type.type_params = self._type_parameters(node.child_by_field_name("type_parameters"))
        return nodes.FuncDecl(
            name=nodes.Ident(self.get_node_text(name_node)),
            type=func_type,
            recv=self.build_field_list(receiver) if receiver else None,
        )

    def _type_parameters(self, node: Optional[Node]) -> Optional[nodes.FieldList]:
        if node is None:
            return None
        items = []
        for decl in self.named_children(node):
            if decl.type != "type_parameter_declaration":
                continue
            names = self._names(decl)
            items.append(nodes.Field(names=names, type=self.build_type(decl.child_by_field_name("type"))))
        return nodes.FieldList(items=items)

    # -------------------------------------------------------------------------
    # Signatures and field lists
    # -------------------------------------------------------------------------

    def _signature(self, node: Node) -> nodes.FuncType:
        """Signature of a function declaration, function type or method element."""
        params_node = node.child_by_field_name("parameters")
        result_node = node.child_by_field_name("result")

        results = None
        if result_node is not None:
            if result_node.type == "parameter_list":
                results = self.build_field_list(result_node)
            else:
                results = nodes.FieldList(items=[nodes.Field(names=[], type=self.build_type(result_node))])

        params = self.build_field_list(params_node) if params_node else nodes.FieldList()
        return nodes.FuncType(params=params, results=results)

    def build_field_list(self, node: Node) -> nodes.FieldList:
        """Field list from a parameter_list (parameters, results, receivers)."""
        items = []
        for param in self.named_children(node):
            names = self._names(param)
            type_node = param.child_by_field_name("type")
            if param.type == "variadic_parameter_declaration":
                type_expr: nodes.Expr = nodes.OpaqueExpr(
                    kind="variadic_type",
                    text="..." + self.get_node_text(type_node),
                )
            else:
                type_expr = self.build_type(type_node)
            items.append(nodes.Field(names=names, type=type_expr))
        return nodes.FieldList(items=items)

    def _struct_fields(self, node: Node) -> nodes.FieldList:
        items = []
        field_list = self.find_child(node, "field_declaration_list")
        for decl in self.named_children(field_list) if field_list else []:
            if decl.type != "field_declaration":
                continue
            names = self._names(decl)
            type_expr = self.build_type(decl.child_by_field_name("type"))
            if not names and self.find_child(decl, "*") is not None:
                # Embedded pointer: `*Base`
                type_expr = nodes.StarExpr(x=type_expr)
            tag_node = decl.child_by_field_name("tag")
            tag = self.get_node_text(tag_node) if tag_node else None
            items.append(nodes.Field(names=names, type=type_expr, tag=tag))
        return nodes.FieldList(items=items)

    def _interface_methods(self, node: Node) -> nodes.FieldList:
        items = []
        for elem in self.named_children(node):
            if elem.type in METHOD_ELEM_TYPES:
                name_node = elem.child_by_field_name("name")
                items.append(nodes.Field(
                    names=[nodes.Ident(self.get_node_text(name_node))],
                    type=self._signature(elem),
                ))
            else:
                # Embedded interface or constraint term
                items.append(nodes.Field(names=[], type=self.build_type(elem)))
        return nodes.FieldList(items=items)

    # -------------------------------------------------------------------------
    # Type expressions
    # -------------------------------------------------------------------------

    def build_type(self, node: Optional[Node]) -> nodes.Expr:
        """Map one type node onto the syntax model; unknown shapes become OpaqueExpr."""
        if node is None:
            return nodes.OpaqueExpr(kind="missing", text="")

        nt = node.type

        if nt in IDENTIFIER_TYPES:
            return nodes.Ident(self.get_node_text(node))

        if nt == "qualified_type":
            package = node.child_by_field_name("package")
            name = node.child_by_field_name("name")
            return nodes.SelectorExpr(
                x=nodes.Ident(self.get_node_text(package)),
                sel=nodes.Ident(self.get_node_text(name)),
            )

        if nt == "pointer_type":
            return nodes.StarExpr(x=self.build_type(self._first_named(node)))

        if nt == "function_type":
            return self._signature(node)

        if nt == "map_type":
            return nodes.MapType(
                key=self.build_type(node.child_by_field_name("key")),
                value=self.build_type(node.child_by_field_name("value")),
            )

        if nt == "array_type":
            return nodes.ArrayType(
                len=self.build_expr(node.child_by_field_name("length")),
                elt=self.build_type(node.child_by_field_name("element")),
            )

        if nt == "implicit_length_array_type":
            return nodes.ArrayType(
                len=nodes.OpaqueExpr(kind="ellipsis", text="..."),
                elt=self.build_type(node.child_by_field_name("element")),
            )

        if nt == "slice_type":
            return nodes.ArrayType(len=None, elt=self.build_type(node.child_by_field_name("element")))

        if nt == "struct_type":
            return nodes.StructType(fields=self._struct_fields(node))

        if nt == "interface_type":
            return nodes.InterfaceType(methods=self._interface_methods(node))

        if nt == "negated_type":
            return nodes.UnaryExpr(op="~", x=self.build_type(self._first_named(node)))

        if nt in TYPE_ELEM_TYPES:
            terms = [self.build_type(t) for t in self.named_children(node)]
            if not terms:
                return nodes.OpaqueExpr(kind=nt, text=self.get_node_text(node))
            expr = terms[0]
            for term in terms[1:]:
                expr = nodes.BinaryExpr(x=expr, op="|", y=term)
            return expr

        return nodes.OpaqueExpr(kind=nt, text=self.get_node_text(node))

    def build_expr(self, node: Optional[Node]) -> Optional[nodes.Expr]:
        """Value expression (array lengths): literals and names are kept apart."""
        if node is None:
            return None
        if node.type in LITERAL_KINDS:
            return nodes.BasicLit(kind=LITERAL_KINDS[node.type], value=self.get_node_text(node))
        if node.type == "identifier":
            return nodes.Ident(self.get_node_text(node))
        return nodes.OpaqueExpr(kind=node.type, text=self.get_node_text(node))

    # -------------------------------------------------------------------------
    # Helper methods for tree traversal
    # -------------------------------------------------------------------------

    def get_node_text(self, node: Node) -> str:
        """Extract the source text of a node."""
        return node.text.decode("utf-8") if node.text is not None else ""

    def named_children(self, node: Node) -> list[Node]:
        """Named children, skipping comments."""
        return [child for child in node.named_children if child.type != "comment"]

    def find_child(self, node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type."""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    def walk_tree(self, node: Node, type_name: str) -> list[Node]:
        """
        Walk the tree and find all nodes of a specific type.

        Args:
            node: Starting node
            type_name: Node type to find

        Returns:
            List of matching nodes in document order
        """
        results = []

        def _walk(n: Node):
            if n.type == type_name:
                results.append(n)
                return
            for child in n.children:
                _walk(child)

        _walk(node)
        return results

    def _names(self, node: Node) -> list[nodes.Ident]:
        # The "name" field can also tag the separating commas
        return [
            nodes.Ident(self.get_node_text(n))
            for n in node.children_by_field_name("name")
            if n.type in IDENTIFIER_TYPES
        ]

    def _first_named(self, node: Node) -> Optional[Node]:
        children = self.named_children(node)
        return children[0] if children else None


def extract_file(tree: Tree) -> nodes.File:
    """Extract a nodes.File from a parsed tree."""
    return GoExtractor().extract(tree)
