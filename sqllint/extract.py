# sqllint/extract.py
"""
Column and statement extractors.

Pure functions that read semantic attributes out of sqlglot nodes. This is
the only module that knows the concrete shape of the parser's AST; rules go
through it instead of poking at node args themselves.

Functions taking a column definition raise ExtractError when handed a node
of a different shape.
"""
from sqlglot import exp

from .parser import SOURCE_META_KEY


class ExtractError(ValueError):
    pass


def node_text(node) -> str:
    """Source text owned by ``node``: the raw text for a statement root, '' otherwise."""
    if node is None or node.parent is not None:
        return ""
    return node.meta.get(SOURCE_META_KEY, "")


# -------------------------
# Column definitions
# -------------------------
def is_column_def(node) -> bool:
    return isinstance(node, exp.ColumnDef)


def _column(node) -> exp.ColumnDef:
    if not isinstance(node, exp.ColumnDef):
        raise ExtractError(f"expected a column definition, got {type(node).__name__}")
    return node


def column_name(node) -> str:
    return _column(node).name


def _declared_type(kind: exp.DataType):
    """(type name, unsigned) with sqlglot's U-prefixed unsigned types mapped back."""
    if not isinstance(kind.this, exp.DataType.Type):
        return str(kind.this), False
    name = kind.this.name
    signed = name[1:]
    if name.startswith("U") and signed in exp.DataType.Type.__members__:
        return exp.DataType.Type[signed].value, True
    return kind.this.value, False


def normalize_type(kind: exp.DataType) -> str:
    """
    Lower-cased type as declared, with its parameters, e.g. 'tinyint(1)',
    'varchar(255)', 'decimal(10,2)', 'int(11) unsigned'. A bare type keeps
    no parentheses so 'tinyint' and 'tinyint(1)' stay distinct.
    """
    type_name, unsigned = _declared_type(kind)
    params = [p.sql() for p in kind.expressions]
    text = type_name.lower()
    if params:
        text = f"{text}({','.join(params).lower()})"
    if unsigned:
        text += " unsigned"
    return text


def base_type(type_text: str) -> str:
    """'double' for 'double(16,4) unsigned'."""
    return type_text.split("(", 1)[0].split(" ", 1)[0]


def column_type(node) -> str:
    kind = _column(node).args.get("kind")
    if not isinstance(kind, exp.DataType):
        raise ExtractError(f"column '{column_name(node)}' has no declared type")
    return normalize_type(kind)


def type_length(node):
    """First numeric type parameter (e.g. 255 for varchar(255)), or None."""
    kind = _column(node).args.get("kind")
    if not isinstance(kind, exp.DataType) or not kind.expressions:
        return None
    try:
        return int(kind.expressions[0].sql())
    except ValueError:
        return None


def _constraint_kinds(node):
    for c in _column(node).args.get("constraints") or []:
        kind = c.args.get("kind") if isinstance(c, exp.ColumnConstraint) else c
        if kind is not None:
            yield kind


def is_not_null(node) -> bool:
    for kind in _constraint_kinds(node):
        if isinstance(kind, exp.NotNullColumnConstraint) and not kind.args.get("allow_null"):
            return True
    return False


def is_primary_key(node) -> bool:
    return any(isinstance(k, exp.PrimaryKeyColumnConstraint) for k in _constraint_kinds(node))


def is_auto_increment(node) -> bool:
    return any(isinstance(k, exp.AutoIncrementColumnConstraint) for k in _constraint_kinds(node))


def column_comment(node):
    """The column COMMENT text, or None."""
    for kind in _constraint_kinds(node):
        if isinstance(kind, exp.CommentColumnConstraint):
            return kind.this.name if kind.this is not None else ""
    return None


# -------------------------
# Statements
# -------------------------
def is_create_table(node) -> bool:
    """CREATE TABLE with a column list (CREATE TABLE ... LIKE/AS is not)."""
    return (
        isinstance(node, exp.Create)
        and (node.args.get("kind") or "").upper() == "TABLE"
        and isinstance(node.this, exp.Schema)
    )


def table_name(node) -> str:
    """Table name of a CREATE TABLE / ALTER TABLE statement, schema prefix dropped."""
    target = node.this
    if isinstance(target, exp.Schema):
        target = target.this
    if not isinstance(target, exp.Table):
        raise ExtractError(f"no table in {type(node).__name__}")
    return target.name


def table_elements(node):
    """Column definitions and table constraints of a CREATE TABLE."""
    if not is_create_table(node):
        raise ExtractError("not a CREATE TABLE with a column list")
    return list(node.this.expressions)


def _properties(node):
    props = node.args.get("properties")
    return list(props.expressions) if props is not None else []


def table_comment(node):
    for prop in _properties(node):
        if isinstance(prop, exp.SchemaCommentProperty):
            return prop.this.name if prop.this is not None else ""
    return None


def table_charset(node):
    for prop in _properties(node):
        if isinstance(prop, exp.CharacterSetProperty):
            return prop.this.name.lower() if prop.this is not None else ""
    return None


# -------------------------
# Keys and indexes
# -------------------------
def is_primary_key_constraint(node) -> bool:
    return isinstance(node, exp.PrimaryKey)


def is_foreign_key(node) -> bool:
    return isinstance(node, exp.ForeignKey)


def is_index(node) -> bool:
    """Plain KEY/INDEX or UNIQUE definition inside a table body."""
    return isinstance(node, (exp.IndexColumnConstraint, exp.UniqueColumnConstraint))


def is_unique_index(node) -> bool:
    return isinstance(node, exp.UniqueColumnConstraint)


def index_name(node):
    """Declared index name, or None for an anonymous index."""
    if not is_index(node):
        raise ExtractError(f"expected an index definition, got {type(node).__name__}")
    target = node.this
    if isinstance(target, exp.Schema):
        target = target.this
    name = target.name if target is not None else ""
    # CONSTRAINT uk_a UNIQUE (a) names the enclosing constraint, not the index
    if not name and isinstance(node.parent, exp.Constraint):
        name = node.parent.name
    return name or None
