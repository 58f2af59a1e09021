# sqllint/visitor.py
"""
Enter/leave traversal over sqlglot expressions.

A visitor exposes:
  enter(node) -> skip_children   True to not descend into ``node``
  leave(node) -> ok              False stops the whole walk for this visitor
"""


def accept(node, visitor) -> bool:
    """Walk ``node`` pre/post-order with ``visitor``. Returns False if aborted."""
    if not visitor.enter(node):
        for child in node.iter_expressions():
            if not accept(child, visitor):
                return False
    return visitor.leave(node)
