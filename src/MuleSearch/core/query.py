"""Boolean query language for filtering result names.

Grammar, informally::

    query   := item*
    item    := "(" query ")" | "NOT" | "OR" | "AND" | keyword | separator
    keyword := run of characters that are not separators

Adjacent keywords are combined with AND. ``OR``/``AND`` rebind the operator
of the group being built; the group built so far becomes a child of the new
one, so ``a AND b OR c`` reads as ``(a AND b) OR c``. ``NOT`` negates the next
keyword only.

Parsing never fails: unbalanced parentheses, dangling operators and empty
input all produce a best-effort tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Final, Literal, TypeVar, Union

Operator = Literal["AND", "OR", "NOT"]

SEPARATORS: Final[frozenset[str]] = frozenset(",;.:-_'/! ()")


@dataclass(frozen=True, slots=True)
class QueryGroup:
    """Interior node of a parsed query.

    Attributes:
        operator: How children combine. ``NOT`` is true unless every child
            matches, so a single-child ``NOT`` is a plain negation.
        children: Sub-nodes in input order.
    """

    operator: Operator
    children: tuple[QueryNode, ...] = ()


QueryNode = Union[QueryGroup, str]

T = TypeVar("T")


def parse_query(query: str) -> QueryNode:
    """Parse a user-typed search expression into a query tree.

    Args:
        query: Free text such as ``"(foo OR bar) AND NOT baz"``.

    Returns:
        Root node of the parsed tree. Empty input yields an empty AND group.
    """
    q = query or ""
    frame = _Frame()
    parents: list[_Frame] = []

    while q:
        if q[0] == ")":
            if not parents:
                # Text after an unbalanced top-level ")" is dropped.
                break
            nested = frame.group()
            frame = parents.pop()
            frame.children.append(nested)
            q = q[1:]
            continue

        if q[0] == "(":
            parents.append(frame)
            frame = _Frame()
            q = q[1:].strip()
            continue

        stripped = q.strip()
        if stripped.startswith("NOT"):
            frame.negate_next = True
            q = q[q.index("NOT") + 3 :].strip()
            continue

        rebind = _leading_operator(stripped)
        if rebind is not None:
            if frame.operator != rebind:
                frame.children = _demote(frame.operator, frame.children, keep_single=True)
                frame.operator = rebind
            q = q[q.index(rebind) + len(rebind) :].strip()
            continue

        end = 0
        while end < len(q) and q[end] not in SEPARATORS:
            end += 1
        if end:
            keyword, q = q[:end], q[end:]
            frame.children.append(QueryGroup("NOT", (keyword,)) if frame.negate_next else keyword)
            frame.negate_next = False
            continue

        # A bare separator is an implicit AND boundary.
        if frame.operator != "AND" and len(frame.children) > 1:
            frame.children = _demote(frame.operator, frame.children, keep_single=False)
            frame.operator = "AND"
        q = q[1:]

    # Unterminated groups close at end of input.
    root = frame.group()
    while parents:
        frame = parents.pop()
        frame.children.append(root)
        root = frame.group()
    return root


@dataclass(slots=True)
class _Frame:
    """Mutable state of the group currently being parsed."""

    operator: Operator = "AND"
    children: list[QueryNode] = field(default_factory=list)
    negate_next: bool = False

    def group(self) -> QueryGroup:
        return QueryGroup(self.operator, tuple(self.children))


def _leading_operator(stripped: str) -> Literal["OR", "AND"] | None:
    if stripped.startswith("OR"):
        return "OR"
    if stripped.startswith("AND"):
        return "AND"
    return None


def _demote(operator: Operator, children: list[QueryNode], *, keep_single: bool) -> list[QueryNode]:
    """Return the child list of a freshly rebound group.

    A group with several children is nested whole. With ``keep_single`` a
    lone child is lifted as is, and an empty group stays empty.
    """
    if keep_single and len(children) <= 1:
        return list(children)
    return [QueryGroup(operator, tuple(children))]


def matches(node: QueryNode, target: str) -> bool:
    """Evaluate a query tree against a candidate string.

    Args:
        node: Parsed query node.
        target: Candidate text, typically a file name.

    Returns:
        True when ``target`` satisfies the query. Keywords match as
        case-insensitive substrings; empty groups always match.
    """
    folded = target.casefold()

    def leaf(term: str) -> bool:
        return term.casefold() in folded

    return _fold_tree(node, leaf, _combine)


def _combine(group: QueryGroup, values: list[bool]) -> bool:
    if not values:
        return True
    if group.operator == "AND":
        return all(values)
    if group.operator == "OR":
        return any(values)
    if group.operator == "NOT":
        return not all(values)
    return True


def _fold_tree(
    node: QueryNode,
    leaf: Callable[[str], T],
    combine: Callable[[QueryGroup, list[T]], T],
) -> T:
    """Reduce a tree bottom-up without recursion.

    ``combine`` receives each group with the already reduced values of its
    children, in order.
    """
    values: list[T] = []
    pending: list[tuple[QueryNode, bool]] = [(node, False)]
    while pending:
        current, expanded = pending.pop()
        if isinstance(current, str):
            values.append(leaf(current))
        elif expanded:
            start = len(values) - len(current.children)
            reduced = combine(current, values[start:])
            del values[start:]
            values.append(reduced)
        else:
            pending.append((current, True))
            pending.extend((child, False) for child in reversed(current.children))
    return values[0]


def query_matches(query: str, target: str) -> bool:
    """Parse ``query`` and evaluate it against ``target``."""
    return matches(parse_query(query), target)


def compile_query(query: str) -> Callable[[str], bool]:
    """Parse ``query`` once and return a reusable predicate."""
    root = parse_query(query)

    def predicate(target: str) -> bool:
        return matches(root, target)

    return predicate


def format_query(node: QueryNode) -> str:
    """Render a query tree as a fully parenthesized expression.

    Keywords are printed bare; groups print as ``(a AND b)``, ``(a OR b)``
    or ``NOT (a AND b)``. An empty group renders as ``()``.

    The output is for display. Parsing it again does not always rebuild the
    same tree: ``NOT (a AND b)`` reads back as ``a AND b`` because ``NOT``
    only negates a following keyword.
    """
    return _fold_tree(node, lambda term: term, _render_group)


def _render_group(group: QueryGroup, parts: list[str]) -> str:
    if group.operator == "NOT":
        inner = " AND ".join(parts)
        if len(parts) == 1:
            return f"NOT {inner}"
        return f"NOT ({inner})"
    return "(" + f" {group.operator} ".join(parts) + ")"


def has_extension(name: str, extension: str | None) -> bool:
    """Return True when ``name`` ends with ``.extension`` (case-insensitive).

    A missing or blank extension accepts every name.
    """
    if not extension or not extension.strip():
        return True
    suffix = "." + extension.strip().lstrip(".").casefold()
    return name.casefold().endswith(suffix)
