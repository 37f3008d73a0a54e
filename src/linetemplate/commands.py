"""
module which holds the compiled command nodes of a template and the functions which translate them
for a single record

The set of commands is closed: every node produced by the compiler is one of the classes below and
is translated by the matching function registered in ``TRANSLATORS``.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Optional, Sequence, Tuple, Union

from .constants import (
    CLAUSE_LENGTH_OVERHEAD,
    FIELD_LENGTH_ESTIMATE,
    GROUP_SEPARATOR,
    INCLUDE_LENGTH_ESTIMATE,
    INCLUDE_SEPARATOR,
    LIST_LENGTH_ESTIMATE,
    PRODUCT_LENGTH_ESTIMATE,
)
from .product import describe_product
from .schema import Record
from .stack import ConditionalStack
from .util import cast_flag, conjunct, is_blank, split_whole

if TYPE_CHECKING:
    from .cache import GlobalCache


@dataclass(frozen=True)
class Literal:
    text: str

    @property
    def estimated_length(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class FieldReference:
    field_index: int

    @property
    def estimated_length(self) -> int:
        return FIELD_LENGTH_ESTIMATE


@dataclass(frozen=True)
class If:
    """
    conditional command. The then-branch is output when the flag field is true and the
    else-branch (if any) when it is false

    Attributes:
        field_index: index of the field read as the condition
        then_branch: commands output when the condition holds
        else_branch: commands output when the condition fails, None if the conditional had no else
    """

    field_index: int
    then_branch: Tuple['CommandNode', ...] = ()
    else_branch: Optional[Tuple['CommandNode', ...]] = None

    @property
    def estimated_length(self) -> int:
        estimate = estimate_length(self.then_branch)
        if self.else_branch is not None:
            estimate = max(estimate, estimate_length(self.else_branch))
        return estimate


@dataclass(frozen=True)
class ListJoin:
    """
    splits a field on a literal separator and joins the pieces into an english list
    """

    conjunction: str
    field_index: int
    separator: str

    @property
    def estimated_length(self) -> int:
        return LIST_LENGTH_ESTIMATE


@dataclass(frozen=True)
class GeneProduct:
    product_index: int
    type_index: int

    @property
    def estimated_length(self) -> int:
        return PRODUCT_LENGTH_ESTIMATE


@dataclass(frozen=True)
class Include:
    """
    outputs the strings stored in the global cache for the dataset under the value of the
    link field, joined into an english list
    """

    dataset: str
    link_index: int
    conjunction: str

    @property
    def estimated_length(self) -> int:
        return INCLUDE_LENGTH_ESTIMATE


@dataclass(frozen=True)
class Clause:
    field_index: int
    body: Tuple['CommandNode', ...] = ()

    @property
    def estimated_length(self) -> int:
        return estimate_length(self.body) + CLAUSE_LENGTH_OVERHEAD


@dataclass(frozen=True)
class Group:
    """
    a sentence built from optional clauses. Each clause is kept only when its field is not blank
    and the kept clauses are joined with the conjunction after the prefix. When no clause is kept
    the suffix is output instead

    Attributes:
        conjunction: word placed before the final clause
        prefix: commands output ahead of the clause list
        clauses: the optional clauses
        suffix: text output when no clause is kept
    """

    conjunction: str
    prefix: Tuple['CommandNode', ...] = ()
    clauses: Tuple[Clause, ...] = ()
    suffix: str = ''

    @property
    def member_field_indices(self) -> Tuple[int, ...]:
        return tuple(clause.field_index for clause in self.clauses)

    @property
    def estimated_length(self) -> int:
        return estimate_length(self.prefix) + sum(c.estimated_length for c in self.clauses)


@dataclass(frozen=True)
class Null:
    @property
    def estimated_length(self) -> int:
        return 0


CommandNode = Union[Literal, FieldReference, If, ListJoin, GeneProduct, Include, Group, Null]


def estimate_length(nodes: Sequence[CommandNode]) -> int:
    return sum(node.estimated_length for node in nodes)


def translate_literal(node: Literal, record: Record, stack: ConditionalStack, cache) -> str:
    if not stack.peek():
        return ''
    return node.text


def translate_field(node: FieldReference, record: Record, stack: ConditionalStack, cache) -> str:
    if not stack.peek():
        return ''
    return record[node.field_index]


def translate_if(node: If, record: Record, stack: ConditionalStack, cache) -> str:
    stack.push(cast_flag(record[node.field_index]))
    try:
        result = translate_all(node.then_branch, record, stack, cache)
        if node.else_branch is not None:
            stack.flip_if_parent_true()
            result += translate_all(node.else_branch, record, stack, cache)
    finally:
        stack.pop()
    return result


def translate_list(node: ListJoin, record: Record, stack: ConditionalStack, cache) -> str:
    if not stack.peek():
        return ''
    pieces = split_whole(record[node.field_index], node.separator)
    return conjunct(node.conjunction, pieces, node.separator)


def translate_product(node: GeneProduct, record: Record, stack: ConditionalStack, cache) -> str:
    if not stack.peek():
        return ''
    return describe_product(record[node.product_index], record[node.type_index])


def translate_include(
    node: Include, record: Record, stack: ConditionalStack, cache: Optional['GlobalCache']
) -> str:
    if not stack.peek():
        return ''
    if cache is None:
        raise ValueError('cannot include: no global cache was given', node.dataset)
    expansions = cache.lookup(node.dataset, record[node.link_index])
    return conjunct(node.conjunction, expansions, INCLUDE_SEPARATOR)


def translate_group(node: Group, record: Record, stack: ConditionalStack, cache) -> str:
    if not stack.peek():
        return ''
    phrases = [
        translate_all(clause.body, record, stack, cache)
        for clause in node.clauses
        if not is_blank(record[clause.field_index])
    ]
    if not phrases:
        return node.suffix
    prefix = translate_all(node.prefix, record, stack, cache)
    sentence = conjunct(node.conjunction, phrases, GROUP_SEPARATOR)
    if prefix:
        sentence = f'{prefix} {sentence}'
    return sentence + '.'


def translate_null(node: Null, record: Record, stack: ConditionalStack, cache) -> str:
    return ''


TRANSLATORS: Dict[type, Callable[..., str]] = {
    Literal: translate_literal,
    FieldReference: translate_field,
    If: translate_if,
    ListJoin: translate_list,
    GeneProduct: translate_product,
    Include: translate_include,
    Group: translate_group,
    Null: translate_null,
}


def translate(
    node: CommandNode,
    record: Record,
    stack: ConditionalStack,
    cache: Optional['GlobalCache'] = None,
) -> str:
    """
    translate a single command for a record

    Args:
        node: the compiled command
        record: the field values of the current record
        stack: the if-contexts of the current record
        cache: global cache used by include commands

    Returns:
        str: the text output by the command, empty when the current if-context is False
    """
    try:
        translator = TRANSLATORS[type(node)]
    except KeyError:
        raise TypeError('not a template command', node)
    return translator(node, record, stack, cache)


def translate_all(
    nodes: Sequence[CommandNode],
    record: Record,
    stack: ConditionalStack,
    cache: Optional['GlobalCache'] = None,
) -> str:
    return ''.join([translate(node, record, stack, cache) for node in nodes])
