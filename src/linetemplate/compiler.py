"""
module responsible for compiling template strings into templates and applying them to records

A template string contains literal text, field references written as ``{{field}}`` and directives
written as ``{{$name}}`` or ``{{$name:args}}``. For example

.. code-block:: text

    {{genome_name}} has {{contigs}} contigs.{{$if:host_name}} It is found in {{$list:and:host_name:, }}.{{$fi}}

Conditionals (``$if``/``$else``/``$fi``) and groups (``$group``/``$clause``/``$end``) are compiled
into nested commands, so the compiled template is a tree whose top level is applied left to right.
"""
from typing import List, Optional, Tuple, Union

import pandas as pd

from .cache import GlobalCache
from .commands import (
    Clause,
    CommandNode,
    FieldReference,
    GeneProduct,
    Group,
    If,
    Include,
    ListJoin,
    Literal,
    Null,
    estimate_length,
    translate_all,
)
from .constants import (
    ARGUMENT_DELIM,
    DEFAULT_CONJUNCTION,
    DIRECTIVE,
    DIRECTIVE_PATTERN,
    DIRECTIVE_SIGIL,
    VARIABLE_PATTERN,
)
from .error import (
    MalformedDirectiveError,
    OrphanedDirectiveError,
    UnbalancedConditionalError,
    UnknownDirectiveError,
    UnknownFieldError,
)
from .schema import FieldSchema, Record, iter_records
from .stack import ConditionalStack
from .util import logger


class Template:
    """
    a compiled template. Templates are immutable and may be applied to any number of records,
    from any number of threads

    Attributes:
        text: the template string this was compiled from
        nodes: the top-level commands
        estimated_length: rough size of the output for one record
    """

    def __init__(
        self,
        text: str,
        nodes: Tuple[CommandNode, ...],
        cache: Optional[GlobalCache] = None,
    ):
        self._text = text
        self._nodes = tuple(nodes)
        self._cache = cache
        self._estimated_length = estimate_length(self._nodes)

    @property
    def text(self) -> str:
        return self._text

    @property
    def nodes(self) -> Tuple[CommandNode, ...]:
        return self._nodes

    @property
    def estimated_length(self) -> int:
        return self._estimated_length

    def __repr__(self):
        return '{}({!r}, nodes={})'.format(self.__class__.__name__, self._text, len(self._nodes))

    def apply(self, record: Record) -> str:
        """
        translate a record using the template

        Args:
            record: field values, in the column order of the schema the template was compiled with

        Returns:
            str: the translated text
        """
        return translate_all(self._nodes, record, ConditionalStack(), self._cache)

    def apply_frame(self, frame: pd.DataFrame) -> pd.Series:
        """
        translate every row of a data frame. The frame must have the columns of the schema the
        template was compiled with

        Returns:
            pd.Series: the translated text for each row, indexed as the frame
        """
        return pd.Series(
            [self.apply(record) for record in iter_records(frame)], index=frame.index, dtype=object
        )


class _IfScope:
    def __init__(self, field_index: int):
        self.field_index = field_index
        self.then_branch: List[CommandNode] = []
        self.else_branch: Optional[List[CommandNode]] = None

    @property
    def nodes(self) -> List[CommandNode]:
        if self.else_branch is None:
            return self.then_branch
        return self.else_branch

    def close(self) -> If:
        else_branch = None if self.else_branch is None else tuple(self.else_branch)
        return If(self.field_index, tuple(self.then_branch), else_branch)


class _GroupScope:
    def __init__(self, conjunction: str, suffix: str):
        self.conjunction = conjunction
        self.suffix = suffix
        self.prefix: List[CommandNode] = []
        self.clauses: List[Tuple[int, List[CommandNode]]] = []

    @property
    def nodes(self) -> List[CommandNode]:
        if not self.clauses:
            return self.prefix
        return self.clauses[-1][1]

    def close(self) -> Group:
        clauses = tuple([Clause(index, tuple(body)) for index, body in self.clauses])
        return Group(self.conjunction, tuple(self.prefix), clauses, self.suffix)


class _TemplateCompiler:
    """
    holds the state of a single compilation: the top-level commands and the stack of scopes
    (conditionals and groups) which are still open
    """

    def __init__(self, schema: FieldSchema, cache: Optional[GlobalCache] = None):
        self.schema = schema
        self.cache = cache
        self.root: List[CommandNode] = []
        self.scopes: List[Union[_IfScope, _GroupScope]] = []
        self.handlers = {
            DIRECTIVE.IF: self.compile_if,
            DIRECTIVE.ELSE: self.compile_else,
            DIRECTIVE.FI: self.compile_fi,
            DIRECTIVE.LIST: self.compile_list,
            DIRECTIVE.PRODUCT: self.compile_product,
            DIRECTIVE.INCLUDE: self.compile_include,
            DIRECTIVE.NULL: self.compile_null,
            DIRECTIVE.GROUP: self.compile_group,
            DIRECTIVE.CLAUSE: self.compile_clause,
            DIRECTIVE.END: self.compile_end,
        }

    @property
    def current(self) -> List[CommandNode]:
        if self.scopes:
            return self.scopes[-1].nodes
        return self.root

    def find_field(self, name: str) -> int:
        try:
            return self.schema.find_field(name)
        except KeyError:
            raise UnknownFieldError('field not found in the schema', name)

    def compile(self, text: str) -> Tuple[CommandNode, ...]:
        remaining = text
        match = VARIABLE_PATTERN.fullmatch(remaining)
        while match:
            prefix, expression, remaining = match.groups()
            if prefix:
                self.current.append(Literal(prefix))
            if expression.startswith(DIRECTIVE_SIGIL):
                self.compile_directive(expression)
            else:
                self.current.append(FieldReference(self.find_field(expression)))
            match = VARIABLE_PATTERN.fullmatch(remaining)
        if remaining:
            self.current.append(Literal(remaining))
        if self.scopes:
            unclosed = [
                DIRECTIVE.IF if isinstance(scope, _IfScope) else DIRECTIVE.GROUP
                for scope in self.scopes
            ]
            raise UnbalancedConditionalError('template ended with open scopes', unclosed)
        return tuple(self.root)

    def compile_directive(self, expression: str) -> None:
        match = DIRECTIVE_PATTERN.fullmatch(expression)
        if not match:
            raise UnknownDirectiveError('unable to parse directive', expression)
        name, args = match.groups()
        try:
            DIRECTIVE.enforce(name)
        except KeyError:
            raise UnknownDirectiveError('unknown directive', name)
        self.handlers[name](name, args)

    def split_args(self, name: str, args: Optional[str], minimum: int, maximum: int) -> List[str]:
        """
        split the arguments of a directive, the final argument keeps any further delimiters
        """
        if args is None:
            pieces = []
        else:
            pieces = args.split(ARGUMENT_DELIM, maximum - 1) if maximum else [args]
        if not minimum <= len(pieces) <= maximum or not all(pieces):
            raise MalformedDirectiveError(
                f'${name} requires {minimum}-{maximum} non-empty arguments', name, args
            )
        return pieces

    def compile_if(self, name, args):
        (field_name,) = self.split_args(name, args, 1, 1)
        if ARGUMENT_DELIM in field_name:
            raise MalformedDirectiveError('$if requires a single field name', name, args)
        self.scopes.append(_IfScope(self.find_field(field_name)))

    def open_if(self, name) -> _IfScope:
        if not self.scopes or not isinstance(self.scopes[-1], _IfScope):
            raise OrphanedDirectiveError(f'${name} found outside of an open $if', name)
        return self.scopes[-1]

    def compile_else(self, name, args):
        self.split_args(name, args, 0, 0)
        scope = self.open_if(name)
        if scope.else_branch is not None:
            raise MalformedDirectiveError('$if may only have one $else', name)
        scope.else_branch = []

    def compile_fi(self, name, args):
        self.split_args(name, args, 0, 0)
        scope = self.open_if(name)
        self.scopes.pop()
        self.current.append(scope.close())

    def compile_list(self, name, args):
        conjunction, field_name, separator = self.split_args(name, args, 3, 3)
        self.current.append(ListJoin(conjunction, self.find_field(field_name), separator))

    def compile_product(self, name, args):
        product_field, type_field = self.split_args(name, args, 2, 2)
        if ARGUMENT_DELIM in type_field:
            raise MalformedDirectiveError('$product requires exactly two field names', name, args)
        self.current.append(GeneProduct(self.find_field(product_field), self.find_field(type_field)))

    def compile_include(self, name, args):
        pieces = self.split_args(name, args, 2, 3)
        dataset, link_field = pieces[:2]
        conjunction = pieces[2] if len(pieces) > 2 else DEFAULT_CONJUNCTION
        if self.cache is None:
            raise MalformedDirectiveError('$include requires a global cache', name, args)
        self.current.append(Include(dataset, self.find_field(link_field), conjunction))

    def compile_null(self, name, args):
        self.split_args(name, args, 0, 0)
        self.current.append(Null())

    def compile_group(self, name, args):
        if args is None:
            conjunction, suffix = DEFAULT_CONJUNCTION, ''
        else:
            pieces = args.split(ARGUMENT_DELIM, 1)
            conjunction = pieces[0] or DEFAULT_CONJUNCTION
            suffix = pieces[1] if len(pieces) > 1 else ''
        self.scopes.append(_GroupScope(conjunction, suffix))

    def open_group(self, name) -> _GroupScope:
        if not self.scopes or not isinstance(self.scopes[-1], _GroupScope):
            raise OrphanedDirectiveError(f'${name} found outside of an open $group', name)
        return self.scopes[-1]

    def compile_clause(self, name, args):
        (field_name,) = self.split_args(name, args, 1, 1)
        if ARGUMENT_DELIM in field_name:
            raise MalformedDirectiveError('$clause requires a single field name', name, args)
        scope = self.open_group(name)
        scope.clauses.append((self.find_field(field_name), []))

    def compile_end(self, name, args):
        self.split_args(name, args, 0, 0)
        scope = self.open_group(name)
        self.scopes.pop()
        self.current.append(scope.close())


def compile_template(
    text: str, schema: FieldSchema, cache: Optional[GlobalCache] = None
) -> Template:
    """
    compile a template string against the fields of a record source

    Args:
        text: the template string
        schema: resolves field names to field indices
        cache: global cache for include directives

    Returns:
        Template: the compiled template

    Raises:
        UnknownFieldError: a field name is not in the schema
        UnknownDirectiveError: a directive name is not recognized
        MalformedDirectiveError: a directive has the wrong arguments
        UnbalancedConditionalError: an $if or $group is never closed
        OrphanedDirectiveError: $else, $fi, $clause or $end appear outside their scope
    """
    nodes = _TemplateCompiler(schema, cache).compile(text)
    template = Template(text, nodes, cache)
    logger.debug(
        f'compiled template with {len(nodes)} commands (estimated length {template.estimated_length})'
    )
    return template
