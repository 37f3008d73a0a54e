"""
compiles line templates which turn the records of a tabular data source into english text
"""
from .cache import GlobalCache
from .compiler import Template, compile_template
from .error import (
    MalformedDirectiveError,
    OrphanedDirectiveError,
    TemplateCompileError,
    UnbalancedConditionalError,
    UnknownDirectiveError,
    UnknownFieldError,
)
from .schema import FieldSchema, iter_records

__version__ = '0.1.0'
