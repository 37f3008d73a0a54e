class TemplateCompileError(Exception):
    """
    raised when a template string cannot be compiled against a field schema. No template is
    produced when this is raised
    """

    pass


class UnknownFieldError(TemplateCompileError):
    """
    raised when a field reference or a directive argument names a field which the schema does
    not contain
    """

    pass


class UnknownDirectiveError(TemplateCompileError):
    """
    raised when a ``{{$...}}`` expression does not name one of the recognized directives
    """

    pass


class MalformedDirectiveError(TemplateCompileError):
    """
    raised when a directive is given the wrong number or shape of arguments, for example
    ``$product`` with a single field name
    """

    pass


class UnbalancedConditionalError(TemplateCompileError):
    """
    raised when the end of the template is reached with an ``$if`` or ``$group`` still open
    """

    pass


class OrphanedDirectiveError(TemplateCompileError):
    """
    raised when a scope directive appears outside the scope it belongs to, such as ``$else``
    or ``$fi`` with no open ``$if``, or ``$clause`` with no open ``$group``
    """

    pass
