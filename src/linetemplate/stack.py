class ConditionalStack:
    """
    stack of if-contexts for the translation of a single record. The bottom (root) context is
    always True, and each pushed context is only True when its own condition and every enclosing
    context are True

    Example:
        >>> stack = ConditionalStack()
        >>> stack.push(False)
        >>> stack.push(True)
        >>> stack.peek()
        False
    """

    def __init__(self):
        self._contexts = [True]

    def __len__(self):
        return len(self._contexts)

    def __repr__(self):
        return 'ConditionalStack({})'.format(self._contexts)

    def push(self, flag: bool) -> None:
        self._contexts.append(bool(flag) and self._contexts[-1])

    def peek(self) -> bool:
        return self._contexts[-1]

    def flip_if_parent_true(self) -> None:
        """
        switch the current context to its else-branch. The flip only happens when the enclosing
        context allows output, otherwise both branches stay suppressed
        """
        if self._contexts[-2]:
            self._contexts[-1] = not self._contexts[-1]

    def pop(self) -> bool:
        return self._contexts.pop()
