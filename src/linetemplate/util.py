import logging
from typing import List, Optional, Sequence

from .constants import COMMENT_PATTERN, FALSE_VALUES, VOWEL_SOUNDS

logger = logging.getLogger('linetemplate')


def is_blank(input_value: Optional[str]) -> bool:
    """
    check if a field value is missing or consists only of whitespace

    Example:
        >>> is_blank('  ')
        True
        >>> is_blank('x')
        False
    """
    return input_value is None or not str(input_value).strip()


def cast_flag(input_value: Optional[str]) -> bool:
    """
    read a field value as a boolean flag for a conditional. Blank values and the
    recognized false tokens (0, f, false, n, no, -, none, null) are False, anything
    else is True

    Example:
        >>> cast_flag('No')
        False
        >>> cast_flag('Escherichia coli')
        True
    """
    if input_value is None:
        return False
    value = ''.join(str(input_value).split()).lower()
    if not value:
        return False
    return value not in FALSE_VALUES


def split_whole(input_value: str, separator: str) -> List[str]:
    """
    split a string on every occurrence of the whole separator string. Empty pieces,
    including those produced by adjacent separators, are discarded

    Example:
        >>> split_whole('a :: b::::c', '::')
        ['a ', ' b', 'c']
    """
    if not input_value:
        return []
    return [piece for piece in input_value.split(separator) if piece]


def conjunct(conjunction: str, items: Sequence[str], separator: str = ', ') -> str:
    """
    join a list of phrases into an english list, placing the conjunction before the
    final item

    Args:
        conjunction: the word placed before the final item (ex. and, or)
        items: the phrases to join
        separator: glue placed between all items except the final pair

    Example:
        >>> conjunct('and', ['x', 'y'])
        'x and y'
        >>> conjunct('or', ['x', 'y', 'z'])
        'x, y or z'
    """
    if not items:
        return ''
    elif len(items) == 1:
        return items[0]
    elif len(items) == 2:
        return f'{items[0]} {conjunction} {items[1]}'
    return separator.join(items[:-1]) + f' {conjunction} {items[-1]}'


def prefix_article(phrase: str) -> str:
    """
    put the correct indefinite article in front of a phrase

    Example:
        >>> prefix_article('ribosomal RNA')
        'a ribosomal RNA'
        >>> prefix_article('8S ribosomal RNA')
        'an 8S ribosomal RNA'
    """
    if not phrase:
        return phrase
    article = 'an' if phrase[0].lower() in VOWEL_SOUNDS else 'a'
    return f'{article} {phrase}'


def comment_free(function: str) -> str:
    """
    remove the trailing comment from a protein function string

    Example:
        >>> comment_free('DNA polymerase III # frameshift')
        'DNA polymerase III'
    """
    return COMMENT_PATTERN.sub('', function, count=1)
