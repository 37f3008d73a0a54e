"""
module responsible for the controlled vocabulary and constants used throughout the linetemplate package
"""
import re
from typing import Dict, List


class TemplateNamespace:
    """
    Namespace to hold module constants. Subclasses declare their members as class attributes

    Example:
        >>> class COLOUR(TemplateNamespace):
        ...     RED = 'red'
        >>> COLOUR.values()
        ['red']
    """

    @classmethod
    def to_dict(cls) -> Dict[str, str]:
        return {
            attr: value
            for attr, value in vars(cls).items()
            if not attr.startswith('_') and not isinstance(value, (classmethod, staticmethod))
        }

    @classmethod
    def values(cls) -> List[str]:
        return list(cls.to_dict().values())

    @classmethod
    def enforce(cls, value):
        """
        checks that the current value is a member of the namespace

        Raises:
            KeyError: the value is not a member of the namespace
        """
        if value not in cls.values():
            raise KeyError('value {0} is not a valid member of '.format(repr(value)), cls.values())
        return value


class DIRECTIVE(TemplateNamespace):
    """
    holds controlled vocabulary for the directive names allowed inside a template

    Attributes:
        IF: open a conditional scope gated on a field
        ELSE: switch the innermost conditional to its alternative branch
        FI: close the innermost conditional
        LIST: join a delimited field into an english list
        PRODUCT: describe a gene product given its product and feature type fields
        INCLUDE: join the strings stored in the global cache for a linked key
        NULL: produce no output
        GROUP: open a group of optional clauses
        CLAUSE: start a clause inside the innermost group
        END: close the innermost group
    """

    IF: str = 'if'
    ELSE: str = 'else'
    FI: str = 'fi'
    LIST: str = 'list'
    PRODUCT: str = 'product'
    INCLUDE: str = 'include'
    NULL: str = '0'
    GROUP: str = 'group'
    CLAUSE: str = 'clause'
    END: str = 'end'


class FEATURE_TYPE(TemplateNamespace):
    """
    holds the feature type codes which receive a dedicated gene product description
    """

    TRNA: str = 'tRNA'
    RRNA: str = 'rRNA'
    MISC_RNA: str = 'misc_RNA'
    CDS: str = 'CDS'


DIRECTIVE_SIGIL: str = '$'
ARGUMENT_DELIM: str = ':'

VARIABLE_PATTERN = re.compile(r'(.*?)\{\{(.+?)\}\}(.*)', re.DOTALL)
"""splits a template into a literal prefix, a variable expression and the unscanned remainder"""

DIRECTIVE_PATTERN = re.compile(r'\$(\w+)(?::(.*))?', re.DOTALL)

DEFAULT_CONJUNCTION: str = 'and'
GROUP_SEPARATOR: str = ', '
INCLUDE_SEPARATOR: str = ' '

FIELD_LENGTH_ESTIMATE: int = 10
LIST_LENGTH_ESTIMATE: int = 40
PRODUCT_LENGTH_ESTIMATE: int = 100
INCLUDE_LENGTH_ESTIMATE: int = 80
CLAUSE_LENGTH_OVERHEAD: int = 2
"""estimated extra characters added per group clause for the separator"""

FALSE_VALUES = frozenset(['0', 'f', 'false', 'n', 'no', '-', 'none', 'null'])
"""field values (lower-cased, whitespace removed) which are read as false by a conditional"""

VOWEL_SOUNDS: str = 'aeiou8'
"""leading characters which take the article 'an'"""

AMINO_ACIDS: Dict[str, str] = {
    'Ala': 'Alanine',
    'Arg': 'Arginine',
    'Asn': 'Asparagine',
    'Asp': 'Aspartic acid',
    'Cys': 'Cysteine',
    'Glu': 'Glutamic acid',
    'Gln': 'Glutamine',
    'Gly': 'Glycine',
    'His': 'Histidine',
    'Ile': 'Isoleucine',
    'Leu': 'Leucine',
    'Lys': 'Lysine',
    'Met': 'Methionine',
    'Phe': 'Phenylalanine',
    'Pro': 'Proline',
    'Ser': 'Serine',
    'Thr': 'Threonine',
    'Trp': 'Tryptophan',
    'Tyr': 'Tyrosine',
    'Val': 'Valine',
}
"""full names of the standard amino acids keyed by their 3-letter code"""

TRNA_PATTERN = re.compile(r'tRNA-(\w{3})(?:-([A-Z]{3}))?')
RRNA_SPLITTER = re.compile(r'(?:\s+##|;)\s+')
RRNA_NAMER = re.compile(r'\b(?:ribosomal\s+)?r?RNA\b', re.IGNORECASE)
LSU_RRNA_PATTERN = re.compile(
    r'\bLSU\s+r?RNA|large\s+subunit\s+(?:ribosomal\s+)?r?RNA|\blsuRNA|\b(?:23S|28S)\s+(?:ribosomal\s+)?r?RNA',
    re.IGNORECASE,
)
SSU_RRNA_PATTERN = re.compile(
    r'\bSSU\s+r?RNA|small\s+subunit\s+(?:ribosomal\s+)?r?RNA|\bssuRNA|\b(?:16S|18S)\s+(?:ribosomal\s+)?r?RNA',
    re.IGNORECASE,
)
COMMENT_PATTERN = re.compile(r'\s*[#!].+')
"""trailing comment on a protein function, e.g. 'DNA polymerase # frameshift'"""
