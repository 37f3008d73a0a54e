"""
module responsible for turning a gene product string and a feature type into an english sentence
"""
from .constants import (
    AMINO_ACIDS,
    FEATURE_TYPE,
    LSU_RRNA_PATTERN,
    RRNA_NAMER,
    RRNA_SPLITTER,
    SSU_RRNA_PATTERN,
    TRNA_PATTERN,
)
from .util import comment_free, is_blank, prefix_article


def describe_trna(product: str) -> str:
    """
    describe a transfer RNA. Standard products have the form tRNA-Ala or tRNA-Ala-GCA where the
    optional last part is the codon

    Example:
        >>> describe_trna('tRNA-Ala-GCA')
        "This feature's product is a transfer RNA for Alanine from codon GCA."
    """
    if is_blank(product):
        return "This feature's product is an unknown type of transfer RNA."
    match = TRNA_PATTERN.fullmatch(product)
    if not match:
        return f"This feature's product is a type of transfer RNA described as {product}."
    code, codon = match.groups()
    amino_acid = AMINO_ACIDS.get(code, f'an unknown amino acid {code}')
    codon = f' from codon {codon}' if codon else ''
    return f"This feature's product is a transfer RNA for {amino_acid}{codon}."


def describe_rrna(product: str) -> str:
    """
    describe a ribosomal RNA. The large and small subunits get a canonical sentence. Anything
    else is reduced to the longest of its ' ## ' or ';' delimited parts, and the part naming
    the RNA is rewritten as 'ribosomal RNA'

    Example:
        >>> describe_rrna('5S rRNA ## 5S ribosomal RNA')
        "This feature's product is a 5S ribosomal RNA."
    """
    if is_blank(product):
        return "This feature's product is an unknown ribosomal RNA."
    elif LSU_RRNA_PATTERN.search(product):
        return "This feature's product is a large subunit ribosomal RNA."
    elif SSU_RRNA_PATTERN.search(product):
        return "This feature's product is a 16S small subunit ribosomal RNA."
    longest_piece = max(RRNA_SPLITTER.split(product), key=len)
    match = RRNA_NAMER.search(longest_piece)
    if not match:
        return f"This feature's product is a ribosomal RNA of type {longest_piece}."
    name = longest_piece[: match.start()] + 'ribosomal RNA' + longest_piece[match.end() :]
    return f"This feature's product is {prefix_article(name)}."


def describe_misc_rna(product: str) -> str:
    if is_blank(product):
        return "This feature's product is a miscellaneous RNA."
    return f"This feature's product is a miscellaneous RNA believed to be {product}."


def describe_protein(product: str) -> str:
    # TODO: split multi-functional products into their individual roles and EC/TC numbers
    return comment_free(product)


def describe_other(feature_type: str) -> str:
    """
    Example:
        >>> describe_other('repeat_region')
        'This feature is a repeat region.'
    """
    if is_blank(feature_type):
        return 'This feature is of unknown type.'
    return f"This feature is {prefix_article(feature_type.replace('_', ' '))}."


PRODUCT_DESCRIBERS = {
    FEATURE_TYPE.TRNA: describe_trna,
    FEATURE_TYPE.RRNA: describe_rrna,
    FEATURE_TYPE.MISC_RNA: describe_misc_rna,
    FEATURE_TYPE.CDS: describe_protein,
}


def describe_product(product: str, feature_type: str) -> str:
    """
    describe a feature based on its gene product and feature type

    Args:
        product: the gene product string (ex. tRNA-Ala, 16S ribosomal RNA)
        feature_type: the feature type code (ex. CDS, tRNA, rRNA, misc_RNA, repeat_region)

    Returns:
        str: the description. For protein-coding features this is the product without its comment
    """
    describer = PRODUCT_DESCRIBERS.get(feature_type)
    if describer is None:
        return describe_other(feature_type)
    return describer(product)
