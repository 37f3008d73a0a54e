"""
module which holds the field schema used to resolve names while compiling a template, and the
adapters which let an in-memory table act as a record source
"""
from collections.abc import Mapping
from typing import Iterable, Iterator, List, Sequence

import pandas as pd

Record = Sequence[str]


class FieldSchema(Mapping):
    """
    read-only mapping of field name to field index for a tabular record source

    Attributes:
        labels: the field names in column order
    """

    def __init__(self, labels: Iterable[str]):
        labels = [str(label) for label in labels]
        if len(set(labels)) != len(labels):
            raise KeyError('duplicate column name: field names in the header must be unique', labels)
        self._labels = tuple(labels)
        self._index = {label: index for index, label in enumerate(self._labels)}

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> 'FieldSchema':
        return cls(frame.columns)

    @property
    def labels(self):
        return self._labels

    def __getitem__(self, name):
        return self._index[name]

    def __len__(self):
        return len(self._labels)

    def __iter__(self):
        return iter(self._labels)

    def __repr__(self):
        return '{}({})'.format(self.__class__.__name__, ', '.join(self._labels))

    def find_field(self, name: str) -> int:
        """
        resolve a field specifier to a (0-based) field index

        The specifier is either a 1-based column number, where 0 refers to the last column and
        negative numbers count further back from it, or a column name. Names are compared
        case-insensitively, and a dotted label such as ``genome.genome_id`` also answers to its
        final component (``genome_id``). When several labels match, the right-most wins.

        Args:
            name: the column number or name

        Returns:
            int: the index of the field

        Raises:
            KeyError: no field matches the specifier

        Example:
            >>> FieldSchema(['genome.genome_id', 'name']).find_field('GENOME_ID')
            0
            >>> FieldSchema(['genome.genome_id', 'name']).find_field('0')
            1
        """
        try:
            index = int(name) - 1
        except (TypeError, ValueError):
            index = self._find_column(name)
        else:
            if index < 0:
                index += len(self._labels)
        if index < 0 or index >= len(self._labels):
            raise KeyError('invalid field specifier', name, self._labels)
        return index

    def _find_column(self, name: str) -> int:
        normalized = str(name).lower()
        for index in range(len(self._labels) - 1, -1, -1):
            label = self._labels[index].lower()
            if normalized == label or normalized == label.rsplit('.', 1)[-1]:
                return index
        return -1


def iter_records(frame: pd.DataFrame) -> Iterator[List[str]]:
    """
    iterate over the rows of a data frame as records of strings. Missing values are
    given as empty strings
    """
    for row in frame.fillna('').astype(str).itertuples(index=False, name=None):
        yield list(row)
