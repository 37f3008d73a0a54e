"""
module holding the global cache of rendered strings which include commands draw from
"""
from typing import TYPE_CHECKING, Dict, List

import pandas as pd

from .schema import FieldSchema, iter_records
from .util import logger

if TYPE_CHECKING:
    from .compiler import Template


class GlobalCache:
    """
    in-memory store of strings keyed by dataset name and then by key value. Several strings may
    be stored under the same key

    Example:
        >>> cache = GlobalCache()
        >>> cache.write('genomes', '83333.1', 'It is a model organism.')
        >>> cache.lookup('genomes', '83333.1')
        ['It is a model organism.']
    """

    def __init__(self):
        self._datasets: Dict[str, Dict[str, List[str]]] = {}

    def __contains__(self, dataset):
        return dataset in self._datasets

    def __repr__(self):
        return '{}({})'.format(
            self.__class__.__name__,
            ', '.join([f'{name}={len(keys)}' for name, keys in sorted(self._datasets.items())]),
        )

    def datasets(self) -> List[str]:
        return sorted(self._datasets)

    def write(self, dataset: str, key: str, text: str) -> None:
        self._datasets.setdefault(dataset, {}).setdefault(key, []).append(text)

    def lookup(self, dataset: str, key: str) -> List[str]:
        """
        get the strings stored for a key

        Returns:
            List[str]: the strings in the order they were written, empty if there are none
        """
        strings = self._datasets.get(dataset, {}).get(key)
        if strings is None:
            logger.debug(f'no cached strings for {dataset}: {key}')
            return []
        return list(strings)

    def store_frame(
        self, dataset: str, template: 'Template', frame: pd.DataFrame, key_field: str
    ) -> int:
        """
        apply a template to each row of a data frame and store the output under the row's key

        Args:
            dataset: name the strings are stored under
            template: template compiled against the columns of the frame
            frame: the rows to render
            key_field: column holding the key for each row

        Returns:
            int: the number of strings stored
        """
        key_index = FieldSchema.from_frame(frame).find_field(key_field)
        count = 0
        for record in iter_records(frame):
            self.write(dataset, record[key_index], template.apply(record))
            count += 1
        logger.info(f'cached {count} strings for {dataset}')
        return count
