import pandas as pd
import pytest
from linetemplate.schema import FieldSchema, iter_records


@pytest.fixture
def schema():
    return FieldSchema(['genome.genome_id', 'genome.name', 'feature.name', 'Product'])


class TestFieldSchema:
    def test_mapping(self, schema):
        assert len(schema) == 4
        assert list(schema) == ['genome.genome_id', 'genome.name', 'feature.name', 'Product']
        assert schema['feature.name'] == 2
        assert 'Product' in schema
        with pytest.raises(KeyError):
            schema['product']

    def test_duplicate_labels(self):
        with pytest.raises(KeyError):
            FieldSchema(['a', 'b', 'a'])

    def test_from_frame(self):
        frame = pd.DataFrame({'x': ['1'], 'y': ['2']})
        schema = FieldSchema.from_frame(frame)
        assert schema.labels == ('x', 'y')

    def test_repr(self):
        assert repr(FieldSchema(['a', 'b'])) == 'FieldSchema(a, b)'


class TestFindField:
    def test_column_number(self, schema):
        assert schema.find_field('1') == 0
        assert schema.find_field('4') == 3

    def test_zero_is_last_column(self, schema):
        assert schema.find_field('0') == 3

    def test_negative_counts_back_from_last(self, schema):
        assert schema.find_field('-1') == 2
        assert schema.find_field('-3') == 0

    @pytest.mark.parametrize('name', ['5', '-4', '-10'])
    def test_column_number_out_of_range(self, schema, name):
        with pytest.raises(KeyError):
            schema.find_field(name)

    def test_exact_name(self, schema):
        assert schema.find_field('genome.name') == 1

    def test_case_insensitive(self, schema):
        assert schema.find_field('product') == 3
        assert schema.find_field('GENOME.GENOME_ID') == 0

    def test_dotted_suffix(self, schema):
        assert schema.find_field('genome_id') == 0

    def test_right_most_match_wins(self, schema):
        assert schema.find_field('name') == 2

    def test_unknown_name(self, schema):
        with pytest.raises(KeyError):
            schema.find_field('genome')
        with pytest.raises(KeyError):
            schema.find_field('')


class TestIterRecords:
    def test_missing_values_are_blank(self):
        frame = pd.DataFrame({'a': ['x', None, 'z'], 'b': ['1', 'y', float('nan')]})
        assert list(iter_records(frame)) == [['x', '1'], ['', 'y'], ['z', '']]

    def test_values_are_strings(self):
        frame = pd.DataFrame({'a': [1, 2], 'b': ['u', 'v']})
        assert list(iter_records(frame)) == [['1', 'u'], ['2', 'v']]

    def test_empty_frame(self):
        assert list(iter_records(pd.DataFrame({'a': []}))) == []
