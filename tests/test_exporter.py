"""
Tests for CSV export.
"""
from csv_preview.core.dataset import Dataset
from csv_preview.core.exporter import dataset_to_dataframe, export_csv, save_csv
from csv_preview.core.parser import parse


class TestExportCsv:
    """Test serialization of the full dataset."""

    def test_header_and_rows(self):
        dataset = Dataset.from_records([{"a": 1, "b": "x"}, {"a": 2.5, "b": "y"}])

        assert export_csv(dataset) == "a,b\n1,x\n2.5,y\n"

    def test_null_becomes_empty_field(self):
        dataset = Dataset.from_records([{"a": 1, "b": None}, {"a": None, "b": "y"}])

        assert export_csv(dataset) == "a,b\n1,\n,y\n"

    def test_integral_float_written_without_fraction(self):
        dataset = Dataset.from_records([{"a": 1000.0}])

        assert export_csv(dataset) == "a\n1000\n"

    def test_delimiter_in_value_is_quoted(self):
        dataset = Dataset.from_records([{"a": "x,y", "b": 1}])

        assert export_csv(dataset) == 'a,b\n"x,y",1\n'

    def test_headers_only(self):
        dataset = Dataset(headers=["a", "b"], rows=[])

        assert export_csv(dataset).strip() == "a,b"

    def test_custom_delimiter(self):
        dataset = Dataset.from_records([{"a": 1, "b": 2}])

        assert export_csv(dataset, delimiter=";") == "a;b\n1;2\n"

    def test_round_trip(self):
        text = "name,amount,note\nParis,2.5,\nLyon,12,\"near, river\"\n,7,x\n"
        original = parse(text).to_dataset()

        again = parse(export_csv(original)).to_dataset()

        assert again.headers == original.headers
        assert again.rows == original.rows

    def test_dataframe_is_object_dtype(self):
        df = dataset_to_dataframe(Dataset.from_records([{"a": 1}, {"a": None}]))

        assert str(df["a"].dtype) == "object"
        assert df["a"].tolist() == ["1", None]


class TestSaveCsv:
    """Test writing to disk."""

    def test_save(self, tmp_path):
        dataset = Dataset.from_records([{"a": 1}])
        path = save_csv(dataset, tmp_path / "out.csv")

        assert path.read_text(encoding="utf-8") == "a\n1\n"
