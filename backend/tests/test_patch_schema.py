import pytest

from pixelgate.patch.errors import PatchFormatError, RecordLookupError, UnsupportedOperationError
from pixelgate.patch.schema import (
    AddOperation,
    DatasetSnapshot,
    PixelRecord,
    RemoveOperation,
    ReplaceOperation,
    StructuredPatch,
)


def test_parse_builds_typed_operations():
    patch = StructuredPatch.parse({
        "before": {"data": [{"x": 0, "y": 0, "color": "#000", "username": "<UNCLAIMED>"}]},
        "after": {"data": []},
        "diff": [
            {"op": "add", "path": "/data/1", "value": {"x": 1}},
            {"op": "remove", "path": "/data/0"},
            {"op": "replace", "path": "/data/0/color", "value": "#fff"},
            {"op": "test", "path": "/data/0/username", "value": "alice"},
        ],
    })

    assert [type(op) for op in patch.diff[:3]] == [AddOperation, RemoveOperation, ReplaceOperation]
    assert [op.op for op in patch.diff] == ["add", "remove", "replace", "test"]
    assert patch.before.record_at(0).username == "<UNCLAIMED>"


def test_parse_rejects_unknown_operation_kind():
    with pytest.raises(UnsupportedOperationError) as excinfo:
        StructuredPatch.parse({"diff": [{"op": "move", "from": "/data/1", "path": "/data/2"}]})
    assert excinfo.value.op == "move"


def test_parse_rejects_operation_without_path():
    with pytest.raises(PatchFormatError):
        StructuredPatch.parse({"diff": [{"op": "replace", "value": "#fff"}]})


def test_parse_rejects_non_object():
    with pytest.raises(PatchFormatError):
        StructuredPatch.parse(None)


def test_missing_snapshots_default_to_empty():
    patch = StructuredPatch.parse({"diff": []})
    assert patch.before.data == []
    assert patch.after.data == []


def test_pixel_record_from_non_mapping_is_empty():
    record = PixelRecord.from_value("#fff")
    assert (record.x, record.y, record.color, record.username) == (None, None, None, None)


def test_pixel_record_keeps_bad_values_for_the_validator():
    record = PixelRecord.from_value({"x": "3", "y": -1, "color": "", "username": 12, "extra": True})
    assert record.x == "3"
    assert record.y == -1
    assert record.username == 12


def test_record_lookup_out_of_range():
    snapshot = DatasetSnapshot(data=[{"x": 0}])
    assert snapshot.has_record(0)
    assert not snapshot.has_record(1)
    with pytest.raises(RecordLookupError) as excinfo:
        snapshot.record_at(1)
    assert excinfo.value.record_index == 1
