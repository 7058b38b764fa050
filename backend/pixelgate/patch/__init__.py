"""
Patch module

Typed model of the structured patch handed over for the dataset file.
"""
from .errors import MalformedPathError, PatchFormatError, RecordLookupError, UnsupportedOperationError
from .paths import RecordPath, get_index_from_path, parse_record_path
from .schema import (
    AddOperation, DatasetSnapshot, DiffOperation, PixelRecord, RemoveOperation,
    ReplaceOperation, StructuredPatch, TestOperation
)

__all__ = [
    'PatchFormatError', 'MalformedPathError', 'UnsupportedOperationError', 'RecordLookupError',
    'RecordPath', 'parse_record_path', 'get_index_from_path',
    'PixelRecord', 'DatasetSnapshot', 'StructuredPatch', 'DiffOperation',
    'AddOperation', 'RemoveOperation', 'ReplaceOperation', 'TestOperation'
]
