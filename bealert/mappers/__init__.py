"""
Record mappers for the BE-Alert converter
"""

from .record_mapper import RecordMapper, records_from_rows, convert_records

__all__ = ['RecordMapper', 'records_from_rows', 'convert_records']
