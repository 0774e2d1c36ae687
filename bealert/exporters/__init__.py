"""
Exporters for the BE-Alert converter
"""

from .csv_exporter import CSVExporter
from .report_exporter import export_report, REPORT_COLUMNS

__all__ = ['CSVExporter', 'export_report', 'REPORT_COLUMNS']
