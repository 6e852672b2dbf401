"""Report exporters."""

from .json_exporter import JsonExporter

__all__ = ["JsonExporter"]
