# sitepull/source/plugins/__init__.py
from sitepull.source.plugins.export_file import ExportFileSource
from sitepull.source.plugins.sanity import SanitySource

__all__ = ["ExportFileSource", "SanitySource"]
