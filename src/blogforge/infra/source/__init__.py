from blogforge.infra.source.filesystem import MARKDOWN_SUFFIXES, FilesystemContentSource

__all__ = ["MARKDOWN_SUFFIXES", "FilesystemContentSource"]
