"""Exceptions raised by chapter location."""


class DocumentLoadError(RuntimeError):
    """The input document could not be opened or decoded"""
