"""Resume Studio: a resume editor with undo/redo history, HTML templates and PDF export."""

__version__ = "0.1.0"
