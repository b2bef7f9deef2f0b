from nexus_notes.app.session import NotebookSession

__all__ = ["NotebookSession"]
