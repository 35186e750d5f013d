# umd/markdown/exceptions.py


class RenderError(RuntimeError):
    """The Markdown renderer failed (Pandoc missing or crashing)."""
