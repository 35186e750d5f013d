# umd/markdown/config.py

PANDOC_FORMAT = "commonmark+pipe_tables+strikeout+autolink_bare_uris+task_lists+footnotes-raw_html"


def _setting(name, default=None):
    # Django is optional at import time; settings are read per call.
    from django.conf import settings

    if not settings.configured:
        return default
    return getattr(settings, name, default)


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    The reader is plain CommonMark with the GFM-style extensions wiki pages
    rely on. Raw HTML is switched off: every HTML element in the output comes
    from the renderer or the postprocessors, never from the author.

    Extra arguments can be appended with ``settings.UMD_PANDOC_EXTRA_ARGS``.
    """
    return {
        "format": PANDOC_FORMAT,
        "to": "html5",
        "extra_args": [
            # One line per block; the restorers match markers within a line
            "--wrap=none",
            *_setting("UMD_PANDOC_EXTRA_ARGS", []),
        ],
    }


def get_base_url():
    """Default base URL for root-relative links, from ``settings.UMD_BASE_URL``."""
    return _setting("UMD_BASE_URL")
