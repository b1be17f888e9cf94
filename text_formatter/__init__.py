"""Core logic for the SQL / XML / JSON Text Formatter.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- recover clean SQL from source-code string concatenations
- pretty-print SQL with named presets
- pretty-print XML and format or minify JSON
- keep a bounded per-session history of results
"""
