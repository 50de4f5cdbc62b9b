"""Core logic for the CSV to JSON Converter.

The Gradio UI lives in `app.py` (layout in `ui.py`); the HTTP API in `api.py`
and the command line in `cli.py`. The rest of this package holds the pure
conversion pieces:
- tokenize delimited text into rows (`tokenizer`)
- infer field types (`inference`)
- reshape rows into JSON layouts (`shaping`, `converter`)
"""
