"""
Conversion pipeline for mdpress.

- md2pdf: Single-document and batch conversion (programmatic API)
- watch: Debounced reconversion on file changes
- cli: Click command-line interface (``mdpress``)
"""
