"""
Document builders for mdpress.

- html: Markdown → HTML fragment (markdown-it-py, Pygments)
- toc: Table of contents injection at the ``<!-- TOC -->`` marker
- document: Template and theme composition into a full HTML document
- pdfbuilder: HTML → PDF through headless Chromium (Playwright)
"""
