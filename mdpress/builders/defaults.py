"""
defaults.py
-----------
Built-in document template and stylesheet.

These are used whenever a requested template or theme name is not found
in the asset library, which includes the names ``default`` and ``light``:
the bundled assets directory only ships the additional variants.

The default stylesheet ends with the Pygments token colors for
``.highlight`` blocks, generated from ``HIGHLIGHT_STYLE``.
"""
# --- Third party imports ---
from pygments.formatters import HtmlFormatter


DEFAULT_TEMPLATE_HTML = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{TITLE}}</title>
    <style>
        {{CSS}}
    </style>
</head>
<body>
    <div class="document">
        <header class="page-header">
            {{TITLE}}
        </header>

        <main class="content">
            <div class="title-page">
                <h1 class="document-title">{{TITLE}}</h1>
            </div>

            <div class="document-content">
                {{CONTENT}}
            </div>
        </main>

        <footer class="page-footer">
        </footer>
    </div>
</body>
</html>
"""

DEFAULT_CSS = """
/* Base styles */
* {
    box-sizing: border-box;
}

body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Roboto', 'Oxygen', 'Ubuntu', 'Cantarell', sans-serif;
    line-height: 1.6;
    color: #333;
    margin: 0;
    padding: 20px;
    background: white;
}

.document {
    max-width: 210mm;
    margin: 0 auto;
    background: white;
    padding: 40px;
}

/* Typography */
h1, h2, h3, h4, h5, h6 {
    margin-top: 2em;
    margin-bottom: 1em;
    line-height: 1.2;
    page-break-after: avoid;
}

h1 { font-size: 2.5em; color: #2c3e50; }
h2 { font-size: 2em; color: #34495e; border-bottom: 2px solid #eee; padding-bottom: 0.3em; }
h3 { font-size: 1.5em; color: #34495e; }
h4 { font-size: 1.2em; }
h5 { font-size: 1.1em; }
h6 { font-size: 1em; }

p {
    margin-bottom: 1em;
    text-align: justify;
}

/* Code */
code {
    font-family: 'SFMono-Regular', 'Consolas', 'Liberation Mono', 'Menlo', monospace;
    background-color: #f8f9fa;
    padding: 2px 6px;
    border-radius: 3px;
    font-size: 0.9em;
}

pre {
    background-color: #f8f9fa;
    border: 1px solid #e9ecef;
    border-radius: 6px;
    padding: 16px;
    overflow-x: auto;
    margin: 1em 0;
    page-break-inside: avoid;
}

pre code {
    background: none;
    padding: 0;
    border-radius: 0;
}

/* Tables */
table {
    width: 100%;
    border-collapse: collapse;
    margin: 1em 0;
    page-break-inside: avoid;
}

th, td {
    border: 1px solid #ddd;
    padding: 12px;
    text-align: left;
}

th {
    background-color: #f8f9fa;
    font-weight: 600;
}

tr:nth-child(even) {
    background-color: #f8f9fa;
}

/* Lists */
ul, ol {
    margin: 1em 0;
    padding-left: 2em;
}

li {
    margin-bottom: 0.5em;
}

li.task-list-item {
    list-style: none;
}

dt {
    font-weight: 600;
}

dd {
    margin: 0 0 1em 2em;
}

/* Blockquotes */
blockquote {
    margin: 1em 0;
    padding: 0 1em;
    border-left: 4px solid #3498db;
    background-color: #f8f9fa;
    font-style: italic;
}

/* Links */
a {
    color: #3498db;
    text-decoration: none;
}

/* Images */
img {
    max-width: 100%;
    height: auto;
    display: block;
    margin: 1em auto;
}

/* Table of Contents */
.toc {
    background-color: #f8f9fa;
    border: 1px solid #e9ecef;
    border-radius: 6px;
    padding: 20px;
    margin: 2em 0;
    page-break-inside: avoid;
}

.toc h2 {
    margin-top: 0;
    margin-bottom: 1em;
    border-bottom: none;
}

.toc ul {
    list-style: none;
    padding-left: 0;
}

.toc li {
    margin-bottom: 0.3em;
}

.toc .toc-h2 { margin-left: 1.5em; }
.toc .toc-h3 { margin-left: 3em; }
.toc .toc-h4 { margin-left: 4.5em; }
.toc .toc-h5 { margin-left: 6em; }
.toc .toc-h6 { margin-left: 7.5em; }

.toc a {
    text-decoration: none;
    color: #333;
}

/* Title page */
.title-page {
    text-align: center;
    margin-bottom: 3em;
    page-break-after: always;
}

.document-title {
    font-size: 3em;
    margin-bottom: 0.5em;
    color: #2c3e50;
}

/* Header and footer */
.page-header, .page-footer {
    font-size: 0.9em;
    color: #7f8c8d;
    text-align: center;
    padding: 10px 0;
}

.page-header {
    border-bottom: 1px solid #eee;
    margin-bottom: 2em;
}

.page-footer {
    border-top: 1px solid #eee;
    margin-top: 2em;
}

/* Print */
@media print {
    body {
        padding: 0;
    }

    .document {
        max-width: none;
        padding: 0;
    }

    h1, h2, h3, h4, h5, h6 {
        page-break-after: avoid;
    }

    pre, blockquote, table, .toc {
        page-break-inside: avoid;
    }

    .no-print {
        display: none !important;
    }
}

@page {
    margin: 2.5cm;
}
"""

HIGHLIGHT_STYLE = "default"
"""Pygments style whose token colors complete the default stylesheet."""

DEFAULT_CSS += (
    "\n/* Syntax highlighting */\n"
    + HtmlFormatter(style=HIGHLIGHT_STYLE).get_style_defs(".highlight")
    + "\n"
)
