"""Demonstration module for html2mark."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from html2mark import COLORS, MAKE_REFERENCE_LINKS, UNDERSCORED_HEADINGS, WRAP, html_to_markdown

page = """
<html>
<head><title>Release notes</title></head>
<body>
<h1>Release notes</h1>
<p>This release <b>fixes <i>several</i> bugs</b> and adds
<a href="https://example.com/docs/changelog/latest" title="Changelog">a changelog</a>.
<ul>
  <li>Faster parsing
  <li>Nested lists:<ol><li>one<li>two</ol>
</ul>
<blockquote><p>Unclosed tags are fine</blockquote>
<pre>$ html2mark page.html --colors</pre>
"""

# Plain Markdown with underlined headings and numbered references
print(html_to_markdown(page, UNDERSCORED_HEADINGS | MAKE_REFERENCE_LINKS))

# The same document colored and wrapped for a narrow terminal
print(html_to_markdown(page, COLORS | WRAP, wrap_width=40))
