"""Rendering support for exported block tables, transport-agnostic.

Contains:
- text: inline formatting resolver (formatted runs -> nested spans)
- blocks: kind dispatcher for a single block's own markup
- renderer: tree walker, sibling grouping and list wrapping (fragment + page)
- exporter: load an export file, render a page, write HTML to disk
"""
