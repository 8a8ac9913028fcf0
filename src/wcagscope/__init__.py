"""wcagscope — WCAG accessibility reports over HTTP, backed by pa11y."""

__version__ = "0.1.0"
