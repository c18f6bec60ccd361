"""evalexplorer - normalize, aggregate and explore LLM evaluation reports."""

__version__ = "0.1.0"
