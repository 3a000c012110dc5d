"""rubyfilter: LaTeX-like ruby annotations for plain text."""

__version__ = "0.1.0"
