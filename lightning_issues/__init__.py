"""Lightning Issues: AI-suggested GitHub issues for any public repository."""

__version__ = "0.1.0"
