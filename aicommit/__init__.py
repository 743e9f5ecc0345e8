"""aicommit - generate git commit messages from the working tree diff."""

__version__ = "1.0.0"
