"""datebucket: sort files into folders named after their creation date."""

__version__ = "0.1.0"
