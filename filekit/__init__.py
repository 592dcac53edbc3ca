"""Small file utilities: copying, text files, a log book, prompts and TCP transfer."""

__version__ = "0.1.0"