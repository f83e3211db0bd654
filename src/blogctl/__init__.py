"""blogctl — authoring and validation tooling for a bilingual markdown blog."""

__version__ = "0.1.0"
