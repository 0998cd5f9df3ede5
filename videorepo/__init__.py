"""videorepo - browse remote video catalogs from a file picker."""

__version__ = "0.1.0"
