"""Command-line interface for osutil."""
