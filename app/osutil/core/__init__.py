"""Core logic for osutil: configuration, decisions and the outdated check."""
