"""Command line interface for notion2html."""
