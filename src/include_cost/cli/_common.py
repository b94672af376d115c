"""Shared CLI helpers."""

from rich.console import Console

# stdout carries the report; everything else goes to stderr
console = Console(stderr=True)

FORMATS = ("tsv", "json", "rich")
