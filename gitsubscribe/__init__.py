"""Keep a list of local git repositories to keep an eye on."""

__version__ = "0.1"
