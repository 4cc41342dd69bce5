"""Linux system toolkit: config files, logging, system and disk information."""

__version__ = "0.1.0"