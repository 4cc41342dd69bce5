"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys

from .config_manager import DEFAULT_CONFIG_FILE, ConfigManager


def main(argv: list[str] | None = None) -> int:
    """Start up, load the configuration file and report the outcome."""
    parser = argparse.ArgumentParser(prog="toollinux", description="System tool startup.")
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_FILE,
        help=f"configuration file (default: {DEFAULT_CONFIG_FILE})",
    )
    args = parser.parse_args(argv)

    print("Starting ToolLinux...")
    cfg = ConfigManager()
    try:
        cfg.load(args.config)
    except OSError:
        print("Failed to load config file.")
    else:
        print("Config loaded successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())