"""
Main entry point for running tagwm as a module.

Usage:
    python -m tagwm [--debug]

Validates the default configuration (tags, pinned apps, key bindings) and
prints what the scheduler would use.
"""

import argparse
import sys

from loguru import logger

from .binding_manager import BindingManager
from .config import SchedulerConfig
from .errors import ConfigError
from .log import setup_logging
from .pinned_apps import PinnedAppRegistry


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(prog="tagwm", description=__doc__.splitlines()[1])
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.debug else "INFO")

    try:
        config = SchedulerConfig()
        registry = PinnedAppRegistry(config.pinned_apps)
        bindings = BindingManager()
        bindings.setup_default_bindings(config)
        bindings.setup_custom_bindings(config.custom_keybindings)
    except ConfigError as e:
        logger.error("Invalid configuration: {}", e)
        return 1

    logger.info("Tags: {}", " ".join(config.tags))
    for app in registry:
        logger.info("  {} -> {} ({!r})", app.tag, app.command, app.query)
    logger.info("{} key bindings", len(bindings.bindings()))
    for binding in bindings.bindings():
        logger.debug(
            "  {:#x} {!r} -> {} {}",
            binding.keysym,
            binding.modifiers,
            binding.event_topic,
            binding.event_data,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
