"""
Application Launcher

Spawns applications in response to command events.
"""

import os
import subprocess

from loguru import logger

from .hooks import StartupHook


class ApplicationLauncher(StartupHook):
    """Spawns applications in response to command events.

    This component subscribes to spawn command events and launches the
    configured programs. As a startup hook it runs the autostart list.

    Responsibilities:
    - CMD_SPAWN: Spawn an arbitrary command (pinned apps)
    - CMD_SPAWN_TERMINAL: Spawn terminal application
    - CMD_SPAWN_LAUNCHER: Spawn application launcher
    - CMD_LOCK: Spawn the screen locker
    """

    def __init__(self, bus, config):
        """Initialize application launcher.

        Args:
            bus: Event bus instance (Pypubsub)
            config: Configuration object with terminal/launcher/lock commands
        """
        self.bus = bus
        self.config = config
        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to spawn command events."""
        from . import topics

        self.bus.subscribe(self._on_spawn, topics.CMD_SPAWN)
        self.bus.subscribe(self._on_spawn_terminal, topics.CMD_SPAWN_TERMINAL)
        self.bus.subscribe(self._on_spawn_launcher, topics.CMD_SPAWN_LAUNCHER)
        self.bus.subscribe(self._on_lock, topics.CMD_LOCK)

    def on_startup(self, session):
        for command in self.config.autostart:
            self.spawn(command)

    def _on_spawn(self, command: str):
        """Handle CMD_SPAWN command."""
        self.spawn(command)

    def _on_spawn_terminal(self):
        """Handle CMD_SPAWN_TERMINAL command."""
        self.spawn(self.config.terminal)

    def _on_spawn_launcher(self):
        """Handle CMD_SPAWN_LAUNCHER command."""
        self.spawn(self.config.launcher)

    def _on_lock(self):
        """Handle CMD_LOCK command."""
        self.spawn(self.config.lock_command)

    def spawn(self, command: str) -> bool:
        """Spawn a program detached from the window manager.

        Args:
            command: Shell command to execute

        Returns:
            True if the process was started
        """
        try:
            env = os.environ.copy()
            subprocess.Popen(
                command,
                shell=True,
                start_new_session=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                env=env,
            )
        except OSError as e:
            logger.error("Failed to spawn {}: {}", command, e)
            return False
        logger.info("Spawned {}", command)
        return True
