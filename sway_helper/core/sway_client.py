"""Sway IPC client for querying window manager state.

This module provides a blocking wrapper around i3ipc for:
- Window tree (GET_TREE)
- Outputs/monitors (GET_OUTPUTS)
- Sending commands (RUN_COMMAND)

Every failure is raised as SwayIPCError; nothing is retried.
"""

import logging
from pathlib import Path
from typing import List, Optional

import i3ipc

from ..errors import SwayIPCError
from ..models.geometry import ContainerNode, OutputInfo
from .tree import snapshot, snapshot_rect


# Get logger for this module
logger = logging.getLogger('sway_helper.sway_client')


class SwayClient:
    """Blocking wrapper for sway IPC queries.

    The connection is opened lazily on the first query.
    """

    def __init__(self, socket_path: Optional[Path] = None):
        """Initialize sway client.

        Args:
            socket_path: IPC socket path (default: i3ipc discovery via SWAYSOCK/I3SOCK)
        """
        self.socket_path = socket_path
        self._connection: Optional[i3ipc.Connection] = None

    def connect(self) -> None:
        """Connect to the sway IPC socket.

        Raises:
            SwayIPCError: If connection fails
        """
        try:
            logger.debug(f"Connecting to sway IPC socket {self.socket_path or '(auto)'}")
            socket_path = str(self.socket_path) if self.socket_path else None
            self._connection = i3ipc.Connection(socket_path=socket_path)
            logger.info("Connected to sway IPC")
        except Exception as e:
            logger.error(f"Failed to connect to sway IPC: {e}")
            raise SwayIPCError("connect", str(e))

    def _conn(self) -> i3ipc.Connection:
        if self._connection is None:
            self.connect()
        return self._connection

    def get_tree(self) -> ContainerNode:
        """Get the window tree (GET_TREE) as an immutable snapshot.

        Raises:
            SwayIPCError: If query fails
        """
        conn = self._conn()
        try:
            logger.debug("IPC query: GET_TREE")
            tree = conn.get_tree()
        except Exception as e:
            logger.error(f"GET_TREE failed: {e}")
            raise SwayIPCError("GET_TREE", str(e))
        return snapshot(tree)

    def get_outputs(self) -> List[OutputInfo]:
        """Get all outputs/monitors (GET_OUTPUTS).

        Raises:
            SwayIPCError: If query fails
        """
        conn = self._conn()
        try:
            logger.debug("IPC query: GET_OUTPUTS")
            outputs = conn.get_outputs()
        except Exception as e:
            logger.error(f"GET_OUTPUTS failed: {e}")
            raise SwayIPCError("GET_OUTPUTS", str(e))

        logger.debug(f"GET_OUTPUTS returned {len(outputs)} output(s)")
        return [
            OutputInfo(
                name=out.name,
                make=getattr(out, "make", None),
                model=getattr(out, "model", None),
                serial=getattr(out, "serial", None),
                active=bool(out.active),
                rect=snapshot_rect(out.rect),
            )
            for out in outputs
        ]

    def command(self, cmd: str) -> None:
        """Send a command to sway (RUN_COMMAND).

        Raises:
            SwayIPCError: If the transport fails or sway rejects the command
        """
        conn = self._conn()
        try:
            logger.debug(f"IPC command: {cmd}")
            results = conn.command(cmd)
        except Exception as e:
            logger.error(f"RUN_COMMAND failed for '{cmd}': {e}")
            raise SwayIPCError("RUN_COMMAND", f"'{cmd}': {e}")

        failures = [r for r in results if not r.success]
        logger.debug(f"RUN_COMMAND completed: {len(results) - len(failures)}/{len(results)} succeeded")
        if failures:
            reason = "; ".join(getattr(r, "error", None) or "unknown error" for r in failures)
            raise SwayIPCError("RUN_COMMAND", f"'{cmd}': {reason}")
