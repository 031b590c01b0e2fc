#!/usr/bin/env python3
"""
Robot Communication Module

Handles all communication with the drawing robot via TCP socket.
"""

import json
import socket
import logging

from .config import ROBOT_IP, ROBOT_PORT, COMMAND_TIMEOUT_S

logger = logging.getLogger(__name__)


class RobotComms:
    """Handles communication with the drawing robot"""

    def __init__(self, ip=ROBOT_IP, port=ROBOT_PORT, timeout=COMMAND_TIMEOUT_S):
        self.ip = ip
        self.port = port
        self.timeout = timeout

    def send_command(self, command: str, wait_s: float = 0, **params) -> bool:
        """Send a command to the robot server.

        The server only answers once the command has finished, so the socket
        timeout is stretched by wait_s for long moves.
        """
        try:
            with socket.create_connection((self.ip, self.port), timeout=self.timeout + wait_s) as s:
                # Prepare command
                message = {
                    "command": command,
                    **params
                }

                # Send command
                s.sendall((json.dumps(message) + "\n").encode("utf-8"))

                # Get response
                response = s.recv(1024).decode("utf-8").strip()
                return response == "OK"

        except socket.timeout:
            logger.error("Command timed out - robot might still be moving")
            return False
        except OSError as e:
            logger.error("Failed to send command: {}".format(e))
            return False

    def drive(self, left_power: int, right_power: int, duration_ms: int) -> bool:
        """Run both wheels at the given power for duration_ms, blocking until done"""
        return self.send_command("MOVE", wait_s=duration_ms / 1000.0,
                                 left=left_power, right=right_power, duration=duration_ms)

    def set_indicator(self, rgb) -> bool:
        """Fill the underlights with an (r, g, b) colour"""
        return self.send_command("LIGHTS", rgb=list(rgb))

    def clear_indicator(self) -> bool:
        """Switch the underlights off"""
        return self.send_command("LIGHTS_OFF")

    def stop(self) -> bool:
        """Stop all motors"""
        return self.send_command("STOP")
