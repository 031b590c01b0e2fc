#!/usr/bin/env python3
"""
Configuration settings for the Shape Drawing Robot

Every value here is a default. The functions and classes that use them
accept keyword overrides, so recalibrating the robot never means editing
the motion code.
"""

# Robot connection settings
ROBOT_IP = "192.168.1.42"
ROBOT_PORT = 12345
COMMAND_TIMEOUT_S = 15  # added on top of the command's own duration

# Descriptor limits
MIN_SIDE_CM = 15
MAX_SIDE_CM = 85
MAX_SHAPES = 5  # shapes per QR code

# Drive calibration (measured with both wheels at 40% power)
DRIVE_POWER = 40
DRIVE_SPEED_CM_S = 12.33

# Turn calibration: 1500 ms at 58% right-wheel power turns the robot 115 degrees
TURN_POWER = 58
TURN_REFERENCE_MS = 1500
TURN_REFERENCE_DEG = 115

# Pause after every drive and turn so the chassis stops rocking
SETTLE_MS = 500

# Triangle turns
# "legacy" turns a fixed TRIANGLE_FIRST_TURN_DEG after the longest side,
# "exterior" turns that corner's real exterior angle instead.
TRIANGLE_TURN_MODE = "legacy"
TRIANGLE_FIRST_TURN_DEG = 92.0  # 1200 ms at the turn calibration above
ENFORCE_TRIANGLE_SIDE_BOUNDS = True

# Camera settings
CAMERA_INDEX = 0
CAMERA_WIDTH = 640
CAMERA_HEIGHT = 480

# QR scanning
SCAN_TIMEOUT_S = 10
SCAN_POLL_INTERVAL_S = 1

# Underlights blink after every finished shape
INDICATOR_COLOUR = (0, 255, 0)
INDICATOR_DELAY_S = 1.5
INDICATOR_HOLD_S = 2.0

# Session report
REPORT_FILE = "shapes_log.txt"
