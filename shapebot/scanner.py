#!/usr/bin/env python3
"""
QR Scanner Module

Handles camera capture and QR code decoding for shape descriptors.
"""

import cv2
import time
import logging
import numpy as np
from typing import Optional

from .config import (
    CAMERA_INDEX, CAMERA_WIDTH, CAMERA_HEIGHT,
    SCAN_TIMEOUT_S, SCAN_POLL_INTERVAL_S
)
from .errors import DecodeTimeoutError

logger = logging.getLogger(__name__)


class QRScanner:
    """Reads shape descriptors from QR codes held in front of the robot's camera"""

    def __init__(self, camera_index=CAMERA_INDEX, capture=None, clock=time.time, sleep=time.sleep):
        if capture is None:
            capture = cv2.VideoCapture(camera_index)
            if not capture.isOpened():
                raise RuntimeError("Could not open camera")
            capture.set(cv2.CAP_PROP_FRAME_WIDTH, CAMERA_WIDTH)
            capture.set(cv2.CAP_PROP_FRAME_HEIGHT, CAMERA_HEIGHT)
            capture.set(cv2.CAP_PROP_BUFFERSIZE, 1)

        self.cap = capture
        self.detector = cv2.QRCodeDetector()
        self.clock = clock
        self.sleep = sleep

    def flush_camera_buffer(self):
        """Flush camera buffer to get the most recent frame"""
        for _ in range(3):
            self.cap.grab()

    def capture_frame(self) -> Optional[np.ndarray]:
        """Get the most recent frame, or None if the camera returned nothing"""
        self.flush_camera_buffer()
        ret, frame = self.cap.read()
        if not ret:
            return None
        return frame

    def decode(self, frame: Optional[np.ndarray]) -> Optional[str]:
        """Decode the QR code in frame, None when there is none"""
        if frame is None or frame.size == 0:
            return None
        if frame.ndim == 3:
            frame = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        data, _, _ = self.detector.detectAndDecode(frame)
        return data or None

    def scan(self, timeout_s=SCAN_TIMEOUT_S, poll_interval_s=SCAN_POLL_INTERVAL_S) -> str:
        """Poll the camera until a QR code decodes. Raises DecodeTimeoutError."""
        deadline = self.clock() + timeout_s

        while self.clock() < deadline:
            message = self.decode(self.capture_frame())
            if message:
                logger.info(f"QR Code found! Decoded message: {message}")
                return message

            logger.warning("No QR Code found. Adjust the camera.")
            self.sleep(poll_interval_s)

        raise DecodeTimeoutError(timeout_s)

    def release(self):
        """Release camera resources"""
        if self.cap is not None:
            self.cap.release()
            self.cap = None
