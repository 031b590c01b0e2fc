#!/usr/bin/env python3
"""
Shape Drawing Robot - Main Application

Scans a QR code describing up to five shapes, drives the robot around each
valid one, and appends a summary of the session to the report file when the
program exits.
"""

import time
import logging
import argparse
from typing import List, Optional

from . import config
from ._types import ShapeKind, ShapeSpec
from .errors import ActuationError, DecodeTimeoutError, PlanError, TooManyShapesError
from .parser import parse
from .planner import CommandKind, MotionCommand, build
from .robot_comms import RobotComms
from .scanner import QRScanner
from .session import SessionAggregator, ShapeRecord, append_report

logger = logging.getLogger(__name__)

BANNER = "-" * 69


class ShapeDrawer:
    """Main application class that orchestrates shape drawing"""

    def __init__(self, scanner: Optional[QRScanner] = None, robot: Optional[RobotComms] = None,
                 session: Optional[SessionAggregator] = None, report_path=config.REPORT_FILE,
                 triangle_mode=config.TRIANGLE_TURN_MODE,
                 enforce_triangle_bounds=config.ENFORCE_TRIANGLE_SIDE_BOUNDS,
                 clock=time.time, sleep=time.sleep):
        # The camera is opened on first scan, so a drawer can be built without one
        self._scanner = scanner
        self.robot = robot if robot is not None else RobotComms()
        self.session = session if session is not None else SessionAggregator()
        self.report_path = report_path
        self.triangle_mode = triangle_mode
        self.enforce_triangle_bounds = enforce_triangle_bounds
        self.clock = clock
        self.sleep = sleep

    @property
    def scanner(self) -> QRScanner:
        if self._scanner is None:
            self._scanner = QRScanner()
        return self._scanner

    def scan_and_draw(self) -> List[ShapeRecord]:
        """Scan one QR code and draw every valid shape in it"""
        logger.info("Scanning QR Code for shapes...")
        try:
            descriptor = self.scanner.scan()
        except DecodeTimeoutError as e:
            logger.error(f"{e}. Returning to main menu...")
            return []
        return self.process_descriptor(descriptor)

    def process_descriptor(self, descriptor: str) -> List[ShapeRecord]:
        """Parse a descriptor and draw its shapes one after another"""
        try:
            outcomes = parse(descriptor, self.enforce_triangle_bounds)
        except TooManyShapesError as e:
            logger.error(f"ERROR: {e}")
            return []

        records = []
        for outcome in outcomes:
            if not outcome.ok:
                logger.error(f"ERROR: {outcome.error}")
                continue

            try:
                records.append(self.draw_shape(outcome.spec))
            except PlanError as e:
                logger.error(f"ERROR: could not plan {outcome.spec.describe()}: {e}")
            except ActuationError as e:
                logger.error(f"ERROR: {outcome.spec.describe()} aborted: {e}")
                self.robot.stop()

        return records

    def draw_shape(self, spec: ShapeSpec) -> ShapeRecord:
        """Drive one shape and record it in the session"""
        commands = build(spec, self.triangle_mode)

        logger.info(BANNER)
        logger.info(self._drawing_message(spec))
        logger.info(BANNER)

        start_time = self.clock()
        self.execute(commands)
        duration_ms = int((self.clock() - start_time) * 1000)

        record = ShapeRecord.from_spec(spec, duration_ms)
        self.session.record_shape(record)
        self.signal_success()
        return record

    def execute(self, commands: List[MotionCommand]):
        """Send a plan to the robot, command by command. Raises ActuationError."""
        for command in commands:
            if command.kind is CommandKind.PAUSE:
                self.sleep(command.duration_ms / 1000.0)
                continue

            if not self.robot.drive(command.left_power, command.right_power, command.duration_ms):
                raise ActuationError("Robot did not complete {} for {} ms".format(
                    command.kind.value, command.duration_ms))

    def signal_success(self):
        """Blink the underlights after a finished shape"""
        self.sleep(config.INDICATOR_DELAY_S)
        if not self.robot.set_indicator(config.INDICATOR_COLOUR):
            logger.warning("Could not switch underlights on")
            return
        self.sleep(config.INDICATOR_HOLD_S)
        if not self.robot.clear_indicator():
            logger.warning("Could not switch underlights off")

    def finish(self) -> str:
        """Render the session summary and append it to the report file"""
        return append_report(self.session.render(), self.report_path)

    @staticmethod
    def _drawing_message(spec: ShapeSpec) -> str:
        if spec.kind is ShapeKind.SQUARE:
            side = spec.sides[0]
            return "Drawing a square with sides: {}x{}cm".format(side, side)
        return "Drawing a {} with sides: {}".format(
            spec.kind.label.lower(), ", ".join("{}cm".format(s) for s in spec.sides))

    def run(self):
        """Main menu loop"""
        try:
            while True:
                print("\n" + BANNER)
                print("\t\t\tMain Menu:")
                print("\t\t\t1. Scan QR code for shapes")
                print("\t\t\t2. Exit")
                print(BANNER)

                choice = input("\nEnter choice (1-2): ").strip()
                if choice == "1":
                    self.scan_and_draw()
                elif choice == "2":
                    logger.info("Exiting the program...")
                    break
                else:
                    print("Invalid choice!")

        except (KeyboardInterrupt, EOFError):
            logger.info("Stopping...")
        finally:
            try:
                self.robot.stop()
                self.finish()
            finally:
                if self._scanner is not None:
                    self._scanner.release()


def main():
    p = argparse.ArgumentParser(description="Draw shapes read from QR codes")
    p.add_argument("--robot-ip", default=config.ROBOT_IP, help="Address of the robot server")
    p.add_argument("--robot-port", type=int, default=config.ROBOT_PORT)
    p.add_argument("--camera", type=int, default=config.CAMERA_INDEX, help="Camera index")
    p.add_argument("--report", default=config.REPORT_FILE, help="Session report file (appended)")
    p.add_argument("--triangle-mode", choices=["legacy", "exterior"], default=config.TRIANGLE_TURN_MODE,
                   help="Turn after the longest triangle side: fixed calibration or true exterior angle")
    p.add_argument("--no-triangle-bounds", action="store_true",
                   help="Do not range-check triangle sides while parsing")
    args = p.parse_args()

    drawer = ShapeDrawer(
        scanner=QRScanner(camera_index=args.camera),
        robot=RobotComms(args.robot_ip, args.robot_port),
        report_path=args.report,
        triangle_mode=args.triangle_mode,
        enforce_triangle_bounds=not args.no_triangle_bounds,
    )
    drawer.run()


if __name__ == "__main__":
    main()
