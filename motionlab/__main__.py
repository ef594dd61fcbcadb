"""
Motion Lab entry point

Launches the PyQt6 GUI application
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import AppConfig
from .serial.protocol import LineEnding

logger = logging.getLogger("motionlab")

LINE_ENDINGS = {
    "none": LineEnding.NONE,
    "lf": LineEnding.LF,
    "cr": LineEnding.CR,
    "crlf": LineEnding.CRLF,
}


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="motionlab",
        description="Motion Lab - IMU visualization toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
    motionlab                                  # simulated sensor
    motionlab --imu serial --port /dev/ttyUSB0

Keys:
    1-6 select a mode from the menu, Backspace/Delete return to the menu.
    Cube: +/- zoom, 0 reset zoom. G-force: r resets the record.
        """
    )
    parser.add_argument('--imu', choices=['serial', 'simulated'], default='simulated',
                        help='Sensor source (default: simulated)')
    parser.add_argument('--port', '-p', default=None,
                        help='Serial port for --imu serial (e.g. /dev/ttyUSB0)')
    parser.add_argument('--baudrate', '-b', type=int, default=115200,
                        help='Baudrate (default: 115200)')
    parser.add_argument('--line-ending', choices=sorted(LINE_ENDINGS), default='lf',
                        help='Serial line ending (default: lf)')
    parser.add_argument('--tick-ms', type=int, default=14,
                        help='Tick interval in milliseconds (default: 14)')
    parser.add_argument('--scale', type=int, default=3,
                        help='Window scale factor (default: 3)')
    parser.add_argument('--prefs-dir', type=Path, default=None,
                        help='Directory for saved records (default: ~/.config/motionlab)')
    parser.add_argument('--game-speed', type=float, default=None,
                        help='Tilt game speed in pixels per G per tick (default: 4.0)')
    parser.add_argument('--game-radius', type=float, default=None,
                        help='Tilt game goal radius in pixels (default: 12)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for goal placement')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Logging level (default: INFO)')
    parser.add_argument('--list-ports', action='store_true',
                        help='List serial ports and exit')
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> AppConfig:
    config = AppConfig(
        imu=args.imu,
        serial_port=args.port,
        baud_rate=args.baudrate,
        line_ending=LINE_ENDINGS[args.line_ending],
        tick_ms=args.tick_ms,
        window_scale=args.scale,
        prefs_dir=args.prefs_dir,
        seed=args.seed,
    )
    if args.game_speed is not None:
        config.game_speed = args.game_speed
    if args.game_radius is not None:
        config.game_goal_radius = args.game_radius
    return config


def build_imu(config: AppConfig):
    from .imu import SerialIMU, SimulatedIMU

    if config.imu == 'serial':
        return SerialIMU(config.serial_port, config.baud_rate, config.line_ending)
    return SimulatedIMU()


def build_machine(config: AppConfig):
    from .modes.game import GameTuning
    from .state_machine import AppState, ModeStateMachine
    from .storage.preferences import Preferences
    from .utils.constants import PREFS_NAMESPACE

    prefs = Preferences(PREFS_NAMESPACE, config.prefs_dir)
    tuning = GameTuning(speed=config.game_speed, goal_radius=config.game_goal_radius)
    state = AppState.create(prefs, seed=config.seed, game_tuning=tuning)
    return ModeStateMachine(state)


def main(argv=None):
    """Main entry point for Motion Lab application"""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_ports:
        from .serial.link import enumerate_ports
        for port_name, port_desc in enumerate_ports():
            print(f"{port_name} - {port_desc}")
        return 0

    config = config_from_args(args)
    if config.imu == 'serial' and not config.serial_port:
        logger.error("--imu serial requires --port")
        return 2

    from PyQt6.QtWidgets import QApplication
    from .gui.main_window import MainWindow

    logger.info("Motion Lab v0.5")

    app = QApplication(sys.argv[:1])
    window = MainWindow(
        imu=build_imu(config),
        machine=build_machine(config),
        tick_ms=config.tick_ms,
        scale=config.window_scale,
    )
    window.show()
    window.start()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
