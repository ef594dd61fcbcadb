"""
Main window for Motion Lab

Hosts the frame canvas and runs the tick loop from a QTimer
"""

import logging
import time

from PyQt6.QtWidgets import QMainWindow
from PyQt6.QtCore import QTimer

from ..imu.base import IMUSource
from ..modes.base import TickInput
from ..state_machine import ModeStateMachine
from ..utils.utilities import log_exceptions
from .canvas import FrameCanvas
from .keyboard import KeyboardState, key_code_for, key_id_for

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Application window

    Each timer tick: sample the IMU, poll the keyboard, update the active
    mode and present its frame.
    """

    def __init__(self, imu: IMUSource, machine: ModeStateMachine,
                 tick_ms: int = 14, scale: int = 3):
        super().__init__()

        self.setWindowTitle("Motion Lab")

        self.imu = imu
        self.machine = machine
        self.tick_ms = tick_ms
        self.keyboard = KeyboardState()
        self.halted = False
        self._t0 = time.monotonic()

        self.canvas = FrameCanvas(scale=scale)
        self.setCentralWidget(self.canvas)

        self.timer = QTimer(self)
        self.timer.timeout.connect(self._on_timer)

    def now_ms(self) -> int:
        return int((time.monotonic() - self._t0) * 1000)

    def start(self) -> bool:
        """
        Start the sensor and the tick loop

        Returns:
            False if the IMU is unavailable (the window is then halted)
        """
        if not self.imu.begin():
            self.halt("IMU unavailable")
            return False
        self._t0 = time.monotonic()
        self.timer.start(self.tick_ms)
        logger.info(f"Tick loop started ({self.tick_ms} ms)")
        return True

    def halt(self, reason: str):
        """Stop ticking for good; the window stays idle until closed"""
        self.timer.stop()
        self.halted = True
        self.setWindowTitle(f"Motion Lab - {reason}")
        logger.critical(f"Halted: {reason}")

    @log_exceptions
    def _on_timer(self):
        """One tick: sensor read, mode update, frame submit"""
        tick = TickInput(
            sample=self.imu.read_sample(),
            keys=self.keyboard.snapshot(),
            now_ms=self.now_ms(),
        )
        frame = self.machine.tick(tick)
        if frame is not None:
            self.canvas.present(frame)

    def keyPressEvent(self, event):
        if not event.isAutoRepeat():
            self.keyboard.press(key_code_for(event), key_id_for(event.key(), event.text()))
        event.accept()

    def keyReleaseEvent(self, event):
        if not event.isAutoRepeat():
            self.keyboard.release(key_code_for(event))
        event.accept()

    def focusOutEvent(self, event):
        # Releases are not delivered while unfocused
        self.keyboard.clear()
        super().focusOutEvent(event)

    def closeEvent(self, event):
        """Handle window close event"""
        self.timer.stop()
        self.imu.close()
        super().closeEvent(event)
