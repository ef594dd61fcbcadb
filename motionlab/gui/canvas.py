"""
Frame canvas widget for Motion Lab

Replays a Frame's drawing commands onto a scaled 240x135 logical surface
"""

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import QPointF, QRectF, QSize, Qt
from PyQt6.QtGui import QColor, QFont, QFontMetrics, QPainter, QPen

from ..utils.constants import SCREEN_WIDTH, SCREEN_HEIGHT, BLACK
from ..visualization.frame import (
    Circle, FillCircle, FillRect, FillScreen, Frame, HLine, Line, Text,
)

# Device font cell height in pixels at size 1
FONT_CELL_HEIGHT = 8


class FrameCanvas(QWidget):
    """
    Display surface for mode frames

    The last presented frame stays on screen until the next one arrives.
    """

    def __init__(self, scale: int = 3, parent=None):
        super().__init__(parent)
        self.scale = max(1, int(scale))
        self.frame = Frame().fill_screen(BLACK)
        self.setFixedSize(self.sizeHint())

    def present(self, frame: Frame):
        """Show frame on the next paint"""
        self.frame = frame
        self.update()

    def sizeHint(self) -> QSize:
        return QSize(SCREEN_WIDTH * self.scale, SCREEN_HEIGHT * self.scale)

    def minimumSizeHint(self) -> QSize:
        return self.sizeHint()

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            painter.scale(self.scale, self.scale)
            painter.setClipRect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
            for command in self.frame:
                self._draw(painter, command)
        finally:
            painter.end()

    def _draw(self, painter: QPainter, cmd):
        if isinstance(cmd, FillScreen):
            painter.fillRect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT, QColor(*cmd.color))
        elif isinstance(cmd, Line):
            painter.setPen(QPen(QColor(*cmd.color), 1))
            painter.drawLine(cmd.x0, cmd.y0, cmd.x1, cmd.y1)
        elif isinstance(cmd, HLine):
            painter.fillRect(cmd.x, cmd.y, cmd.w, 1, QColor(*cmd.color))
        elif isinstance(cmd, Circle):
            painter.setPen(QPen(QColor(*cmd.color), 1))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawEllipse(QPointF(cmd.x, cmd.y), cmd.r, cmd.r)
        elif isinstance(cmd, FillCircle):
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QColor(*cmd.color))
            painter.drawEllipse(QPointF(cmd.x, cmd.y), cmd.r, cmd.r)
            painter.setBrush(Qt.BrushStyle.NoBrush)
        elif isinstance(cmd, FillRect):
            painter.fillRect(cmd.x, cmd.y, cmd.w, cmd.h, QColor(*cmd.color))
        elif isinstance(cmd, Text):
            self._draw_text(painter, cmd)

    def _draw_text(self, painter: QPainter, cmd: Text):
        font = QFont("Monospace")
        font.setStyleHint(QFont.StyleHint.TypeWriter)
        font.setPixelSize(FONT_CELL_HEIGHT * cmd.size)
        painter.setFont(font)
        painter.setPen(QColor(*cmd.color))

        metrics = QFontMetrics(font)
        width = metrics.horizontalAdvance(cmd.text)
        if cmd.align == "center":
            left = cmd.x - width / 2
        elif cmd.align == "right":
            left = cmd.x - width
        else:
            left = cmd.x
        painter.drawText(QRectF(left, cmd.y, width + 1, metrics.height()),
                         Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop,
                         cmd.text)
