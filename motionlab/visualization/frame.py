"""
Frame description

A Frame is the list of drawing primitives a mode produces for one tick.
Modes never touch the display directly; the GUI canvas replays the
primitives in order and presents the result.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class FillScreen:
    color: Color


@dataclass(frozen=True)
class Line:
    x0: int
    y0: int
    x1: int
    y1: int
    color: Color


@dataclass(frozen=True)
class HLine:
    """Horizontal line of width w starting at (x, y)"""
    x: int
    y: int
    w: int
    color: Color


@dataclass(frozen=True)
class Circle:
    x: int
    y: int
    r: int
    color: Color


@dataclass(frozen=True)
class FillCircle:
    x: int
    y: int
    r: int
    color: Color


@dataclass(frozen=True)
class FillRect:
    x: int
    y: int
    w: int
    h: int
    color: Color


@dataclass(frozen=True)
class Text:
    """
    Text anchored at (x, y)

    align is "left" (x is the left edge), "center" or "right".
    size is the device font multiplier (1 = 6x8 pixel cells).
    """
    x: int
    y: int
    text: str
    color: Color
    size: int = 1
    align: str = "left"


@dataclass
class Frame:
    """Ordered drawing commands for one presented image"""
    commands: List[object] = field(default_factory=list)

    def fill_screen(self, color: Color) -> 'Frame':
        self.commands.append(FillScreen(color))
        return self

    def line(self, x0, y0, x1, y1, color: Color) -> 'Frame':
        self.commands.append(Line(int(x0), int(y0), int(x1), int(y1), color))
        return self

    def hline(self, x, y, w, color: Color) -> 'Frame':
        self.commands.append(HLine(int(x), int(y), int(w), color))
        return self

    def circle(self, x, y, r, color: Color) -> 'Frame':
        self.commands.append(Circle(int(x), int(y), int(r), color))
        return self

    def fill_circle(self, x, y, r, color: Color) -> 'Frame':
        self.commands.append(FillCircle(int(x), int(y), int(r), color))
        return self

    def fill_rect(self, x, y, w, h, color: Color) -> 'Frame':
        self.commands.append(FillRect(int(x), int(y), int(w), int(h), color))
        return self

    def text(self, x, y, text: str, color: Color, size: int = 1,
             align: str = "left") -> 'Frame':
        self.commands.append(Text(int(x), int(y), text, color, size, align))
        return self

    def texts(self) -> List[str]:
        """All text strings in draw order (handy for inspection)"""
        return [c.text for c in self.commands if isinstance(c, Text)]

    def __iter__(self):
        return iter(self.commands)

    def __len__(self):
        return len(self.commands)
