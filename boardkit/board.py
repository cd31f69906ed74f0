"""Board data model: nets, pins, components and the abstract board."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

from boardkit.geometry import Vec2

COMPONENT_PREFIX = "c_"
PIN_PREFIX = "p_"
NET_PREFIX = "n_"
ELEMENT_NAME_LENGTH = 127


def is_prefix(prefix: str, base: str) -> bool:
    """Return True if ``prefix`` starts ``base``."""
    return base.startswith(prefix)


def remove_element(element: Any, items: list) -> bool:
    """Remove ``element`` by swapping it with the last item and popping.

    The order of ``items`` is not preserved. Returns True if an item was removed.
    """
    try:
        index = items.index(element)
    except ValueError:
        return False
    items[index], items[-1] = items[-1], items[index]
    items.pop()
    return True


class BoardSide(IntEnum):
    TOP = 0
    BOTTOM = 1
    BOTH = 2


@dataclass(kw_only=True, eq=False)
class BoardElement(ABC):
    """Anything placed on the board."""

    board_side: BoardSide = BoardSide.BOTH

    @abstractmethod
    def unique_id(self) -> str:
        """String uniquely identifying the element on the board."""


@dataclass
class Point:
    """A position on the board relative to its top left corner."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)


@dataclass(kw_only=True, eq=False)
class Net(BoardElement):
    """Shared potential between several pins."""

    number: int = 0
    name: str = ""
    is_ground: bool = False
    pins: list[Pin] = field(default_factory=list)

    def unique_id(self) -> str:
        return NET_PREFIX + self.name


class PinType(IntEnum):
    UNKNOWN = 0
    NOT_CONNECTED = 1
    COMPONENT = 2
    VIA = 3
    TEST_PAD = 4


@dataclass(kw_only=True, eq=False)
class Pin(BoardElement):
    """An observable contact: component pin, via or test pad."""

    pin_type: PinType = PinType.UNKNOWN
    number: str = ""
    position: Point = field(default_factory=Point)
    diameter: float = 0.0
    net: Optional[Net] = None
    component: Optional[Component] = None

    def unique_id(self) -> str:
        return PIN_PREFIX + self.number


class MountType(IntEnum):
    UNKNOWN = 0
    SMD = 1
    DIP = 2


class ComponentType(IntEnum):
    UNKNOWN = 0
    DUMMY = 1
    CONNECTOR = 2
    IC = 3
    RESISTOR = 4
    CAPACITOR = 5
    DIODE = 6
    TRANSISTOR = 7
    CRYSTAL = 8
    JELLY_BEAN = 9


@dataclass(kw_only=True, eq=False)
class Component(BoardElement):
    """A component with several pins and derived outline data."""

    mount_type: MountType = MountType.UNKNOWN
    component_type: ComponentType = ComponentType.UNKNOWN
    name: str = ""
    mfgcode: str = ""
    pins: list[Pin] = field(default_factory=list)

    outline: list[Vec2] = field(default_factory=lambda: [Vec2() for _ in range(4)])
    p1: Point = field(default_factory=Point)
    p2: Point = field(default_factory=Point)
    outline_done: bool = False
    hull: list[Vec2] = field(default_factory=list)
    omin: Vec2 = field(default_factory=Vec2)
    omax: Vec2 = field(default_factory=Vec2)
    centerpoint: Vec2 = field(default_factory=Vec2)
    expanse: float = 0.0
    # 0 = normal, 1 = selected
    visual_mode: int = 0

    def mount_type_label(self) -> str:
        """Mount type as a readable string."""
        if self.mount_type is MountType.SMD:
            return "SMD"
        if self.mount_type is MountType.DIP:
            return "DIP"
        return "UNKNOWN"

    def is_dummy(self) -> bool:
        """True if the component does not represent a physical part."""
        return self.component_type is ComponentType.DUMMY

    def unique_id(self) -> str:
        return COMPONENT_PREFIX + self.name


class BoardType(IntEnum):
    UNKNOWN = 0
    BRD = 0x01
    BDV = 0x02


class Board(ABC):
    """A loaded board exposing its nets, components, pins and outline."""

    @abstractmethod
    def nets(self) -> list[Net]:
        """All nets on the board."""

    @abstractmethod
    def components(self) -> list[Component]:
        """All components on the board."""

    @abstractmethod
    def pins(self) -> list[Pin]:
        """All pins on the board."""

    @abstractmethod
    def outline_points(self) -> list[Point]:
        """Points of the board outline."""

    def board_type(self) -> BoardType:
        return BoardType.UNKNOWN