import pytest

from boardkit.board import (
    Board,
    BoardElement,
    BoardSide,
    BoardType,
    Component,
    ComponentType,
    MountType,
    Net,
    Pin,
    Point,
    is_prefix,
    remove_element,
)


class _SimpleBoard(Board):
    def __init__(self, nets, components, pins, outline):
        self._nets = nets
        self._components = components
        self._pins = pins
        self._outline = outline

    def nets(self):
        return self._nets

    def components(self):
        return self._components

    def pins(self):
        return self._pins

    def outline_points(self):
        return self._outline


def test_is_prefix():
    assert is_prefix("c_", "c_R1")
    assert is_prefix("", "anything")
    assert not is_prefix("c_R1", "c_")
    assert not is_prefix("n_", "c_R1")


def test_remove_element_swaps_with_last():
    items = ["a", "b", "c", "d"]
    assert remove_element("b", items) is True
    assert items == ["a", "d", "c"]


def test_remove_element_missing():
    items = ["a", "b"]
    assert remove_element("z", items) is False
    assert items == ["a", "b"]


def test_remove_element_uses_identity_for_elements():
    first = Net(name="X")
    second = Net(name="X")
    items = [first, second]
    assert remove_element(second, items)
    assert items == [first]
    assert items[0] is first


def test_unique_ids():
    assert Net(name="GND").unique_id() == "n_GND"
    assert Pin(number="12").unique_id() == "p_12"
    assert Component(name="U1").unique_id() == "c_U1"


def test_default_board_side():
    assert Net().board_side is BoardSide.BOTH
    assert Pin(board_side=BoardSide.TOP).board_side is BoardSide.TOP


def test_mount_type_label():
    assert Component(mount_type=MountType.SMD).mount_type_label() == "SMD"
    assert Component(mount_type=MountType.DIP).mount_type_label() == "DIP"
    assert Component().mount_type_label() == "UNKNOWN"


def test_is_dummy():
    assert Component(component_type=ComponentType.DUMMY).is_dummy()
    assert not Component(component_type=ComponentType.RESISTOR).is_dummy()


def test_point_converts_to_float():
    p = Point(3, 4)
    assert isinstance(p.x, float) and p.x == 3.0
    assert Point() == Point(0.0, 0.0)


def test_component_outline_defaults():
    c = Component()
    assert len(c.outline) == 4
    assert c.hull == []
    assert c.outline_done is False


def test_pin_links():
    comp = Component(name="U2")
    net = Net(name="VCC")
    pin = Pin(number="3", component=comp, net=net)
    comp.pins.append(pin)
    net.pins.append(pin)
    assert pin.component is comp
    assert net.pins[0].unique_id() == "p_3"


def test_board_abstract_cannot_instantiate():
    with pytest.raises(TypeError):
        Board()
    with pytest.raises(TypeError):
        BoardElement()


def test_concrete_board():
    net = Net(name="GND", is_ground=True)
    component = Component(name="R1")
    pin = Pin(number="1")
    outline = [Point(0, 0), Point(10, 0)]
    board = _SimpleBoard([net], [component], [pin], outline)

    assert Board.board_type(board) is BoardType.UNKNOWN
    assert board.board_type() is BoardType.UNKNOWN
    assert board.nets()[0].unique_id() == "n_GND"
    assert board.components()[0].unique_id() == "c_R1"
    assert board.outline_points()[1] == Point(10.0, 0.0)
    assert board.pins()[0].unique_id() == "p_1"