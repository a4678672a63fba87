import pytest

from streetdash.group import Group
from streetdash.objects import Control, GameObject


class Recorder(GameObject):
    def __init__(self, log, name):
        super().__init__()
        self.log = log
        self.name = name

    def update(self, delta_time):
        self.log.append(("update", self.name, delta_time))

    def draw(self, surface):
        self.log.append(("draw", self.name, surface))


class Button(GameObject, Control):
    def __init__(self, log):
        super().__init__()
        self.log = log

    def on_key_down(self, key_code):
        self.log.append(("key_down", key_code))

    def on_key_up(self, key_code):
        self.log.append(("key_up", key_code))

    def on_mouse_down(self, button, mx, my):
        self.log.append(("mouse_down", button, mx, my))

    def on_mouse_up(self, button, mx, my):
        self.log.append(("mouse_up", button, mx, my))

    def on_mouse_move(self, mx, my):
        self.log.append(("mouse_move", mx, my))

    def on_mouse_scroll(self, mx, my, delta):
        self.log.append(("mouse_scroll", mx, my, delta))


def test_update_only_visible_in_order():
    log = []
    group = Group()
    a, b, c = Recorder(log, "a"), Recorder(log, "b"), Recorder(log, "c")
    for obj in (a, b, c):
        group.add_object(obj)
    b.visible = False
    group.update(0.25)
    assert group.objects == [a, b, c]
    assert log == [("update", "a", 0.25), ("update", "c", 0.25)]


def test_draw_only_visible():
    log = []
    group = Group()
    a, b = Recorder(log, "a"), Recorder(log, "b")
    group.add_object(a)
    group.add_object(b)
    a.visible = False
    group.draw("screen")
    assert group.objects == [a, b]
    assert log == [("draw", "b", "screen")]


def test_object_can_remove_itself_during_update():
    group = Group()
    log = []

    class SelfRemover(GameObject):
        def update(self, delta_time):
            log.append("removed")
            group.remove_object(self)

    remover = SelfRemover()
    after = Recorder(log, "after")
    group.add_object(remover)
    group.add_object(after)
    group.update(1.0)
    assert group.objects == [after]
    assert log == ["removed", ("update", "after", 1.0)]


def test_removed_object_is_not_updated():
    group = Group()
    log = []
    victim = Recorder(log, "victim")

    class Killer(GameObject):
        def update(self, delta_time):
            group.remove_object(victim)

    killer = Killer()
    group.add_object(killer)
    group.add_object(victim)
    group.update(1.0)
    assert group.objects == [killer]
    assert log == []


def test_insert_object_before_and_at_end():
    group = Group()
    a, b, c = GameObject(), GameObject(), GameObject()
    group.add_object(a)
    group.insert_object(b, a)
    group.insert_object(c, None)
    assert group.objects == [b, a, c]


def test_insert_before_missing_raises():
    group = Group()
    with pytest.raises(ValueError):
        group.insert_object(GameObject(), GameObject())


def test_events_reach_controls():
    log = []
    group = Group()
    group.add_control(Button(log))
    group.on_key_down(5)
    group.on_key_up(5)
    group.on_mouse_down(1, 10, 20)
    group.on_mouse_up(1, 10, 20)
    group.on_mouse_move(10, 20)
    group.on_mouse_scroll(10, 20, -1)
    assert log == [
        ("key_down", 5),
        ("key_up", 5),
        ("mouse_down", 1, 10, 20),
        ("mouse_up", 1, 10, 20),
        ("mouse_move", 10, 20),
        ("mouse_scroll", 10, 20, -1),
    ]


def test_add_control_object_goes_to_both_lists():
    group = Group()
    button = Button([])
    group.add_control_object(button)
    assert group.objects == [button]
    assert group.controls == [button]


def test_add_control_object_rejects_plain_control():
    group = Group()
    with pytest.raises(ValueError):
        group.add_control_object(Control())


def test_remove_control_object():
    group = Group()
    button = Button([])
    group.add_control_object(button)
    group.remove_control_object(button, button)
    assert group.objects == []
    assert group.controls == []


def test_remove_missing_raises():
    group = Group()
    with pytest.raises(ValueError):
        group.remove_object(GameObject())
    with pytest.raises(ValueError):
        group.remove_control(Control())


def test_remove_uses_identity():
    group = Group()
    a, b = GameObject(), GameObject()
    group.add_object(a)
    group.add_object(b)
    group.remove_object(b)
    assert group.objects[0] is a
    assert len(group.objects) == 1


def test_pop_objects_and_controls():
    group = Group()
    objs = [GameObject() for _ in range(3)]
    for obj in objs:
        group.add_object(obj)
    ctrls = [Control() for _ in range(2)]
    for ctrl in ctrls:
        group.add_control(ctrl)
    group.pop_objects(2)
    group.pop_controls(1)
    assert group.objects == objs[:1]
    assert group.controls == ctrls[:1]


def test_pop_too_many_raises():
    group = Group()
    group.add_object(GameObject())
    with pytest.raises(IndexError):
        group.pop_objects(2)
    with pytest.raises(IndexError):
        group.pop_controls(1)


def test_clear_empties_group():
    group = Group()
    group.add_control_object(Button([]))
    group.add_object(GameObject())
    group.clear()
    assert group.objects == []
    assert group.controls == []


def test_nested_groups_delegate():
    log = []
    inner = Group()
    inner.add_object(Recorder(log, "x"))
    inner.add_control(Button(log))
    outer = Group()
    outer.add_control_object(inner)
    outer.update(0.5)
    outer.on_key_down(3)
    assert log == [("update", "x", 0.5), ("key_down", 3)]


def test_objects_property_is_a_copy():
    group = Group()
    group.add_object(GameObject())
    snapshot = group.objects
    snapshot.clear()
    assert len(group.objects) == 1