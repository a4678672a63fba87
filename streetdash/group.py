"""A container that forwards updates, drawing and input to the objects and controls it holds."""

from __future__ import annotations

from typing import Any, List, Optional

from .objects import Control, GameObject


def _index_of(items: List[Any], item: Any) -> int:
    for index, candidate in enumerate(items):
        if candidate is item:
            return index
    raise ValueError(f"{item!r} is not in the group")


class Group(GameObject, Control):
    """Holds objects and controls in insertion order and delegates events to them."""

    def __init__(self) -> None:
        super().__init__()
        self._objects: List[GameObject] = []
        self._controls: List[Control] = []

    @property
    def objects(self) -> List[GameObject]:
        """A copy of the contained objects, in order."""
        return list(self._objects)

    @property
    def controls(self) -> List[Control]:
        """A copy of the contained controls, in order."""
        return list(self._controls)

    def _holds(self, obj: GameObject) -> bool:
        return any(candidate is obj for candidate in self._objects)

    def clear(self) -> None:
        """Remove every object and control."""
        self._objects.clear()
        self._controls.clear()

    def update(self, delta_time: float) -> None:
        """Update every visible object; objects may add or remove members while this runs."""
        for obj in list(self._objects):
            if obj.visible and self._holds(obj):
                obj.update(delta_time)

    def draw(self, surface: Any) -> None:
        """Draw every visible object onto ``surface`` in order."""
        for obj in self._objects:
            if obj.visible:
                obj.draw(surface)

    def on_key_down(self, key_code: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_key_down(key_code)

    def on_key_up(self, key_code: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_key_up(key_code)

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_down(button, mx, my)

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_up(button, mx, my)

    def on_mouse_move(self, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_move(mx, my)

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_scroll(mx, my, delta)

    def add_object(self, obj: GameObject) -> None:
        """Append an object."""
        self._objects.append(obj)

    def insert_object(self, obj: GameObject, before: Optional[GameObject]) -> None:
        """Insert an object before ``before``, or at the end when ``before`` is None."""
        if before is None:
            self._objects.append(obj)
        else:
            self._objects.insert(_index_of(self._objects, before), obj)

    def add_control(self, ctrl: Control) -> None:
        """Append a control."""
        self._controls.append(ctrl)

    def add_control_object(self, ctrl: Control) -> None:
        """Add something that is both an object and a control to both lists."""
        if not isinstance(ctrl, GameObject):
            raise ValueError("The control must be both a GameObject and a Control.")
        self._objects.append(ctrl)
        self._controls.append(ctrl)

    def remove_object(self, obj: GameObject) -> None:
        """Remove an object; raise ValueError if it is not held."""
        del self._objects[_index_of(self._objects, obj)]

    def remove_control(self, ctrl: Control) -> None:
        """Remove a control; raise ValueError if it is not held."""
        del self._controls[_index_of(self._controls, ctrl)]

    def remove_control_object(self, ctrl: Control, obj: GameObject) -> None:
        """Remove a control and an object."""
        self.remove_control(ctrl)
        self.remove_object(obj)

    def pop_objects(self, num: int) -> None:
        """Remove the last ``num`` objects; raise IndexError if there are fewer."""
        if num > len(self._objects):
            raise IndexError("pop from a group with too few objects")
        for _ in range(num):
            self._objects.pop()

    def pop_controls(self, num: int) -> None:
        """Remove the last ``num`` controls; raise IndexError if there are fewer."""
        if num > len(self._controls):
            raise IndexError("pop from a group with too few controls")
        for _ in range(num):
            self._controls.pop()