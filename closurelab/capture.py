"""Capture Sandbox.

The sandbox makes the two ways a closure can see its surroundings explicit.

1. Bindings and Cells
Each binding the sandbox holds lives in a `Cell`. A binding is created with a
capture mode that decides what a closure receives when it captures it:
- `BY_REFERENCE_MUTABLE`: the closure holds the live cell, so a later
  `set()` on the sandbox is visible when the closure runs, and a write made
  by the closure is visible to the sandbox.
- `BY_VALUE_SNAPSHOT`: the value is copied into a `FrozenCell` when the
  closure is created, so later mutation is not visible.

2. Closures
`capture()` wraps a function that receives a `CapturedNamespace` over the
cells the closure was created with. Reference names can be reassigned through
it; snapshot names cannot.

3. Counters
`make_counter()` returns a function that owns its running total. Every call
advances the total; separate counters never share it.

4. Owners and Guards
An `Owner` has an explicit `release()` hook instead of relying on the garbage
collector. Notifiers built with `make_weak_notifier()` quietly do nothing once
their owner is gone. Notifiers built with `make_unowned_notifier()` trust the
owner to be alive and raise `UseAfterReleaseError` when it is not.


File: capture.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from closurelab.exceptions import (
    DuplicateNameError,
    UndefinedBindingError,
    UseAfterReleaseError,
)

logger = logging.getLogger(__name__)


class CaptureMode(Enum):
    """How a closure sees a captured binding."""

    BY_REFERENCE_MUTABLE = "by_reference_mutable"
    BY_VALUE_SNAPSHOT = "by_value_snapshot"


class Cell:
    """Mutable box shared between the sandbox and reference captures."""

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"


class FrozenCell:
    """Immutable copy of a value taken when a closure is created."""

    __slots__ = ("_value",)

    def __init__(self, value):
        object.__setattr__(self, "_value", copy.deepcopy(value))

    @property
    def value(self):
        return self._value

    def __setattr__(self, name, value):
        raise TypeError("Snapshot cells cannot be modified")

    def __repr__(self) -> str:
        return f"FrozenCell({self._value!r})"


class CapturedNamespace:
    """
    View of the cells a closure captured.

    Names read as items or attributes. Writing a name captured by reference
    updates the shared cell; writing a snapshot name raises TypeError.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells):
        object.__setattr__(self, "_cells", dict(cells))

    def __getitem__(self, name):
        return self._cells[name].value

    def __setitem__(self, name, value):
        cell = self._cells[name]
        if isinstance(cell, FrozenCell):
            raise TypeError(
                f"Binding '{name}' was captured by value and is read-only"
            )
        cell.value = value

    def __delitem__(self, name):
        raise TypeError("Captured bindings cannot be removed inside a closure")

    def __getattr__(self, name):
        if name == "_cells":
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name, value):
        if name not in self._cells:
            raise AttributeError(name)
        self[name] = value

    def __contains__(self, name) -> bool:
        return name in self._cells

    def __iter__(self):
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        body = ", ".join(f"{n}={c.value!r}" for n, c in self._cells.items())
        return f"CapturedNamespace({body})"


@dataclass
class Binding:
    """A named value held by a sandbox."""

    name: str
    value: Any
    capture_mode: CaptureMode


class CaptureSandbox:
    """Holds bindings and creates closures over them."""

    def __init__(self, name: str = "<sandbox>"):
        self.name = name
        self._bindings: dict[str, Binding] = {}
        self._cells: dict[str, Cell] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def bind(self, name: str, value, mode: CaptureMode = CaptureMode.BY_REFERENCE_MUTABLE) -> Binding:
        """
        Create a binding and the cell backing it.

        Raises:
            DuplicateNameError: If the name is already bound in this sandbox.
        """
        if name in self._bindings:
            raise DuplicateNameError(name, "binding", self.name)
        binding = Binding(name, value, CaptureMode(mode))
        self._bindings[name] = binding
        self._cells[name] = Cell(value)
        return binding

    def binding(self, name: str) -> Binding:
        """
        Return the binding for a name, reflecting its live value.
        """
        self._check_bound(name)
        binding = self._bindings[name]
        binding.value = self._cells[name].value
        return binding

    def get(self, name: str):
        self._check_bound(name)
        return self._cells[name].value

    def set(self, name: str, value) -> None:
        """
        Mutate a binding from outside any closure.
        """
        self._check_bound(name)
        self._cells[name].value = value
        self._bindings[name].value = value

    def capture(self, fn: Callable[[CapturedNamespace], Any], *names: str) -> Callable[[], Any]:
        """
        Create a closure over the named bindings.

        Args:
            fn (callable): Receives a namespace of the captured names.
                Reference names read and write the shared cell; snapshot
                names are read-only.
            *names (str): Bindings to capture.

        Returns:
            callable: A zero-argument closure.

        Raises:
            UndefinedBindingError: If a name is not bound in this sandbox.
        """
        cells: dict[str, Cell | FrozenCell] = {}
        for name in names:
            self._check_bound(name)
            if self._bindings[name].capture_mode is CaptureMode.BY_VALUE_SNAPSHOT:
                cells[name] = FrozenCell(self._cells[name].value)
            else:
                cells[name] = self._cells[name]
            logger.debug(
                "Captured '%s' %s in %s",
                name, self._bindings[name].capture_mode.value, self.name,
            )

        def closure():
            return fn(CapturedNamespace(cells))

        return closure

    def _check_bound(self, name: str) -> None:
        if name not in self._bindings:
            raise UndefinedBindingError(name, self.name)


def make_counter(initial: int = 0, step: int = 1) -> Callable[[], int]:
    """
    Return a counter that advances by `step` on every call.

    make_counter(0, 5) yields 5, 10, 15 on successive calls.
    """
    total = initial

    def counter() -> int:
        nonlocal total
        total += step
        return total

    return counter


class Owner:
    """Object with an explicit release lifecycle."""

    def __init__(self, name: str = "owner"):
        self.name = name
        self.alive = True

    def release(self) -> None:
        """
        Drop the owner. Guards created for it observe the release.
        """
        if self.alive:
            logger.debug("Releasing owner '%s'", self.name)
        self.alive = False


class WeakHandle:
    """Non-owning handle that resolves to None after release."""

    def __init__(self, owner: Owner):
        self._owner = owner

    def resolve(self) -> Owner | None:
        if not self._owner.alive:
            return None
        return self._owner


class UnownedHandle:
    """Non-owning handle that assumes the owner outlives it."""

    def __init__(self, owner: Owner):
        self._owner = owner

    def resolve(self, action: str | None = None) -> Owner:
        if not self._owner.alive:
            raise UseAfterReleaseError(self._owner.name, action)
        return self._owner


def _default_action(owner, *_args):
    return owner


def make_weak_notifier(owner: Owner, action: Callable | None = None) -> Callable:
    """
    Return a notifier that calls `action(owner, *args)` while the owner is
    alive and is a no-op returning None once it has been released.
    """
    handle = WeakHandle(owner)
    action = action or _default_action

    def notify(*args):
        target = handle.resolve()
        if target is None:
            return None
        return action(target, *args)

    return notify


def make_unowned_notifier(owner: Owner, action: Callable | None = None) -> Callable:
    """
    Return a notifier that calls `action(owner, *args)`.

    Raises:
        UseAfterReleaseError: When invoked after the owner was released.
    """
    handle = UnownedHandle(owner)
    action = action or _default_action

    def notify(*args):
        target = handle.resolve(getattr(action, "__name__", None))
        return action(target, *args)

    return notify


class TemperatureNotifier(Owner):
    """Owner that keeps a weak notifier to itself."""

    def __init__(self, current_temp: int = 72):
        super().__init__("TemperatureNotifier")
        self.current_temp = current_temp
        self.change_notifier = make_weak_notifier(self, TemperatureNotifier._update)

    def _update(self, temp: int) -> None:
        self.current_temp = temp

    def some_event(self, temp: int = 59) -> int:
        self.change_notifier(temp)
        return self.current_temp
