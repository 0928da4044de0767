"""
Tests for the capture sandbox, counters and owner guards.
"""
import pytest

from closurelab.capture import (
    CaptureMode,
    FrozenCell,
    Owner,
    TemperatureNotifier,
    make_counter,
    make_unowned_notifier,
    make_weak_notifier,
)
from closurelab.exceptions import (
    DuplicateNameError,
    UndefinedBindingError,
    UseAfterReleaseError,
)


def test_counter_accumulates():
    """
    Each call of the same counter advances its captured total.
    """
    counter = make_counter(0, 5)
    assert [counter(), counter(), counter()] == [5, 10, 15]


def test_counters_are_independent():
    low = make_counter(0, 1)
    high = make_counter(100, 1)
    assert low() == 1
    assert low() == 2
    assert high() == 101
    assert low() == 3


def test_reference_capture_sees_mutation(sandbox):
    """
    A reference capture observes changes made after the closure was created.
    """
    sandbox.bind("x", 10, CaptureMode.BY_REFERENCE_MUTABLE)
    closure = sandbox.capture(lambda ns: ns["x"], "x")
    sandbox.set("x", 30)
    assert closure() == 30


def test_snapshot_capture_ignores_mutation(sandbox):
    """
    A snapshot capture keeps the value from when the closure was created.
    """
    sandbox.bind("x", 10, CaptureMode.BY_VALUE_SNAPSHOT)
    closure = sandbox.capture(lambda ns: ns.x, "x")
    sandbox.set("x", 30)
    assert closure() == 10
    assert sandbox.get("x") == 30


def test_snapshot_copies_mutable_values(sandbox):
    sandbox.bind("items", [1, 2], CaptureMode.BY_VALUE_SNAPSHOT)
    closure = sandbox.capture(lambda ns: list(ns.items), "items")
    sandbox.get("items").append(3)
    assert closure() == [1, 2]


def test_mixed_captures(sandbox):
    sandbox.bind("live", 1)
    sandbox.bind("frozen", 1, CaptureMode.BY_VALUE_SNAPSHOT)
    closure = sandbox.capture(lambda ns: (ns.live, ns.frozen), "live", "frozen")
    sandbox.set("live", 2)
    sandbox.set("frozen", 2)
    assert closure() == (2, 1)
    assert sandbox.binding("frozen").value == 2
    assert sandbox.binding("frozen").capture_mode is CaptureMode.BY_VALUE_SNAPSHOT


def test_reference_capture_writes_through(sandbox):
    """
    A closure can reassign a reference binding and the sandbox sees the change.
    """
    sandbox.bind("num", 10, CaptureMode.BY_REFERENCE_MUTABLE)

    def add_twenty(ns):
        ns.num += 20
        return ns["num"]

    inner = sandbox.capture(add_twenty, "num")
    assert inner() == 30
    assert sandbox.get("num") == 30
    assert inner() == 50
    assert sandbox.binding("num").value == 50


def test_snapshot_capture_is_read_only(sandbox):
    sandbox.bind("x", 1, CaptureMode.BY_VALUE_SNAPSHOT)

    def write(ns):
        ns["x"] = 2

    def write_attr(ns):
        ns.x = 3

    with pytest.raises(TypeError):
        sandbox.capture(write, "x")()
    with pytest.raises(TypeError):
        sandbox.capture(write_attr, "x")()
    assert sandbox.get("x") == 1


def test_binding_names_shadowing_mapping_methods(sandbox):
    """
    Bindings named like mapping methods still read back their captured values.
    """
    names = ("items", "keys", "values", "get", "copy", "pop", "update")
    for name in names:
        sandbox.bind(name, 7, CaptureMode.BY_VALUE_SNAPSHOT)
    closure = sandbox.capture(lambda ns: [getattr(ns, name) for name in names], *names)
    assert closure() == [7] * len(names)


def test_namespace_lists_captured_names(sandbox):
    sandbox.bind("a", 1)
    sandbox.bind("b", 2, CaptureMode.BY_VALUE_SNAPSHOT)
    closure = sandbox.capture(lambda ns: (list(ns), len(ns), "a" in ns, "c" in ns), "a", "b")
    assert closure() == (["a", "b"], 2, True, False)


def test_unknown_attribute_on_namespace(sandbox):
    sandbox.bind("a", 1)

    def read_missing(ns):
        return ns.missing

    with pytest.raises(AttributeError):
        sandbox.capture(read_missing, "a")()


def test_unknown_binding(sandbox):
    with pytest.raises(UndefinedBindingError) as exc:
        sandbox.capture(lambda ns: None, "missing")
    assert "missing" in str(exc.value)
    with pytest.raises(UndefinedBindingError):
        sandbox.set("missing", 1)


def test_duplicate_binding(sandbox):
    sandbox.bind("x", 1)
    with pytest.raises(DuplicateNameError):
        sandbox.bind("x", 2)


def test_weak_notifier_is_noop_after_release():
    owner = Owner("controller")
    calls = []
    notify = make_weak_notifier(owner, lambda target, value: calls.append(value))
    notify(1)
    owner.release()
    assert notify(2) is None
    assert calls == [1]


def test_weak_notifier_default_action_returns_owner():
    owner = Owner()
    notify = make_weak_notifier(owner)
    assert notify() is owner
    owner.release()
    assert notify() is None


def test_unowned_notifier_raises_after_release():
    owner = Owner("controller")

    def refresh(target):
        return target.name

    notify = make_unowned_notifier(owner, refresh)
    assert notify() == "controller"
    owner.release()
    with pytest.raises(UseAfterReleaseError) as exc:
        notify()
    assert "controller" in str(exc.value)
    assert "refresh" in str(exc.value)


def test_temperature_notifier():
    notifier = TemperatureNotifier()
    assert notifier.current_temp == 72
    assert notifier.some_event() == 59
    notifier.release()
    assert notifier.some_event(40) == 59


def test_frozen_cell_rejects_assignment():
    cell = FrozenCell({"a": 1})
    with pytest.raises(TypeError):
        cell.value = 2
    assert cell.value == {"a": 1}
