"""Tutorial Snippets.

The lessons of the closures tutorial, one snippet each, in teaching order.
Every lesson is a generator function yielding the lines it wants to show.
`build_registry()` returns a fresh registry holding all of them, so state
created by one run never leaks into the next.

Lessons:
- Named functions as values, parameters, and simple closures.
- Closures as callbacks and in collections.
- Sorting with named functions, lambdas and operators.
- Capturing values, capture by reference vs snapshot.
- Weak and unowned owner guards.
- map, reduce, filter, flat_map and chaining.
- Making a custom class sortable.


File: snippets.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import operator
from typing import Callable

from closurelab.capture import (
    CaptureMode,
    CaptureSandbox,
    Owner,
    TemperatureNotifier,
    make_counter,
    make_unowned_notifier,
    make_weak_notifier,
)
from closurelab.exceptions import UseAfterReleaseError
from closurelab.pipeline import (
    Pipeline,
    compact,
    filter_seq,
    flat_map,
    flatten,
    map_seq,
    reduce_seq,
    sort_by,
)
from closurelab.registry import Registry


LESSONS: list[tuple[str, object]] = []

SimpleFunc = Callable[[], str]

FOODS = ["zuccini", "banana", "avacado", "lettuce", "walnut", "tahini", "bread"]


def lesson(name):
    """Add the decorated generator to the lesson list under `name`."""
    def decorator(body):
        LESSONS.append((name, body))
        return body
    return decorator


def build_registry() -> Registry:
    """
    Return a new registry with every lesson registered in teaching order.
    """
    registry = Registry("closures tutorial")
    for name, body in LESSONS:
        registry.register(name, body)
    return registry


# ----------------------------------------------------------------------
# Named closures (functions)
# ----------------------------------------------------------------------

@lesson("function_as_value")
def function_as_value():
    def inner_func():
        return "Function passed to another function was executed"

    def function1(f):
        return [f"{function1.__name__} is executing", f()]

    # Assigned, not called
    function = inner_func

    yield from function1(function)
    yield from function1(inner_func)

    def function2(f: SimpleFunc) -> list[str]:
        return [f"{function2.__name__} is executing", f()]

    yield from function2(function)


@lesson("full_name")
def full_name():
    def make_full_name(first_name, last_name, /):
        return first_name + " " + last_name

    def insert_object(*, at):
        section, row = at
        return f"Inserted object at section {section}, row {row}"

    yield make_full_name("Fred", "Flintstone")
    yield insert_object(at=(2, 0))


# ----------------------------------------------------------------------
# Unnamed functions (closures)
# ----------------------------------------------------------------------

@lesson("simplest_closure")
def simplest_closure():
    yield (lambda: "the world's simplest closure")()

    close1 = lambda: "hello closure!"  # noqa: E731
    yield close1()

    def f1(close):
        return close()

    yield f1(close1)
    yield f1(lambda: "In line closure executed")

    # Decorator syntax passes the function that follows it
    @f1
    def trailing():
        return "Trailing closure executed"

    yield trailing


@lesson("closure_with_arguments")
def closure_with_arguments():
    close2 = lambda text: text  # noqa: E731
    yield close2("How to call a closure with a string argument")

    some_num, some_other_num = 10.0, 12.0
    divide = lambda num1, num2: num1 / num2  # noqa: E731
    yield f"{divide(some_num, some_other_num):.4f}"
    yield str((lambda num1, num2: num1 * num2)(some_num, some_other_num))


class Photo:
    """Placeholder model handed back through callbacks."""

    def __init__(self, title="photo"):
        self.title = title


class DetailController:
    """Creates photos and reports them through a callback."""

    def __init__(self):
        self.block = None

    def save(self, block=None):
        callback = block or self.block
        callback(Photo())


class MainController:
    """Owns the photo list and hands a bound method out as a callback."""

    def __init__(self):
        self.photos = []
        self.events = []
        self.dvc = DetailController()

    def add_photo(self, photo):
        self.photos.append(photo)
        self.events.append(f"object was added ({len(self.photos)} photos)")

    def prepare(self):
        self.dvc.block = self.add_photo


@lesson("callback_handler")
def callback_handler():
    main = MainController()
    main.prepare()
    main.dvc.save()
    # Same thing with the closure passed straight into save()
    main.dvc.save(lambda photo: main.add_photo(photo))
    yield from main.events


@lesson("closure_list")
def closure_list():
    closures = [lambda: "Hello", lambda: "world"]
    for closure in closures:
        yield closure()


@lesson("sorting_with_closures")
def sorting_with_closures():
    def sorter1(item1, item2):
        return item1 < item2

    yield str(sort_by(FOODS, sorter1))
    yield str(sort_by(FOODS, lambda item1, item2: item1 > item2))
    # Operators are functions too
    yield str(sort_by(FOODS, operator.lt))


# ----------------------------------------------------------------------
# Capturing values
# ----------------------------------------------------------------------

@lesson("capturing_values")
def capturing_values():
    def outer_func():
        sandbox = CaptureSandbox("outer_func")
        sandbox.bind("num", 10, CaptureMode.BY_REFERENCE_MUTABLE)
        lines = [f"before {sandbox.get('num')}"]

        def add_twenty(ns):
            ns.num += 20

        inner_func = sandbox.capture(add_twenty, "num")
        inner_func()
        lines.append(f"after {sandbox.get('num')}")
        return lines

    yield from outer_func()

    def outer_func2():
        num = 10

        def inner_func():
            nonlocal num
            num += 20
            return num

        return inner_func

    the_inner_func = outer_func2()
    yield str(the_inner_func())
    yield str(the_inner_func())

    counter = make_counter(10, 5)
    yield str(counter())
    yield str(counter())


@lesson("capture_list")
def capture_list():
    sandbox = CaptureSandbox("capture_list")

    sandbox.bind("z", 10, CaptureMode.BY_REFERENCE_MUTABLE)
    close5 = sandbox.capture(lambda ns: f"~~~> {ns.z}", "z")
    sandbox.set("z", sandbox.get("z") + 20)
    yield close5()

    sandbox.bind("y", 10, CaptureMode.BY_VALUE_SNAPSHOT)
    close4 = sandbox.capture(lambda ns: f"==> {ns.y}", "y")
    sandbox.set("y", sandbox.get("y") + 20)
    yield close4()


# ----------------------------------------------------------------------
# Capturing self
# ----------------------------------------------------------------------

@lesson("weak_self")
def weak_self():
    temp_notifier = TemperatureNotifier()
    yield f"temperature {temp_notifier.some_event()}"

    owner = Owner("view controller")
    notify = make_weak_notifier(owner, lambda target: f"{target.name} notified")
    yield str(notify())
    owner.release()
    yield f"after release: {notify()!r}"


@lesson("unowned_self")
def unowned_self():
    def refresh(target):
        return f"{target.name} refreshed"

    owner = Owner("view controller")
    notify = make_unowned_notifier(owner, refresh)
    yield notify()
    owner.release()
    try:
        notify()
    except UseAfterReleaseError as e:
        yield f"crash: {e}"


# ----------------------------------------------------------------------
# Higher order functions
# ----------------------------------------------------------------------

ARR1 = list(range(1, 11))


@lesson("map")
def map_lesson():
    yield str(ARR1)
    yield str(map_seq(ARR1, str))
    yield str(map_seq(ARR1, lambda num: str(num + 10)))
    result55 = map_seq(range(0, 101), lambda num: num * 10)
    yield f"{len(result55)} values, last {result55[-1]}"

    # stride(from: 10, to: 100, by: 2)
    sum33 = map_seq(range(10, 100, 2), lambda num: num * 100)
    yield f"{len(sum33)} values, from {sum33[0]} to {sum33[-1]}"


@lesson("reduce")
def reduce_lesson():
    total = 0
    for item in ARR1:
        total += item
    yield str(total)

    yield str(reduce_seq(ARR1, 0, lambda num1, num2: num1 + num2))
    yield str(reduce_seq(range(1, 11), 1, operator.mul))
    yield reduce_seq(["abc", "def", "ghi"], "", operator.add)
    yield str(reduce_seq(ARR1, 10, operator.add))


@lesson("filter")
def filter_lesson():
    result = []
    for item in ARR1:
        if item % 3 == 0:
            result.append(item)
    yield str(result)

    yield str(filter_seq(ARR1, lambda num: num % 3 == 0))


@lesson("flat_map")
def flat_map_lesson():
    not_flat1 = [[1, 3, 4], ["yo", "mo"], [2.0, 66.9, 100.8]]
    yield str(flatten(not_flat1))

    not_flat2 = [None, 3, 4, None, 6, 8]
    yield str(map_seq(compact(not_flat2), str))

    not_flat3 = [[2, 45, 66, 1], [5, 7, 9], [34, 55]]
    yield str(flat_map(not_flat3, lambda inner: filter_seq(inner, lambda num: num % 2 == 0)))

    yield str(flatten([ARR1[0:3], ARR1[1:5]]))


@lesson("chaining")
def chaining():
    crazy_chain = (
        Pipeline(range(0, 1001))
        .filter(lambda num: num % 3 == 0)
        .map(lambda num: num * 14)
        .reduce(0, operator.add)
    )
    yield str(crazy_chain)


# ----------------------------------------------------------------------
# Bonus
# ----------------------------------------------------------------------

class Person:
    """Orders by age."""

    def __init__(self, age):
        self.age = age

    def __lt__(self, other):
        return self.age < other.age

    def __eq__(self, other):
        if not isinstance(other, Person):
            return NotImplemented
        return self.age == other.age

    def __repr__(self):
        return f"person age: {self.age}"


@lesson("custom_sortable")
def custom_sortable():
    yield str(sorted(ARR1))

    array_slice = ARR1[0:3]
    for i in array_slice:
        yield str(i)

    persons = [Person(12), Person(2), Person(4)]
    yield str(sort_by(persons, operator.lt))
    yield str(sorted(persons))
