from __future__ import annotations

import copy
import gc
import pickle
import weakref

from lib_log_branch.domain.handled import HandledErrors


class _TrackedError(Exception):
    """Python-level subclass; accepts weak references so collection is observable."""


class _AlwaysEqualError(Exception):
    def __eq__(self, other: object) -> bool:
        return True

    def __hash__(self) -> int:
        return 0


def test_membership_is_by_identity_not_message() -> None:
    handled = HandledErrors()
    first = ValueError("boom")
    handled.add(first)
    assert first in handled
    assert ValueError("boom") not in handled


def test_membership_ignores_custom_equality() -> None:
    handled = HandledErrors()
    handled.add(_AlwaysEqualError())
    assert _AlwaysEqualError() not in handled


def test_registries_are_independent() -> None:
    left, right = HandledErrors(), HandledErrors()
    error = RuntimeError("x")
    left.add(error)
    assert error in left
    assert error not in right
    right.add(error)
    assert error in right


def test_adding_twice_is_harmless() -> None:
    handled = HandledErrors()
    error = KeyError("k")
    handled.add(error)
    handled.add(error)
    assert error in handled


def test_non_exceptions_are_never_members() -> None:
    handled = HandledErrors()
    assert "boom" not in handled
    assert None not in handled


def test_registry_does_not_keep_errors_alive() -> None:
    handled = HandledErrors()
    error = _TrackedError("transient")
    handled.add(error)
    ref = weakref.ref(error)
    del error
    gc.collect()
    assert ref() is None


def test_shallow_copy_of_handled_error_is_not_a_member() -> None:
    handled = HandledErrors()
    original = ValueError("boom")
    handled.add(original)
    duplicate = copy.copy(original)
    assert original in handled
    assert duplicate not in handled


def test_adding_a_copy_leaves_the_original_stamp_alone() -> None:
    first, second = HandledErrors(), HandledErrors()
    original = ValueError("boom")
    first.add(original)
    duplicate = copy.copy(original)
    second.add(duplicate)
    assert duplicate in second and duplicate not in first
    assert original in first and original not in second


def test_unpickled_error_is_not_a_member() -> None:
    handled = HandledErrors()
    original = RuntimeError("boom")
    handled.add(original)
    restored = pickle.loads(pickle.dumps(original))
    assert restored not in handled
    assert original in handled


def test_stamp_copied_onto_another_error_is_ignored() -> None:
    handled = HandledErrors()
    stamped = RuntimeError("x")
    handled.add(stamped)
    other = RuntimeError("y")
    other.__dict__.update(stamped.__dict__)
    assert other not in handled
