import logging
import math

from amlpublish.exports import get_exports, referenced_globals, without_globals

SCALE = 3
OFFSET = 10
UNUSED = "never referenced"


def helper(value):
    return value * SCALE


def uses_helper(value):
    return helper(value) + OFFSET


def uses_module(value):
    return math.sqrt(value) + OFFSET


def uses_comprehension(values):
    return [SCALE * value for value in values]


def make_closure():
    factor = 2

    def inner(value):
        return value * factor + helper(value)

    return inner


class Predictor:
    def __call__(self, value):
        return value + OFFSET


def test_referenced_globals_follows_helpers():
    referenced = referenced_globals(uses_helper)
    assert referenced["helper"] is helper
    assert referenced["OFFSET"] == OFFSET
    assert referenced["SCALE"] == SCALE
    assert "UNUSED" not in referenced


def test_referenced_globals_walks_nested_code():
    assert referenced_globals(uses_comprehension) == {"SCALE": SCALE}


def test_referenced_globals_follows_closures():
    referenced = referenced_globals(make_closure())
    assert referenced["helper"] is helper
    assert referenced["SCALE"] == SCALE
    assert "factor" not in referenced


def test_referenced_globals_of_callable_object():
    assert referenced_globals(Predictor()) == {"OFFSET": OFFSET}


def test_modules_are_not_exported():
    assert referenced_globals(uses_module)["math"] is math
    assert get_exports(uses_module) == {"OFFSET": OFFSET}


def test_noexport():
    exports = get_exports(uses_helper, noexport=["OFFSET"])
    assert "OFFSET" not in exports
    assert exports["helper"] is helper


def test_explicit_export():
    exports = get_exports(
        uses_module,
        export=["UNUSED", "EXTRA"],
        globals_copy={"EXTRA": 42, "UNUSED": "shadowed"},
    )
    assert exports["UNUSED"] == "never referenced"
    assert exports["EXTRA"] == 42


def test_noexport_wins_over_export():
    exports = get_exports(uses_module, export=["UNUSED"], noexport=["UNUSED"])
    assert "UNUSED" not in exports


def test_missing_export_is_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="amlpublish.exports"):
        exports = get_exports(uses_module, export=["DOES_NOT_EXIST"])
    assert "DOES_NOT_EXIST" not in exports
    assert "DOES_NOT_EXIST" in caplog.text


def test_without_globals_removes_excluded_names():
    stripped = without_globals(uses_helper, noexport=["OFFSET"])
    assert "OFFSET" not in stripped.__globals__
    assert stripped.__globals__["SCALE"] == SCALE
    assert stripped.__name__ == "uses_helper"
    assert stripped.__module__ == uses_helper.__module__
    assert "OFFSET" in globals()


def test_without_globals_rebinds_helpers():
    stripped = without_globals(uses_helper, noexport=["SCALE"])
    assert stripped.__globals__["helper"] is not helper
    assert "SCALE" not in stripped.__globals__["helper"].__globals__


def test_without_globals_keeps_defaults():
    def with_defaults(value, scale=2, *, offset=1):
        return value * scale + offset + OFFSET

    stripped = without_globals(with_defaults, noexport=["UNUSED"])
    assert stripped(1) == 1 * 2 + 1 + OFFSET


def test_without_globals_without_noexport():
    assert without_globals(uses_helper) is uses_helper
