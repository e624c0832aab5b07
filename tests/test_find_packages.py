import importlib.metadata
import json
import types

import pandas
import pytest

import amlpublish
from amlpublish.find_packages import (
    find_packages_from_imports,
    get_imports,
    is_installed_module,
)


def test_get_imports():
    modules = list(get_imports({"pytest": pytest, "frame": pandas.DataFrame, "n": 3}))
    assert pytest in modules
    assert any(module.__name__.startswith("pandas") for module in modules)
    assert len(modules) == 2


def test_find_packages_from_imports():
    packages = find_packages_from_imports(
        {"pandas": pandas, "json": json, "amlpublish": amlpublish}
    )
    assert packages["pandas"] == importlib.metadata.version("pandas")
    assert "amlpublish" not in packages
    assert all(not name.startswith("json") for name in packages)


def test_find_packages_from_objects():
    packages = find_packages_from_imports({"DataFrame": pandas.DataFrame})
    assert "pandas" in packages


def test_is_installed_module():
    assert is_installed_module(json)
    assert is_installed_module(pandas)
    assert not is_installed_module(types.ModuleType("my_local_analysis_code"))
