import importlib.metadata
import sys
import types
from typing import Any, Dict, Iterator, Mapping

_OWN_PACKAGE = __name__.partition(".")[0]


def get_imports(namespace: Mapping[str, Any]) -> Iterator[types.ModuleType]:
    """Yields the modules referenced by a namespace, directly or through the objects it holds."""
    for value in namespace.values():
        if isinstance(value, types.ModuleType):
            yield value
            continue
        module_name = getattr(value, "__module__", None)
        if isinstance(module_name, str) and module_name in sys.modules:
            yield sys.modules[module_name]


def find_packages_from_imports(namespace: Mapping[str, Any]) -> Dict[str, str]:
    """Maps the modules a namespace uses to installed distributions and their versions."""
    distributions = importlib.metadata.packages_distributions()
    packages: Dict[str, str] = {}
    for module in get_imports(namespace):
        top_level = module.__name__.partition(".")[0]
        if top_level == _OWN_PACKAGE or top_level in sys.stdlib_module_names:
            continue
        for distribution in distributions.get(top_level, []):
            packages[distribution] = importlib.metadata.version(distribution)
    return packages


def is_installed_module(module: types.ModuleType) -> bool:
    top_level = module.__name__.partition(".")[0]
    return (
        top_level in sys.stdlib_module_names
        or top_level in importlib.metadata.packages_distributions()
    )
