"""
Finds the objects a published function needs at run time.

Python resolves free names of a function lexically: locals first, then cells
of enclosing functions, then the module globals. Closure cells travel with the
function when it is pickled, so only the globals have to be collected here.
Global names referenced by helper functions are collected recursively.
"""
import logging
import types
from collections import deque
from typing import Any, Callable, Dict, Iterable, Optional, Set

logger = logging.getLogger(__name__)


def _referenced_names(code: types.CodeType) -> Set[str]:
    names = set(code.co_names)
    for const in code.co_consts:
        if isinstance(const, types.CodeType):
            names |= _referenced_names(const)
    return names


def _closure_functions(fun: types.FunctionType):
    for cell in fun.__closure__ or ():
        try:
            contents = cell.cell_contents
        except ValueError:
            # empty cell
            continue
        if isinstance(contents, types.FunctionType):
            yield contents


def referenced_globals(fun: Callable) -> Dict[str, Any]:
    """Global names loaded by ``fun`` and by the functions it uses, with their values."""
    referenced: Dict[str, Any] = {}
    if not isinstance(fun, types.FunctionType):
        fun = getattr(fun, "__call__", fun)
        if isinstance(fun, types.MethodType):
            fun = fun.__func__
        if not isinstance(fun, types.FunctionType):
            return referenced

    queue = deque([fun])
    seen = {id(fun)}
    while queue:
        current = queue.popleft()
        scope = current.__globals__
        helpers = list(_closure_functions(current))
        for name in sorted(_referenced_names(current.__code__)):
            if name not in scope or name in referenced:
                continue
            value = scope[name]
            referenced[name] = value
            if isinstance(value, types.FunctionType):
                helpers.append(value)
        for helper in helpers:
            if id(helper) not in seen:
                seen.add(id(helper))
                queue.append(helper)
    return referenced


def get_exports(
    fun: Callable,
    export: Iterable[str] = (),
    noexport: Iterable[str] = (),
    globals_copy: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Builds the environment exported to the web service along with ``fun``.

    Parameters:
        fun: The function to publish.
        export: Names to export explicitly, e.g. objects the function only reaches
            through ``globals()`` or ``eval``.
        noexport: Names that must never be exported.
        globals_copy: Dictionary of the global symbol table used to resolve
            ``export`` names the function's own module does not define. Normally
            provided by the ``globals()`` built-in function.

    Returns:
        A dictionary of exported names and values. Modules are never exported;
        they are imported again on the server.
    """
    excluded = set(noexport)
    exports = {
        name: value
        for name, value in referenced_globals(fun).items()
        if name not in excluded and not isinstance(value, types.ModuleType)
    }

    scopes = [getattr(fun, "__globals__", {}), globals_copy or {}]
    for name in export:
        if name in excluded:
            continue
        for scope in scopes:
            if name in scope:
                exports[name] = scope[name]
                break
        else:
            logger.warning("Could not find '%s' to export, skipping it", name)
    return exports


def _clone_function(
    fun: types.FunctionType, scope: Dict[str, Any]
) -> types.FunctionType:
    clone = types.FunctionType(
        fun.__code__, scope, fun.__name__, fun.__defaults__, fun.__closure__
    )
    clone.__kwdefaults__ = fun.__kwdefaults__
    clone.__qualname__ = fun.__qualname__
    clone.__module__ = fun.__module__
    clone.__doc__ = fun.__doc__
    clone.__dict__.update(fun.__dict__)
    return clone


def without_globals(fun: Callable, noexport: Iterable[str] = ()) -> Callable:
    """Rebinds ``fun`` to a copy of its global scope that lacks every ``noexport`` name.

    cloudpickle captures the globals a function loads when pickling it by value,
    so excluded names have to be removed from the scope itself. Helpers defined
    in the same module are rebound to the same copy.
    """
    excluded = set(noexport)
    if not excluded or not isinstance(fun, types.FunctionType):
        return fun

    module_globals = fun.__globals__
    scope = {
        name: value
        for name, value in module_globals.items()
        if name not in excluded
    }
    for name, value in referenced_globals(fun).items():
        if (
            name in scope
            and isinstance(value, types.FunctionType)
            and value.__globals__ is module_globals
        ):
            scope[name] = _clone_function(value, scope)
    return _clone_function(fun, scope)
