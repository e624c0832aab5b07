"""
Entry script executed by Azure ML for every published function.

The platform unpacks the service's zip bundle into ``Script Bundle`` and calls
``azureml_main`` with the request rows as a data frame.
"""
from .constants import (
    BUNDLE_DIR,
    BUNDLE_ENV_FILE,
    BUNDLE_REQUIREMENTS_FILE,
    BUNDLE_ROOT,
    DEFAULT_OUTPUT_NAME,
)

_SETTINGS = f"""\
_bundle_dir = {(BUNDLE_ROOT, BUNDLE_DIR)!r}
_env_file_name = {BUNDLE_ENV_FILE!r}
_requirements_file_name = {BUNDLE_REQUIREMENTS_FILE!r}
_default_output_name = {DEFAULT_OUTPUT_NAME!r}
"""

WRAPPER_SOURCE = (
    _SETTINGS
    + '''
import os
import subprocess
import sys

_bundle_dir = os.path.join(*_bundle_dir)
_requirements = os.path.join(_bundle_dir, _requirements_file_name)
_site_packages = os.path.join(_bundle_dir, "site-packages")

if os.path.exists(_requirements) and os.path.getsize(_requirements) > 0:
    subprocess.check_call(
        [sys.executable, "-m", "pip", "install", "--quiet",
         "--target", _site_packages, "-r", _requirements]
    )
    sys.path.insert(0, _site_packages)

import cloudpickle
import pandas
from pandas.api.types import is_list_like

with open(os.path.join(_bundle_dir, _env_file_name), "rb") as _env_file:
    _env = cloudpickle.load(_env_file)

_fun = _env["fun"]
_output_names = list(_env["output_names"])
if hasattr(_fun, "__globals__"):
    for _name, _value in _env["exports"].items():
        _fun.__globals__.setdefault(_name, _value)


def _as_frame(output):
    if isinstance(output, pandas.DataFrame):
        frame = output.copy()
    elif isinstance(output, dict):
        if any(is_list_like(value) for value in output.values()):
            frame = pandas.DataFrame(output)
        else:
            frame = pandas.DataFrame([output])
    elif is_list_like(output):
        frame = pandas.DataFrame({_default_output_name: list(output)})
    else:
        frame = pandas.DataFrame({_default_output_name: [output]})
    if set(_output_names).issubset(frame.columns):
        return frame[_output_names]
    frame.columns = _output_names
    return frame


def _as_row(output):
    if isinstance(output, dict):
        return [output[name] for name in _output_names]
    if isinstance(output, (list, tuple)):
        return list(output)
    return [output]


def azureml_main(df1=None, df2=None):
    if _env["data_frame"]:
        return _as_frame(_fun(df1))
    rows = [_as_row(_fun(**record)) for record in df1.to_dict(orient="records")]
    return pandas.DataFrame(rows, columns=_output_names)
'''
)
