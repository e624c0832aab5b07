import base64
import contextlib
import inspect
import os
import shutil
import tempfile
from typing import Any, Callable, Dict, Iterator, Sequence

import cloudpickle

from .constants import (
    BUNDLE_DIR,
    BUNDLE_ENV_FILE,
    BUNDLE_REQUIREMENTS_FILE,
)
from .find_packages import is_installed_module
from .logger import logger


@contextlib.contextmanager
def pickle_by_value(fun: Callable) -> Iterator[None]:
    """Serializes the module defining ``fun`` by value unless the server can import it.

    Functions from an installed distribution are pickled by reference and are
    expected to come from the bundle's requirements. User code (scripts, notebooks,
    local modules) has to travel inside the bundle.
    """
    module = inspect.getmodule(fun)
    register = (
        module is not None
        and module.__name__ != "__main__"
        and not is_installed_module(module)
    )
    if register:
        logger.info("Bundling module %s by value", module.__name__)
        cloudpickle.register_pickle_by_value(module)
    try:
        yield
    finally:
        if register:
            cloudpickle.unregister_pickle_by_value(module)


def package_env(
    env: Dict[str, Any], packages: Sequence[str] = ()
) -> str:
    """
    Packages an export environment and its requirements as a zip archive.

    Parameters:
        env: The environment to ship with the web service. Must contain the
            published function under ``fun``.
        packages: Python package requirements installed on the server before the
            environment is loaded, e.g. ``["scikit-learn==1.4.2"]``.

    Returns:
        The zip archive, base64-encoded, ready for the ``ZipContents`` field.
    """
    with pickle_by_value(env["fun"]):
        serialized_env = cloudpickle.dumps(env)

    tmpdir = tempfile.mkdtemp()
    try:
        bundle_dir = os.path.join(tmpdir, BUNDLE_DIR)
        os.makedirs(bundle_dir)
        with open(os.path.join(bundle_dir, BUNDLE_ENV_FILE), "wb") as env_f:
            env_f.write(serialized_env)
        with open(
            os.path.join(bundle_dir, BUNDLE_REQUIREMENTS_FILE),
            "w",
            encoding="utf-8",
        ) as req_f:
            req_f.write("".join(f"{package}\n" for package in packages))

        tmparchive = os.path.join(tmpdir, "bundle")
        with open(
            shutil.make_archive(
                base_name=tmparchive,
                format="zip",
                root_dir=tmpdir,
                base_dir=BUNDLE_DIR,
            ),
            "rb",
        ) as zip_f:
            data = zip_f.read()
    finally:
        shutil.rmtree(tmpdir)

    logger.info("Packaged web service bundle of %d bytes", len(data))
    return base64.b64encode(data).decode("ascii")
