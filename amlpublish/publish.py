"""
Publishing Python functions as Azure ML web services.

A published function is a standard Azure ML web service and can be called from
any web or mobile platform by anyone who knows its API key and URL. The function
may take

1. named scalar arguments, with names and types given by ``input_schema``, or
2. a single ``pandas.DataFrame`` when ``data_frame=True``; either give the column
   names and types in ``input_schema`` or pass an example input data frame as
   ``input_schema``.

Its output is always returned to callers as a data frame with the column names
and types of ``output_schema``.

Leave ``service_id`` unset to create a new web service, or give the ID of an
existing one to replace its function, schemas and requirements. It takes a few
seconds for an updated service to become available on the server.
"""
import inspect
import uuid
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import cloudpickle
import pandas

from .bundle import package_env
from .connection import Connection
from .constants import (
    DEFAULT_OUTPUT_NAME,
    DEFAULT_PYTHON_VERSION,
    DEFAULT_RETRIES,
    ID_KEY,
    LANGUAGE_FORMAT,
    WEB_SERVICE_PATH,
)
from .data_transfer_object.publish_request import (
    CodeBundlePayload,
    PublishWebServiceRequest,
)
from .errors import SchemaError
from .exports import get_exports, referenced_globals, without_globals
from .find_packages import find_packages_from_imports
from .logger import logger
from .request_validation import (
    language_version,
    validate_function,
    validate_input_schema,
    validate_schema_matches_signature,
)
from .schema import (
    Schema,
    azure_schema,
    infer_schema,
    schema_payload,
)
from .url_utils import sanitize_field
from .web_service import Endpoint
from .workspace import Workspace
from .wrapper import WRAPPER_SOURCE

InputSchema = Union[Mapping, pandas.DataFrame]


def _validate_request(workspace, fun, input_schema, retries, version) -> str:
    """Argument checks run before any network call. Returns the Language string."""
    if not isinstance(workspace, Workspace):
        raise ValueError("workspace must be an amlpublish.Workspace")
    validate_function(fun)
    validate_input_schema(input_schema)
    if retries < 1:
        raise ValueError(f"retries must be at least 1, got {retries}")
    return LANGUAGE_FORMAT.format(version=language_version(version))


def _annotated_output_schema(fun: Callable) -> Schema:
    annotation = inspect.signature(fun).return_annotation
    if annotation is inspect.Signature.empty:
        raise SchemaError(
            "output_schema is required: pass it explicitly, annotate the return "
            "type of the function, or pass an example DataFrame as input_schema"
        )
    if isinstance(annotation, Mapping):
        return azure_schema(annotation)
    return azure_schema({DEFAULT_OUTPUT_NAME: annotation})


def _resolve_schemas(
    fun: Callable,
    input_schema: InputSchema,
    output_schema: Optional[Mapping],
    data_frame: bool,
):
    if isinstance(input_schema, pandas.DataFrame):
        data_frame = True

    if data_frame:
        if isinstance(input_schema, pandas.DataFrame):
            function_output = fun(input_schema.head())
            if output_schema is None:
                output = infer_schema(function_output)
            else:
                output = azure_schema(output_schema)
        elif output_schema is None:
            output = _annotated_output_schema(fun)
        else:
            output = azure_schema(output_schema)
        return azure_schema(input_schema), output, data_frame

    inputs = azure_schema(input_schema)
    validate_schema_matches_signature(fun, inputs)
    if output_schema is None:
        output = _annotated_output_schema(fun)
    else:
        output = azure_schema(output_schema)
    return inputs, output, data_frame


def publish_web_service(
    workspace: Workspace,
    fun: Callable[..., Any],
    name: Optional[str] = None,
    input_schema: Optional[InputSchema] = None,
    output_schema: Optional[Mapping] = None,
    data_frame: bool = False,
    export: Sequence[str] = (),
    noexport: Sequence[str] = (),
    packages: Optional[Sequence[str]] = None,
    version: str = DEFAULT_PYTHON_VERSION,
    service_id: Optional[str] = None,
    host: Optional[str] = None,
    retries: int = DEFAULT_RETRIES,
    globals_copy: Optional[Dict[str, Any]] = None,
) -> List[Endpoint]:
    """
    Publishes a function to Azure ML as a web service.

    Parameters:
        workspace: The :class:`Workspace` to publish to.
        fun: The function to publish; it must have at least one argument.
        name: Name of the new web service. Ignored when ``service_id`` is given.
            Defaults to the function's name.
        input_schema: Either a mapping of ``fun``'s arguments to their types,
            formatted as ``{"arg1": "numeric", "arg2": str, ...}``, or an example
            input ``pandas.DataFrame`` when ``fun`` takes a single data frame.
        output_schema: Mapping of ``fun``'s outputs to their types. Optional when
            ``input_schema`` is an example data frame (inferred from running
            ``fun`` on its first rows) or when ``fun`` has a return annotation.
        data_frame: True if ``fun`` takes and returns a data frame. Set
            automatically when ``input_schema`` is a data frame.
        export: Names of additional objects to export with the function.
            Objects the function references are exported automatically.
        noexport: Names of objects that must not be exported.
        packages: Python package requirements to install on the server, e.g.
            ``["scikit-learn==1.4.2"]``. Inferred from the function's imports
            when omitted.
        version: Python version of the web service runtime.
        service_id: ID of an existing web service to update.
        host: Azure regional management host. Defaults to the workspace's
            management endpoint.
        retries: Number of tries before failing.
        globals_copy: Dictionary of the global symbol table, used to resolve
            ``export`` names. Normally provided by the ``globals()`` built-in.

    Returns:
        The :class:`Endpoint` objects of the published web service.
    """
    language = _validate_request(
        workspace, fun, input_schema, retries, version
    )

    if service_id is None:
        service_id = uuid.uuid1().hex
        if name is None:
            name = getattr(fun, "__name__", type(fun).__name__)
    elif name is None:
        name = ""

    input_types, output_types, data_frame = _resolve_schemas(
        fun, input_schema, output_schema, data_frame  # type: ignore
    )

    # Get and encode the dependencies
    if packages is None:
        requirements_inferred = find_packages_from_imports(
            {**referenced_globals(fun), "__fun__": fun}
        )
        # needed on the server to load the environment
        requirements_inferred.update(
            find_packages_from_imports({"cloudpickle": cloudpickle})
        )
        packages = [
            f"{key}=={value}" for key, value in requirements_inferred.items()
        ]
        logger.info("Using \n%s\n for web service %s", packages, service_id)

    shipped = without_globals(fun, noexport)
    env = {
        "fun": shipped,
        "exports": get_exports(
            shipped, export=export, noexport=noexport, globals_copy=globals_copy
        ),
        "output_names": list(output_types),
        "data_frame": data_frame,
    }
    zip_contents = package_env(env, packages=packages)

    request = PublishWebServiceRequest(
        Name=name,
        CodeBundle=CodeBundlePayload(
            InputSchema=schema_payload(input_types),
            OutputSchema=schema_payload(output_types),
            Language=language,
            SourceCode=WRAPPER_SOURCE,
            ZipContents=zip_contents,
        ),
    )

    connection = workspace.connection
    if host is not None and host.rstrip("/") != connection.endpoint:
        connection = Connection(workspace.authorization_token, host)

    logger.info(
        "Publishing web service %s to workspace %s", service_id, workspace.id
    )
    new_service = connection.put(
        request.dict(),
        WEB_SERVICE_PATH.format(
            workspace_id=workspace.id, service_id=sanitize_field(service_id)
        ),
        retries=retries,
    )

    # refresh the workspace cache
    workspace.refresh("services")

    return workspace.endpoints((new_service or {}).get(ID_KEY, service_id))


def update_web_service(
    workspace: Workspace,
    fun: Callable[..., Any],
    service_id: Optional[str],
    **kwargs,
) -> List[Endpoint]:
    """
    Replaces the function, schemas and requirements of an existing web service.

    Identical to :func:`publish_web_service` except that ``service_id`` is required.
    """
    _validate_request(
        workspace,
        fun,
        kwargs.get("input_schema"),
        kwargs.get("retries", DEFAULT_RETRIES),
        kwargs.get("version", DEFAULT_PYTHON_VERSION),
    )
    if service_id is None:
        raise ValueError(
            "update_web_service requires that the service_id parameter is specified"
        )
    return publish_web_service(
        workspace, fun, service_id=service_id, **kwargs
    )
