from dataclasses import dataclass
from typing import Optional

from dataclasses_json import LetterCase, Undefined, dataclass_json


@dataclass_json(letter_case=LetterCase.PASCAL, undefined=Undefined.EXCLUDE)  # type: ignore
@dataclass
class WebService:
    """
    Represents a web service published in an Azure ML workspace.
    """

    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    creation_time: Optional[str] = None
    workspace_id: Optional[str] = None
    default_endpoint_name: Optional[str] = None

    def __str__(self):
        return f"WebService(id={self.id}, name={self.name})"


@dataclass_json(letter_case=LetterCase.PASCAL, undefined=Undefined.EXCLUDE)  # type: ignore
@dataclass
class Endpoint:
    """
    Represents an endpoint of a web service. ``api_location`` and ``primary_key``
    are what a client needs to call the service.
    """

    name: str
    description: Optional[str] = None
    creation_time: Optional[str] = None
    workspace_id: Optional[str] = None
    web_service_id: Optional[str] = None
    help_location: Optional[str] = None
    primary_key: Optional[str] = None
    secondary_key: Optional[str] = None
    api_location: Optional[str] = None
    version: Optional[str] = None
    max_concurrent_calls: Optional[int] = None
    diagnostics_trace_level: Optional[str] = None
    throttle_level: Optional[str] = None

    def __str__(self):
        return f"Endpoint(name={self.name}, web_service_id={self.web_service_id})"
