from typing import Dict

from amlpublish.constants import CODE_SERVICE_TYPE
from amlpublish.pydantic_base import ImmutableModel


class CodeBundlePayload(ImmutableModel):
    """Code and schemas of a web service, as the management API expects them."""

    InputSchema: Dict[str, Dict[str, str]]
    OutputSchema: Dict[str, Dict[str, str]]
    Language: str
    SourceCode: str
    ZipContents: str


class PublishWebServiceRequest(ImmutableModel):
    Name: str
    Type: str = CODE_SERVICE_TYPE
    CodeBundle: CodeBundlePayload
