"""
Request descriptions handed from the builders to a transport.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .utils import encode_value

# Names the parameter that carries binary data in a multipart body.
DATA_PARAMETER_KEY = "_data_parameter_key"


@dataclass(frozen=True)
class Attachment:
    """Binary payload sent as a multipart file field."""

    field_name: str
    payload: bytes = field(repr=False)


@dataclass(frozen=True)
class RequestDescription:
    """A fully validated request, ready for a transport."""

    method: str
    path: str
    parameters: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    attachment: Optional[Attachment] = None

    def __hash__(self):
        return hash((self.method, self.path, frozenset(self.parameters.items()), self.attachment))

    @property
    def is_multipart(self) -> bool:
        return self.attachment is not None

    def encoded_parameters(self) -> Dict[str, str]:
        """
        String-valued fields for the query string or form body.

        Binary values and the data key marker are left out; the transport
        sends the attachment separately.
        """
        encoded = {}
        for key, value in self.parameters.items():
            if key == DATA_PARAMETER_KEY:
                continue
            text = encode_value(value)
            if text is not None:
                encoded[key] = text
        return encoded


class ParameterBuilder:
    """Collects parameters for one request, skipping values that were not supplied.

    The builder itself is mutable and local to one build_* call; build()
    copies what was collected into a read-only RequestDescription.
    """

    def __init__(self):
        self._params: Dict[str, Any] = {}
        self._attachment: Optional[Attachment] = None

    def add(self, key: str, value: Any) -> "ParameterBuilder":
        if value is not None:
            self._params[key] = value
        return self

    def attach(self, field_name: str, payload: bytes) -> "ParameterBuilder":
        self._params[field_name] = payload
        self._params[DATA_PARAMETER_KEY] = field_name
        self._attachment = Attachment(field_name, payload)
        return self

    def build(self, method: str, path: str) -> RequestDescription:
        return RequestDescription(
            method=method,
            path=path,
            parameters=MappingProxyType(dict(self._params)),
            attachment=self._attachment,
        )
