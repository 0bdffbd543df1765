"""Common WebSocket messages used for the Core & Integration APIs.

Every message on the WebSocket channel is an envelope of one of three kinds:

.. code-block:: json

    {"kind": "req", "id": 123, "msg": "get_driver_version"}
    {"kind": "resp", "req_id": 123, "msg": "driver_version", "code": 200, "msg_data": {...}}
    {"kind": "event", "msg": "device_state", "cat": "DEVICE", "ts": "2024-05-01T12:00:00Z", "msg_data": {...}}

``WsRequest`` and ``WsResponse`` are the strict message definitions.
``WsMessage`` is the generic message for best effort parsing when the kind
is not known in advance: all fields are optional and unknown top level
fields are kept in ``extra``.

The ``id`` of a request is assigned by the sender and increases with every
request on a connection; the response echoes it in ``req_id``. Keeping track
of outstanding requests is up to the session layer.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ucapi_model.schemas.base import WireEnum, WireModel
from ucapi_model.utils.logger_util import get_logger
from ucapi_model.validation import U16, U32

logger = get_logger(__name__)

REQUEST_KIND = "req"
RESPONSE_KIND = "resp"
EVENT_KIND = "event"
# catch-all response message name for acknowledgements and errors
RESULT_MSG = "result"


class WsAuthentication(WireEnum):
    """WebSocket authentication type."""

    # Authenticate with header token.
    HEADER = "HEADER"
    # Authenticate with authentication message.
    MESSAGE = "MESSAGE"


class EventCategory(WireEnum):
    """Event message categories."""

    # Device specific events like integration driver status changes
    DEVICE = "DEVICE"
    # Entity change events
    ENTITY = "ENTITY"
    # Remote specific events like configuration changes
    REMOTE = "REMOTE"
    # UI change events
    UI = "UI"


class PayloadSerializationError(ValueError):
    """The given payload cannot be represented as a JSON value."""


class WsResultMsgData(WireModel):
    """Default payload of a ``result`` response message."""

    code: str
    message: str


def to_msg_data(payload: Any) -> Any:
    """Convert a payload into the generic JSON value stored in ``msg_data``.

    Pydantic models are dumped in JSON mode; everything else goes through
    pydantic's JSON conversion (dataclasses, enums, datetimes, containers).
    NaN and infinite floats have no JSON form and are rejected.

    Raises:
        PayloadSerializationError: if the payload has no JSON representation.
    """
    try:
        if isinstance(payload, BaseModel):
            value = payload.model_dump(mode="json")
        else:
            value = to_jsonable_python(payload)
        json.dumps(value, allow_nan=False)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise PayloadSerializationError(f"cannot serialize {type(payload).__name__} payload: {exc}") from exc
    return value


def _internal_error_data() -> Dict[str, str]:
    return {"code": "INTERNAL_ERROR", "message": "Error serializing result"}


def _response_fields(req_id: int, msg: str, msg_data: Any) -> Dict[str, Any]:
    """Fields of a successful response, or of a 500 result if ``msg_data`` can't be serialized.

    Response helpers are used in error handlers where a second failure can't
    be handled, so this never raises for the payload.
    """
    try:
        value = to_msg_data(msg_data)
    except PayloadSerializationError:
        logger.warning("Error serializing msg_data of '%s' response for request %s", msg, req_id, exc_info=True)
        return {"req_id": req_id, "msg": RESULT_MSG, "code": 500, "msg_data": _internal_error_data()}
    return {"req_id": req_id, "msg": msg, "code": 200, "msg_data": value}


class WsMessage(WireModel):
    """Generic message definition for requests, responses and events.

    This message structure is for best effort parsing. See ``WsRequest`` and
    ``WsResponse`` for the specific message definitions.

    Example:
        >>> m = WsMessage.parse('{"kind": "req", "id": 123, "msg": "test", "bar": "foo"}')
        >>> m.id, m.req_id, m.extra
        (123, None, {'bar': 'foo'})
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    # Message identifier: `req`, `resp`, `event`
    kind: Optional[str] = None
    # Request message only: ID which must be increased for every new request.
    id: Optional[U32] = None
    # Response message only: corresponding request ID.
    req_id: Optional[U32] = None
    # One of the defined API message types.
    msg: Optional[str] = None
    # Response message only: code of the operation according to HTTP status codes.
    code: Optional[U16] = None
    # Event message only: category of the event.
    cat: Optional[EventCategory] = None
    # Event message only: timestamp when the event was generated.
    ts: Optional[datetime] = None
    msg_data: Optional[Any] = None

    @property
    def extra(self) -> Dict[str, Any]:
        """Top level fields which are not part of the message definition."""
        return dict(self.model_extra or {})

    @classmethod
    def parse(cls, raw: Union[str, bytes, Mapping[str, Any]]) -> "WsMessage":
        """Parse a received JSON text or an already decoded JSON object."""
        if isinstance(raw, (str, bytes, bytearray)):
            return cls.model_validate_json(raw)
        return cls.model_validate(raw)

    @classmethod
    def event(cls, msg: str, cat: Optional[EventCategory], msg_data: Any) -> "WsMessage":
        """Create an event message; ``ts`` is set to the current time.

        Raises:
            PayloadSerializationError: if ``msg_data`` can't be serialized.
        """
        return cls(
            kind=EVENT_KIND,
            msg=msg,
            cat=cat,
            ts=datetime.now(timezone.utc),
            msg_data=to_msg_data(msg_data),
        )

    @classmethod
    def simple_request(cls, id: int, msg: str) -> "WsMessage":
        """Create a request message without ``msg_data``."""
        return cls(kind=REQUEST_KIND, id=id, msg=msg)

    @classmethod
    def request(cls, id: int, msg: str, msg_data: Any = None) -> "WsMessage":
        """Create a request message with ``msg_data`` set from the given payload.

        Without a payload the ``msg_data`` property is omitted.

        Raises:
            PayloadSerializationError: if ``msg_data`` can't be serialized.
        """
        value = None if msg_data is None else to_msg_data(msg_data)
        return cls(kind=REQUEST_KIND, id=id, msg=msg, msg_data=value)

    @classmethod
    def response_json(cls, req_id: int, msg: str, msg_data: Any) -> "WsMessage":
        """Create a successful response from an already JSON compatible value."""
        return cls(kind=RESPONSE_KIND, req_id=req_id, msg=msg, code=200, msg_data=msg_data)

    @classmethod
    def response(cls, req_id: int, msg: str, msg_data: Any) -> "WsMessage":
        """Create a successful response message with code ``200``.

        If ``msg_data`` can't be serialized a ``500`` result response with an
        ``INTERNAL_ERROR`` payload is returned instead.
        """
        return cls(kind=RESPONSE_KIND, **_response_fields(req_id, msg, msg_data))

    @classmethod
    def error(cls, req_id: int, code: int, msg_data: WsResultMsgData) -> "WsMessage":
        """Create an error ``result`` response. The code is not checked against HTTP status codes."""
        return cls(kind=RESPONSE_KIND, req_id=req_id, msg=RESULT_MSG, code=code, msg_data=msg_data.to_dict())

    @classmethod
    def from_request(cls, request: "WsRequest") -> "WsMessage":
        return cls(kind=request.kind, id=request.id, msg=request.msg, msg_data=request.msg_data)

    @classmethod
    def from_response(cls, response: "WsResponse") -> "WsMessage":
        return cls(
            kind=response.kind,
            req_id=response.req_id,
            msg=response.msg,
            code=response.code,
            msg_data=response.msg_data,
        )


class WsRequest(WireModel):
    """Common request message."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["req"] = REQUEST_KIND
    # Request ID which must be increased for every new request.
    # This ID will be returned in the response message.
    id: U32
    # One of the defined API request message types.
    msg: str
    msg_data: Optional[Any] = None

    @classmethod
    def create(cls, id: int, msg: str, msg_data: Any = None) -> "WsRequest":
        """Create a request message from a serializable payload.

        Raises:
            PayloadSerializationError: if ``msg_data`` can't be serialized.
        """
        value = None if msg_data is None else to_msg_data(msg_data)
        return cls(id=id, msg=msg, msg_data=value)

    def to_message(self) -> WsMessage:
        return WsMessage.from_request(self)


class WsResponse(WireModel):
    """Common response message."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["resp"] = RESPONSE_KIND
    # Corresponding request ID.
    req_id: U32
    # One of the defined API response message types.
    msg: str
    # Response code of the operation according to HTTP status codes.
    code: U16
    msg_data: Optional[Any] = None

    @classmethod
    def create(cls, req_id: int, msg: str, msg_data: Any) -> "WsResponse":
        """Create a ``200`` response from a serializable payload.

        Never raises for the payload: see ``WsMessage.response``.
        """
        return cls(**_response_fields(req_id, msg, msg_data))

    @classmethod
    def error(cls, req_id: int, code: int, msg_data: WsResultMsgData) -> "WsResponse":
        """Create an error ``result`` response. The code is not checked against HTTP status codes."""
        return cls(req_id=req_id, msg=RESULT_MSG, code=code, msg_data=msg_data.to_dict())

    @classmethod
    def missing_field(cls, req_id: int, field: str) -> "WsResponse":
        """Create a ``400`` bad request response for a missing field."""
        return cls(
            req_id=req_id,
            msg=RESULT_MSG,
            code=400,
            msg_data={"code": "BAD_REQUEST", "message": f"Missing field: {field}"},
        )

    @classmethod
    def not_found(cls, req_id: int, message: str) -> "WsResponse":
        """Create a ``404`` not found response with a custom message."""
        return cls(req_id=req_id, msg=RESULT_MSG, code=404, msg_data={"code": "NOT_FOUND", "message": message})

    @classmethod
    def result(cls, req_id: int, code: int) -> "WsResponse":
        """Create a ``result`` response without payload."""
        return cls(req_id=req_id, msg=RESULT_MSG, code=code)

    @classmethod
    def validation_error(cls, req_id: int, err: ValidationError) -> "WsResponse":
        """Create a ``400`` bad request response from failed model validation.

        The message names every invalid field, e.g.
        ``Invalid field(s): driver_id, developer.email``.
        """
        fields = []
        for detail in err.errors():
            loc = ".".join(str(part) for part in detail["loc"]) or "msg_data"
            if loc not in fields:
                fields.append(loc)
        logger.debug("request %s failed validation: %s", req_id, fields)
        return cls(
            req_id=req_id,
            msg=RESULT_MSG,
            code=400,
            msg_data={"code": "BAD_REQUEST", "message": "Invalid field(s): " + ", ".join(fields)},
        )

    def to_message(self) -> WsMessage:
        return WsMessage.from_response(self)
