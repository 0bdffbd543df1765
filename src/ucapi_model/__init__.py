"""Remote Two API models.

Message and entity schemas exchanged between the remote and integration
drivers, plus the core REST response model.
"""

from ucapi_model.schemas.entity import EntityType
from ucapi_model.schemas.ws import (
    EventCategory,
    PayloadSerializationError,
    WsAuthentication,
    WsMessage,
    WsRequest,
    WsResponse,
    WsResultMsgData,
)
from ucapi_model.utils.language import text_from_language_map

__version__ = "0.13.0"

__all__ = [
    "EntityType",
    "EventCategory",
    "PayloadSerializationError",
    "WsAuthentication",
    "WsMessage",
    "WsRequest",
    "WsResponse",
    "WsResultMsgData",
    "text_from_language_map",
]
