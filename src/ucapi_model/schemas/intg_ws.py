"""Integration API WebSocket message names and ``msg_data`` payloads."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field

from ucapi_model.schemas.base import WireEnum, WireModel
from ucapi_model.schemas.entity import EntityType
from ucapi_model.schemas.intg import AvailableIntgEntity, DeviceState, IntegrationVersion
from ucapi_model.schemas.model import Oauth2Token
from ucapi_model.validation import UrlStr, bounded_str

TokenId = bounded_str(512, min_length=1)
TokenName = bounded_str(50, min_length=1)


class R2Request(WireEnum):
    """Requests sent from the remote to the integration driver.

    Example:
        >>> R2Request("subscribe_events").response_msg()
        'result'
    """

    GET_DRIVER_VERSION = "get_driver_version"
    # answered with a `device_state` event instead of a response message
    GET_DEVICE_STATE = "get_device_state"
    GET_AVAILABLE_ENTITIES = "get_available_entities"
    SUBSCRIBE_EVENTS = "subscribe_events"
    UNSUBSCRIBE_EVENTS = "unsubscribe_events"
    GET_ENTITY_STATES = "get_entity_states"
    ENTITY_COMMAND = "entity_command"
    GET_DRIVER_METADATA = "get_driver_metadata"
    SETUP_DRIVER = "setup_driver"
    SET_DRIVER_USER_DATA = "set_driver_user_data"

    def response_msg(self) -> Optional[str]:
        """Name of the response message the driver has to send, ``None`` if there is none."""
        return _R2_RESPONSE_MSG.get(self)


_R2_RESPONSE_MSG: Dict[R2Request, str] = {
    R2Request.GET_DRIVER_VERSION: "driver_version",
    R2Request.GET_AVAILABLE_ENTITIES: "available_entities",
    R2Request.SUBSCRIBE_EVENTS: "result",
    R2Request.UNSUBSCRIBE_EVENTS: "result",
    R2Request.GET_ENTITY_STATES: "entity_states",
    R2Request.ENTITY_COMMAND: "result",
    R2Request.GET_DRIVER_METADATA: "driver_metadata",
    R2Request.SETUP_DRIVER: "result",
    R2Request.SET_DRIVER_USER_DATA: "result",
}


class R2Response(WireEnum):
    """Responses from the remote to requests of the integration driver."""

    VERSION = "version"
    SUPPORTED_ENTITY_TYPES = "supported_entity_types"
    CONFIGURED_ENTITIES = "configured_entities"
    LOCALIZATION_CFG = "localization_cfg"
    RUNTIME_INFO = "runtime_info"
    OAUTH2_AUTH_URL = "oauth2_auth_url"
    OAUTH2_TOKEN = "oauth2_token"


class R2Event(WireEnum):
    """Integration specific events emitted from the remote."""

    CONNECT = "connect"
    DISCONNECT = "disconnect"
    ENTER_STANDBY = "enter_standby"
    EXIT_STANDBY = "exit_standby"
    ABORT_DRIVER_SETUP = "abort_driver_setup"
    OAUTH2_AUTHORIZATION = "oauth2_authorization"


class DriverResponse(WireEnum):
    RESULT = "result"
    DRIVER_VERSION = "driver_version"
    AVAILABLE_ENTITIES = "available_entities"
    ENTITY_STATES = "entity_states"
    DRIVER_METADATA = "driver_metadata"


class DriverEvent(WireEnum):
    AUTH_REQUIRED = "auth_required"
    DEVICE_STATE = "device_state"
    ENTITY_CHANGE = "entity_change"
    ENTITY_AVAILABLE = "entity_available"
    ENTITY_REMOVED = "entity_removed"
    DRIVER_SETUP_CHANGE = "driver_setup_change"


class DriverRequest(WireEnum):
    """Requests sent from the integration driver to the remote."""

    GET_VERSION = "get_version"
    GET_SUPPORTED_ENTITY_TYPES = "get_supported_entity_types"
    GET_CONFIGURED_ENTITIES = "get_configured_entities"
    GET_LOCALIZATION_CFG = "get_localization_cfg"
    GET_RUNTIME_INFO = "get_runtime_info"
    GENERATE_OAUTH2_AUTH_URL = "generate_oauth2_auth_url"
    CREATE_OAUTH2_CFG = "create_oauth2_cfg"
    GET_OAUTH2_TOKEN = "get_oauth2_token"
    DELETE_OAUTH2_TOKEN = "delete_oauth2_token"


class DriverVersionMsgData(WireModel):
    name: Optional[str] = None
    version: Optional[IntegrationVersion] = None


class DeviceStateMsgData(WireModel):
    # Only required for multi-device integrations.
    device_id: Optional[str] = None
    state: DeviceState


class EntityAvailableMsgData(WireModel):
    device_id: Optional[str] = None
    entity_type: EntityType
    entity_id: str
    features: Optional[List[str]] = None
    name: Dict[str, str]
    area: Optional[str] = None


class EntityRemovedMsgData(WireModel):
    device_id: Optional[str] = None
    entity_type: EntityType
    entity_id: str


class AvailableEntitiesFilter(WireModel):
    device_id: Optional[str] = None
    entity_type: Optional[EntityType] = None


class AvailableEntitiesMsgData(WireModel):
    filter: Optional[AvailableEntitiesFilter] = None
    available_entities: List[AvailableIntgEntity]


class RuntimeInfoMsgData(WireModel):
    driver_id: str
    intg_ids: List[str]
    log_id: Optional[str] = None


class GenerateOauth2AuthUrlMsgData(WireModel):
    """Request a one-time OAuth2 authorization URL for the user.

    Only one authorization URL per integration is active; a new request
    invalidates the previous URL. The ``client_data`` pairs are encoded into
    the ``state`` query parameter and returned in the ``oauth2_authorization``
    event. The keys ``intg``, ``acc`` and ``dev`` are set by the core.
    """

    client_data: Dict[str, str] = Field(default_factory=dict)


class Oauth2AuthUrlMsgData(WireModel):
    auth_url: UrlStr


class CreateOauth2CfgMsgData(WireModel):
    token_id: TokenId
    # Friendly name of the token.
    name: TokenName
    # Token as received in the `oauth2_authorization` event.
    token: Oauth2Token


class GetOauth2TokenMsgData(WireModel):
    token_id: str
    # Refresh even if the current token is still valid.
    force_refresh: Optional[bool] = None


class Oauth2TokenMsgData(WireModel):
    token_id: str
    token: Oauth2Token


class DeleteOauth2TokenMsgData(WireModel):
    token_id: str


class Oauth2AuthorizationMsgData(WireModel):
    # Key-value pairs of the authorization request URL.
    client_data: Dict[str, str] = Field(default_factory=dict)
    error_code: Optional[str] = None
    error_description: Optional[str] = None
    # Only set if the authorization succeeded.
    token: Optional[Oauth2Token] = None

    @classmethod
    def ok(cls, client_data: Dict[str, str], token: Oauth2Token) -> "Oauth2AuthorizationMsgData":
        return cls(client_data=client_data, token=token)

    @classmethod
    def failed(
        cls, client_data: Dict[str, str], code: object, description: Optional[object] = None
    ) -> "Oauth2AuthorizationMsgData":
        return cls(
            client_data=client_data,
            error_code=str(code),
            error_description=None if description is None else str(description),
        )
