"""Integration API data structures, independent of the transport layer.

See ``intg_ws`` for the WebSocket message names and payloads.

Language text maps (``name``, ``description``) use ISO 639-1 codes with an
optional country suffix as keys, e.g. ``en``, ``en_UK``, ``de_CH``. An
english text with key ``en`` should always be provided as fallback.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import ConfigDict, Field

from ucapi_model.schemas.base import WireEnum, WireModel
from ucapi_model.schemas.entity import EntityType
from ucapi_model.schemas.model import IntegrationSetupError, IntegrationSetupState, RequireUserAction, SetupChangeEventType
from ucapi_model.schemas.ws import WsAuthentication
from ucapi_model.utils.language import text_from_language_map
from ucapi_model.validation import (
    U16,
    Email100,
    IconStr,
    IdStr,
    Str20,
    Str50,
    Str100,
    Str255,
    Str2048,
    Url255,
    Url2048,
    bounded_str,
)

LanguageText = Dict[str, str]
FeatureName = bounded_str(50, min_length=4)


# States ---------------------------------------------------------------------

class DeviceState(WireEnum):
    """Integration device states."""

    UNKNOWN = "UNKNOWN"
    CONNECTING = "CONNECTING"
    CONNECTED = "CONNECTED"
    DISCONNECTED = "DISCONNECTED"
    ERROR = "ERROR"


class DriverState(WireEnum):
    """Integration driver states.

    The intermediate states "connected but not yet authenticated" and
    "disconnecting" are short-lived and not reported.
    """

    NOT_CONFIGURED = "NOT_CONFIGURED"
    IDLE = "IDLE"
    CONNECTING = "CONNECTING"
    ACTIVE = "ACTIVE"
    RECONNECTING = "RECONNECTING"
    ERROR = "ERROR"


class IntegrationState(WireEnum):
    NOT_CONFIGURED = "NOT_CONFIGURED"
    UNKNOWN = "UNKNOWN"
    IDLE = "IDLE"
    CONNECTING = "CONNECTING"
    CONNECTED = "CONNECTED"
    DISCONNECTED = "DISCONNECTED"
    RECONNECTING = "RECONNECTING"
    ACTIVE = "ACTIVE"
    ERROR = "ERROR"


class DriverType(WireEnum):
    # Pre-installed integration in the firmware.
    LOCAL = "LOCAL"
    # External integration on the network.
    EXTERNAL = "EXTERNAL"
    # Custom installed integration on the remote.
    CUSTOM = "CUSTOM"


class IotClass(WireEnum):
    """How the integration connects and communicates with a device or service."""

    ASSUMED_STATE = "assumed_state"
    CLOUD_POLLING = "cloud_polling"
    CLOUD_PUSH = "cloud_push"
    LOCAL_POLLING = "local_polling"
    LOCAL_PUSH = "local_push"


# Driver ---------------------------------------------------------------------

class IntegrationVersion(WireModel):
    # Implemented API version.
    api: Optional[str] = None
    # Version of the integration driver.
    driver: Optional[str] = None


class SubscribeEvents(WireModel):
    """Subscribe to ``entity_change`` events.

    If no entity IDs are given, events for all available entities are sent.
    """

    # Only required for multi-device integrations.
    device_id: Optional[str] = None
    entity_ids: List[str] = Field(default_factory=list)


class DriverDeveloper(WireModel):
    name: Optional[Str100] = None
    url: Optional[Url255] = None
    email: Optional[Email100] = None


class DriverFeature(WireModel):
    # A single hardware or software feature used by the driver.
    name: FeatureName
    # True (default): the driver can't work without the feature. False: used if present.
    required: Optional[bool] = None
    data: Optional[Any] = None


class DriverManifest(WireModel):
    """Required and optional features of a driver plus core-only metadata.

    Only used for registering external drivers. The manifest may carry data
    like OAuth2 endpoints which must not be exposed in the driver management
    API.
    """

    features: Optional[Annotated[List[DriverFeature], Field(min_length=1)]] = None
    iot_class: Optional[IotClass] = None


class IntegrationDriver(WireModel):
    """Integration driver model.

    A driver represents the communication aspect of an integration: how to
    connect to it and which API version it supports. One driver can provide
    multiple ``Integration`` instances ("multi-device integrations" using the
    optional ``device_id``).
    """

    # Provided by the user or during driver registration, otherwise a generated UUID.
    driver_id: str
    name: LanguageText
    driver_type: DriverType
    # WebSocket URL of the integration driver.
    driver_url: str
    # Never returned to external clients, see `pwd_protected`.
    token: Optional[str] = None
    auth_method: Optional[WsAuthentication] = None
    pwd_protected: Optional[bool] = None
    # SemVer preferred.
    version: str
    # Minimum required core API version.
    min_core_api: Optional[str] = None
    icon: Optional[str] = None
    # If disabled, no integration instance of the driver is activated.
    enabled: bool
    description: Optional[LanguageText] = None
    developer: Optional[DriverDeveloper] = None
    home_page: Optional[str] = None
    device_discovery: bool
    instance_count: Optional[U16] = None
    # Configuration metadata for the web-configurator.
    setup_data_schema: Any = None
    release_date: Optional[date] = None
    driver_state: Optional[DriverState] = None

    def name_text(self, lang: str) -> Optional[str]:
        return text_from_language_map(self.name, lang)


class IntegrationDriverUpdate(WireModel):
    """Create and patch model of ``IntegrationDriver`` with field validations.

    Required fields of a new driver are checked against ``IntegrationDriver``.
    """

    driver_id: Optional[IdStr] = None
    name: Optional[LanguageText] = None
    driver_url: Optional[Url2048] = None
    token: Optional[Str2048] = None
    auth_method: Optional[WsAuthentication] = None
    pwd_protected: Optional[bool] = None
    version: Optional[Str20] = None
    min_core_api: Optional[Str20] = None
    icon: Optional[Str255] = None
    enabled: Optional[bool] = None
    description: Optional[LanguageText] = None
    developer: Optional[DriverDeveloper] = None
    home_page: Optional[Url255] = None
    device_discovery: Optional[bool] = None
    setup_data_schema: Optional[Any] = None
    # Only used for registering external drivers, cannot be updated.
    manifest: Optional[DriverManifest] = None
    release_date: Optional[date] = None

    @classmethod
    def from_driver(cls, drv: IntegrationDriver) -> "IntegrationDriverUpdate":
        # stored data is not validated again
        return cls.model_construct(
            driver_id=drv.driver_id,
            name=drv.name,
            driver_url=drv.driver_url,
            token=drv.token,
            auth_method=drv.auth_method,
            pwd_protected=drv.pwd_protected,
            version=drv.version,
            min_core_api=drv.min_core_api,
            icon=drv.icon,
            enabled=drv.enabled,
            description=drv.description,
            developer=drv.developer,
            home_page=drv.home_page,
            device_discovery=drv.device_discovery,
            setup_data_schema=drv.setup_data_schema,
            manifest=None,
            release_date=drv.release_date,
        )


class IntegrationDriverInfo(WireModel):
    """Minimal integration driver information for overview pages."""

    driver_id: str
    name: LanguageText
    developer_name: Optional[str] = None
    driver_type: DriverType
    driver_url: str
    version: str
    icon: Optional[str] = None
    enabled: bool
    # True: multi-instance driver with device discovery.
    device_discovery: bool
    instance_count: U16
    # `IDLE` if the driver is not in use.
    driver_state: Optional[DriverState] = None


# Integration instance -------------------------------------------------------

class Integration(WireModel):
    """A configured integration driver instance."""

    integration_id: str
    # References `IntegrationDriver`.
    driver_id: str
    # Only required for multi-device integrations.
    device_id: Optional[str] = None
    name: LanguageText
    icon: Optional[str] = None
    enabled: bool
    # Optional configuration data if supported or required by the driver.
    setup_data: Dict[str, Any] = Field(default_factory=dict)
    device_state: Optional[DeviceState] = None

    def name_text(self, lang: str) -> Optional[str]:
        return text_from_language_map(self.name, lang)


class IntegrationUpdate(WireModel):
    """Create and patch model of ``Integration`` with field validations."""

    # Set by the system, cannot be updated.
    integration_id: Optional[str] = None
    # Cannot be updated.
    driver_id: Optional[str] = None
    # Cannot be updated.
    device_id: Optional[IdStr] = None
    name: Optional[LanguageText] = None
    icon: Optional[IconStr] = None
    enabled: Optional[bool] = None
    setup_data: Optional[Dict[str, Any]] = None

    @classmethod
    def from_integration(cls, intg: Integration) -> "IntegrationUpdate":
        return cls.model_construct(
            integration_id=intg.integration_id,
            driver_id=intg.driver_id,
            device_id=intg.device_id,
            name=intg.name,
            icon=intg.icon,
            enabled=intg.enabled,
            setup_data=intg.setup_data,
        )


class IntegrationStatus(WireModel):
    driver_id: Optional[str] = None
    integration_id: Optional[str] = None
    name: LanguageText
    icon: Optional[str] = None
    driver_type: DriverType
    state: Optional[IntegrationState] = None
    # deprecated: use `state`
    device_state: Optional[DeviceState] = None
    # deprecated: use `state`
    driver_state: Optional[DriverState] = None


# Setup flow -----------------------------------------------------------------

class SetupDriver(WireModel):
    """Payload of ``setup_driver`` to start a driver setup."""

    # Distinguishes a regular setup from a reconfiguration.
    reconfigure: Optional[bool] = None
    # Input values of the initial setup page, keyed by input field id.
    setup_data: Dict[str, str] = Field(default_factory=dict)


class DriverSetupChange(WireModel):
    """Payload of ``driver_setup_change``."""

    event_type: SetupChangeEventType
    state: IntegrationSetupState
    error: Optional[IntegrationSetupError] = None
    require_user_action: Optional[RequireUserAction] = None


class InputValues(WireModel):
    model_config = ConfigDict(extra="forbid")

    # Keyed by input field id, values in string format.
    input_values: Dict[str, str]


class Confirm(WireModel):
    model_config = ConfigDict(extra="forbid")

    # Always true: an unconfirmed setup page aborts the setup flow.
    confirm: bool


# Payload of `set_driver_user_data`.
IntegrationSetup = Union[InputValues, Confirm]


# Entities -------------------------------------------------------------------

class EntityCommand(WireModel):
    """Execute an entity command like "turn on" or "change temperature".

    The remote expects an ``entity_change`` event with the updated attributes
    after the command succeeded; the ``result`` response only acknowledges
    the command or reports immediate failures.
    """

    device_id: Optional[str] = None
    entity_type: EntityType
    entity_id: str
    cmd_id: str
    params: Optional[Dict[str, Any]] = None


class EntityChange(WireModel):
    """Entity attribute change event."""

    # Only required for multi-device integrations.
    device_id: Optional[str] = None
    entity_type: EntityType
    entity_id: str
    attributes: Dict[str, Any]


class AvailableIntgEntity(WireModel):
    """Available entity definition provided by an integration.

    ``entity_type`` defines the supported features and options of the entity.
    See the entity feature enums for available ``features``.
    """

    # Unique entity identifier within the integration device.
    entity_id: IdStr
    # Only set if the integration driver supports multiple devices.
    device_id: Optional[IdStr] = None
    entity_type: EntityType
    # Optional device type for a different UI representation.
    device_class: Optional[Str20] = None
    # Display name; an `en` text should always be provided.
    name: LanguageText
    features: Optional[List[str]] = None
    # E.g. `Living room`.
    area: Optional[Str50] = None
    options: Optional[Dict[str, Any]] = None

    def name_text(self, lang: str) -> Optional[str]:
        return text_from_language_map(self.name, lang)
