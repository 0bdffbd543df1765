"""Models shared between the Core- and Integration-API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from pydantic import ConfigDict

from ucapi_model.schemas.base import WireEnum, WireModel
from ucapi_model.schemas.settings import ConfirmationPage, SettingsPage
from ucapi_model.validation import U64


class Oauth2Token(WireModel):
    # The access token issued by the authorization server.
    access_token: str
    # The type of the token issued, e.g. `Bearer`.
    token_type: str
    # Lifetime in seconds of the access token.
    expires_in: Optional[U64] = None
    # Injected by the core: expiry based on `expires_in` and the time of the authorization request.
    expires_at: Optional[datetime] = None
    refresh_token: Optional[str] = None
    # Space-separated list of granted scopes.
    scope: Optional[str] = None


class SetupChangeEventType(WireEnum):
    # Setup started.
    START = "START"
    # Setup in progress. See `state` for the current setup state.
    SETUP = "SETUP"
    # Setup finished with `state: OK` or `state: ERROR`.
    STOP = "STOP"


class IntegrationSetupState(WireEnum):
    # Internal state while preparing setup.
    NEW = "NEW"
    SETUP = "SETUP"
    # Waiting for user input, see `require_user_action`.
    WAIT_USER_ACTION = "WAIT_USER_ACTION"
    OK = "OK"
    ERROR = "ERROR"


class IntegrationSetupError(WireEnum):
    """More detailed error reason for the ``state: ERROR`` condition."""

    NONE = "NONE"
    NOT_FOUND = "NOT_FOUND"
    CONNECTION_REFUSED = "CONNECTION_REFUSED"
    AUTHORIZATION_ERROR = "AUTHORIZATION_ERROR"
    TIMEOUT = "TIMEOUT"
    OTHER = "OTHER"


class InputAction(WireModel):
    model_config = ConfigDict(extra="forbid")

    input: SettingsPage


class ConfirmationAction(WireModel):
    model_config = ConfigDict(extra="forbid")

    confirmation: ConfirmationPage


# If set, the setup process waits for the specified user action.
RequireUserAction = Union[InputAction, ConfirmationAction]
