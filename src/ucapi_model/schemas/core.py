"""Core API data structures and REST messages."""

from __future__ import annotations

from typing import Optional

from ucapi_model.schemas.base import WireEnum, WireModel


class RemoteOptionField(WireEnum):
    """Core-API remote entity option fields.

    Only valid in the Core-API data model.
    """

    EDITABLE = "editable"
    # Command identifiers for the `send` command, e.g. the IR command keys of an IR remote.
    SIMPLE_COMMANDS = "simple_commands"
    BUTTON_MAPPING = "button_mapping"
    USER_INTERFACE = "user_interface"


class ApiResponse(WireModel):
    """REST API response body."""

    code: Optional[str] = None
    message: Optional[str] = None
