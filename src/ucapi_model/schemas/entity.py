"""Common entity related data structures used in the Core & Integration APIs.

Variants are serialized in ``snake_case`` unless noted otherwise.
"""

from __future__ import annotations

from ucapi_model.schemas.base import WireEnum


class EntityType(WireEnum):
    """Supported entity types."""

    BUTTON = "button"
    SWITCH = "switch"
    CLIMATE = "climate"
    COVER = "cover"
    LIGHT = "light"
    MEDIA_PLAYER = "media_player"
    SENSOR = "sensor"
    # internal entities only at the moment
    ACTIVITY = "activity"
    MACRO = "macro"
    REMOTE = "remote"


# Button ---------------------------------------------------------------------

class ButtonFeature(WireEnum):
    PRESS = "press"


class ButtonCommand(WireEnum):
    PUSH = "push"


class ButtonAttribute(WireEnum):
    STATE = "state"


# Switch ---------------------------------------------------------------------

class SwitchFeature(WireEnum):
    ON_OFF = "on_off"
    TOGGLE = "toggle"


class SwitchCommand(WireEnum):
    ON = "on"
    OFF = "off"
    TOGGLE = "toggle"


class SwitchDeviceClass(WireEnum):
    # The switch represents a switchable power outlet.
    OUTLET = "outlet"
    # Generic switch.
    SWITCH = "switch"


class SwitchOption(WireEnum):
    READABLE = "readable"


class SwitchAttribute(WireEnum):
    STATE = "state"


# Climate --------------------------------------------------------------------

class ClimateFeature(WireEnum):
    ON_OFF = "on_off"
    HEAT = "heat"
    COOL = "cool"
    CURRENT_TEMPERATURE = "current_temperature"
    TARGET_TEMPERATURE = "target_temperature"


class ClimateOption(WireEnum):
    """Climate entity options."""

    # `CELSIUS` or `FAHRENHEIT`. The remote settings are used if not specified.
    TEMPERATURE_UNIT = "temperature_unit"
    # UI step for the target temperature. Defaults: CELSIUS 0.5, FAHRENHEIT 1. Minimum 0.1
    TARGET_TEMPERATURE_STEP = "target_temperature_step"
    MAX_TEMPERATURE = "max_temperature"
    MIN_TEMPERATURE = "min_temperature"


class ClimateCommand(WireEnum):
    ON = "on"
    OFF = "off"
    HVAC_MODE = "hvac_mode"
    TARGET_TEMPERATURE = "target_temperature"


class ClimateAttribute(WireEnum):
    STATE = "state"
    CURRENT_TEMPERATURE = "current_temperature"
    TARGET_TEMPERATURE = "target_temperature"
    TARGET_TEMPERATURE_HIGH = "target_temperature_high"
    TARGET_TEMPERATURE_LOW = "target_temperature_low"
    FAN_MODE = "fan_mode"


# Cover ----------------------------------------------------------------------

class CoverFeature(WireEnum):
    OPEN = "open"
    CLOSE = "close"
    STOP = "stop"
    POSITION = "position"


class CoverCommand(WireEnum):
    OPEN = "open"
    CLOSE = "close"
    STOP = "stop"
    POSITION = "position"


class CoverDeviceClass(WireEnum):
    """Cover entity device classes."""

    # Window blinds or shutters which can be opened, closed or tilted.
    BLIND = "blind"
    # Window curtain or drapes which can be opened or closed.
    CURTAIN = "curtain"
    # Controllable garage door.
    GARAGE = "garage"
    # Sun shades which can be opened to protect an area from the sun.
    SHADE = "shade"


class CoverAttribute(WireEnum):
    STATE = "state"
    POSITION = "position"
    TILT_POSITION = "tilt_position"


# Light ----------------------------------------------------------------------

class LightFeature(WireEnum):
    ON_OFF = "on_off"
    TOGGLE = "toggle"
    DIM = "dim"
    COLOR = "color"
    COLOR_TEMPERATURE = "color_temperature"


class LightCommand(WireEnum):
    ON = "on"
    OFF = "off"
    TOGGLE = "toggle"


class LightOption(WireEnum):
    COLOR_TEMPERATURE_STEPS = "color_temperature_steps"


class LightAttribute(WireEnum):
    STATE = "state"
    HUE = "hue"
    SATURATION = "saturation"
    BRIGHTNESS = "brightness"
    COLOR_TEMPERATURE = "color_temperature"


# Media player ---------------------------------------------------------------

class MediaPlayerFeature(WireEnum):
    """Media player entity features."""

    ON_OFF = "on_off"
    TOGGLE = "toggle"
    VOLUME = "volume"
    VOLUME_UP_DOWN = "volume_up_down"
    MUTE_TOGGLE = "mute_toggle"
    MUTE = "mute"
    UNMUTE = "unmute"
    PLAY_PAUSE = "play_pause"
    STOP = "stop"
    NEXT = "next"
    PREVIOUS = "previous"
    FAST_FORWARD = "fast_forward"
    REWIND = "rewind"
    REPEAT = "repeat"
    SHUFFLE = "shuffle"
    SEEK = "seek"
    MEDIA_DURATION = "media_duration"
    MEDIA_POSITION = "media_position"
    MEDIA_TITLE = "media_title"
    MEDIA_ARTIST = "media_artist"
    MEDIA_ALBUM = "media_album"
    MEDIA_IMAGE_URL = "media_image_url"
    MEDIA_TYPE = "media_type"
    # directional pad navigation; the wire name is "dpad", not "d_pad"
    DPAD = "dpad"


class MediaPlayerCommand(WireEnum):
    ON = "on"
    OFF = "off"
    TOGGLE = "toggle"
    PLAY_PAUSE = "play_pause"
    STOP = "stop"
    PREVIOUS = "previous"
    NEXT = "next"
    FAST_FORWARD = "fast_forward"
    REWIND = "rewind"
    SEEK = "seek"
    VOLUME = "volume"
    VOLUME_UP = "volume_up"
    VOLUME_DOWN = "volume_down"
    MUTE_TOGGLE = "mute_toggle"
    MUTE = "mute"
    UNMUTE = "unmute"
    REPEAT = "repeat"
    SHUFFLE = "shuffle"


class MediaPlayerDeviceClass(WireEnum):
    # Audio-video receiver.
    RECEIVER = "receiver"
    # Smart speakers or stereo device.
    SPEAKER = "speaker"


class MediaPlayerOption(WireEnum):
    VOLUME_STEPS = "volume_steps"


class MediaPlayerAttribute(WireEnum):
    STATE = "state"
    VOLUME = "volume"
    MUTED = "muted"
    MEDIA_POSITION = "media_position"
    MEDIA_DURATION = "media_duration"
    MEDIA_TITLE = "media_title"
    MEDIA_ARTIST = "media_artist"
    MEDIA_ALBUM = "media_album"
    MEDIA_IMAGE_URL = "media_image_url"
    MEDIA_IMAGE_URL_SMALL = "media_image_url_small"
    MEDIA_IMAGE_URL_MEDIUM = "media_image_url_medium"
    MEDIA_IMAGE_URL_LARGE = "media_image_url_large"
    MEDIA_TYPE = "media_type"
    REPEAT = "repeat"
    SHUFFLE = "shuffle"
    SOURCE = "source"
    SOURCE_MODE = "source_mode"


# Sensor ---------------------------------------------------------------------

class SensorOption(WireEnum):
    """Sensor entity options."""

    # Label for a custom sensor if `device_class` is not specified or to override a default unit.
    CUSTOM_LABEL = "custom_label"
    # Unit label for a custom sensor if `device_class` is not specified or to override a default unit.
    CUSTOM_UNIT = "custom_unit"
    # The sensor's native unit of measurement for automatic conversion. Device class `temperature` only.
    NATIVE_UNIT = "native_unit"
    # Number of decimal places to show for numeric values.
    DECIMALS = "decimals"


class SensorDeviceClass(WireEnum):
    """Sensor entity device classes."""

    # Generic sensor with custom label and unit
    CUSTOM = "custom"
    # Battery charge in %
    BATTERY = "battery"
    # Electrical current in ampere
    CURRENT = "current"
    # Energy in kilowatt-hour
    ENERGY = "energy"
    # Humidity in %
    HUMIDITY = "humidity"
    # Power in watt or kilowatt
    POWER = "power"
    # Temperature with automatic °C, °F conversion; use `native_unit` if measured in °F.
    TEMPERATURE = "temperature"
    # Voltage in volt
    VOLTAGE = "voltage"


class SensorAttribute(WireEnum):
    STATE = "state"
    VALUE = "value"
    UNIT = "unit"


# Activity, macro, remote ----------------------------------------------------

class ActivityFeature(WireEnum):
    ON_OFF = "on_off"
    START = "start"


class ActivityCommand(WireEnum):
    ON = "on"
    OFF = "off"
    START = "start"


class MacroFeature(WireEnum):
    RUN = "run"


class MacroCommand(WireEnum):
    RUN = "run"


class RemoteFeature(WireEnum):
    ON_OFF = "on_off"
    SEND = "send"
    STOP_SEND = "stop_send"


class RemoteCommand(WireEnum):
    ON = "on"
    OFF = "off"
    SEND = "send"
    STOP_SEND = "stop_send"
