"""Schema package: WebSocket envelopes, entity enums and API payload models.

All models serialize to the JSON wire format: ``snake_case`` property names,
absent optional properties are omitted and enums use their wire strings.
"""

__all__ = ["base", "core", "entity", "intg", "intg_ws", "model", "settings", "ws"]
