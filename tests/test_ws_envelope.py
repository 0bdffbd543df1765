import json
from dataclasses import dataclass
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from ucapi_model.schemas.intg import DeviceState, IntegrationDriverUpdate
from ucapi_model.schemas.intg_ws import DeviceStateMsgData
from ucapi_model.schemas.ws import (
    EventCategory,
    PayloadSerializationError,
    WsMessage,
    WsRequest,
    WsResponse,
    WsResultMsgData,
)


@dataclass
class Point:
    x: int
    y: int


def test_simple_request_has_no_msg_data():
    req = WsMessage.simple_request(123, "test_request")
    assert req.kind == "req"
    assert req.id == 123
    assert req.to_dict() == {"kind": "req", "id": 123, "msg": "test_request"}
    assert "msg_data" not in req.to_json()


def test_request_with_model_payload():
    req = WsMessage.request(123, "test_request", WsResultMsgData(code="42", message="testing"))
    assert req.to_dict() == {
        "kind": "req",
        "id": 123,
        "msg": "test_request",
        "msg_data": {"code": "42", "message": "testing"},
    }


def test_request_payload_omits_unset_fields():
    req = WsRequest.create(5, "device_state", DeviceStateMsgData(state=DeviceState.CONNECTED))
    assert req.msg_data == {"state": "CONNECTED"}


def test_request_with_dataclass_payload():
    req = WsRequest.create(7, "move", Point(x=1, y=2))
    assert req.kind == "req"
    assert req.msg_data == {"x": 1, "y": 2}


def test_request_without_payload_omits_msg_data():
    req = WsRequest.create(8, "get_driver_version")
    assert req.to_dict() == {"kind": "req", "id": 8, "msg": "get_driver_version"}


def test_request_unserializable_payload_raises():
    with pytest.raises(PayloadSerializationError):
        WsRequest.create(1, "test", object())
    with pytest.raises(PayloadSerializationError):
        WsMessage.request(1, "test", {"value": object()})


def test_response_success():
    resp = WsResponse.create(123, "test_resp", {"foo": "bar", "n": [1, 2]})
    assert resp.to_dict() == {
        "kind": "resp",
        "req_id": 123,
        "msg": "test_resp",
        "code": 200,
        "msg_data": {"foo": "bar", "n": [1, 2]},
    }
    assert WsMessage.response(123, "test_resp", {"foo": "bar", "n": [1, 2]}).to_dict() == resp.to_dict()


def test_response_unserializable_payload_masks_error():
    expected = {
        "kind": "resp",
        "req_id": 9,
        "msg": "result",
        "code": 500,
        "msg_data": {"code": "INTERNAL_ERROR", "message": "Error serializing result"},
    }
    assert WsResponse.create(9, "entity_states", object()).to_dict() == expected
    assert WsMessage.response(9, "entity_states", [object()]).to_dict() == expected


def test_response_json():
    resp = WsMessage.response_json(123, "test_resp", {"foo": "bar"})
    assert resp.code == 200
    assert resp.msg_data == {"foo": "bar"}


def test_error_response():
    expected = {
        "kind": "resp",
        "req_id": 123,
        "msg": "result",
        "code": 400,
        "msg_data": {"code": "ERROR", "message": "foobar"},
    }
    data = WsResultMsgData(code="ERROR", message="foobar")
    assert WsResponse.error(123, 400, data).to_dict() == expected
    assert WsMessage.error(123, 400, data).to_dict() == expected


def test_error_response_code_is_not_checked_against_http():
    resp = WsResponse.error(1, 999, WsResultMsgData(code="CUSTOM", message="custom"))
    assert resp.code == 999


def test_missing_field_exact_json():
    resp = WsResponse.missing_field(123, "foobar")
    assert resp.to_json() == (
        '{"kind":"resp","req_id":123,"msg":"result","code":400,'
        '"msg_data":{"code":"BAD_REQUEST","message":"Missing field: foobar"}}'
    )


def test_not_found_and_result():
    nf = WsResponse.not_found(123, "custom error text")
    assert nf.code == 404
    assert nf.msg == "result"
    assert nf.msg_data == {"code": "NOT_FOUND", "message": "custom error text"}

    res = WsResponse.result(123, 201)
    assert res.to_dict() == {"kind": "resp", "req_id": 123, "msg": "result", "code": 201}


def test_validation_error_response():
    with pytest.raises(ValidationError) as exc:
        IntegrationDriverUpdate(driver_id="bad id!", developer={"email": "not-an-email"})
    resp = WsResponse.validation_error(77, exc.value)
    assert resp.req_id == 77
    assert resp.code == 400
    assert resp.msg_data["code"] == "BAD_REQUEST"
    assert "driver_id" in resp.msg_data["message"]
    assert "developer.email" in resp.msg_data["message"]


def test_event_sets_timestamp_at_construction():
    before = datetime.now(timezone.utc)
    event = WsMessage.event("test_event", EventCategory.DEVICE, {"foo": "bar"})
    after = datetime.now(timezone.utc)
    assert before <= event.ts <= after

    data = event.to_dict()
    assert data["kind"] == "event"
    assert data["cat"] == "DEVICE"
    assert data["msg_data"] == {"foo": "bar"}
    assert WsMessage.parse(event.to_json()).ts == event.ts


def test_event_without_category():
    event = WsMessage.event("entity_change", None, {"entity_id": "light-1"})
    assert "cat" not in event.to_dict()


def test_request_to_message_conversion():
    request = WsRequest.create(123, "test_request", WsResultMsgData(code="OK", message="testing"))
    msg = WsMessage.from_request(request)
    assert msg.to_dict() == {
        "kind": "req",
        "id": 123,
        "msg": "test_request",
        "msg_data": {"code": "OK", "message": "testing"},
    }
    assert request.to_message() == msg


def test_response_to_message_conversion():
    msg = WsResponse.result(123, 201).to_message()
    assert msg.to_dict() == {"kind": "resp", "req_id": 123, "msg": "result", "code": 201}
    assert msg.id is None
    assert msg.extra == {}


def test_round_trip_into_lenient_message():
    for envelope in (
        WsRequest.create(1, "entity_command", {"entity_id": "light-1", "cmd_id": "on"}),
        WsRequest.create(2, "get_entity_states"),
        WsResponse.create(1, "entity_states", [{"entity_id": "light-1"}]),
        WsResponse.result(2, 200),
    ):
        parsed = WsMessage.parse(envelope.to_json())
        assert parsed.to_dict() == envelope.to_dict()
        assert "null" not in parsed.to_json()


def test_parse_captures_extra_fields():
    raw = {
        "kind": "req",
        "id": 123,
        "msg": "test",
        "msg_data": {"foo": "bar"},
        "bar": "foo",
    }
    msg = WsMessage.parse(json.dumps(raw))
    assert msg.kind == "req"
    assert msg.id == 123
    assert msg.req_id is None
    assert msg.code is None
    assert msg.cat is None
    assert msg.ts is None
    assert msg.msg_data == {"foo": "bar"}
    assert msg.extra == {"bar": "foo"}
    # extra fields are written back at the top level, without duplicates
    assert msg.to_dict() == raw


def test_parse_lenient_without_kind():
    msg = WsMessage.parse({"msg": "ping"})
    assert msg.kind is None
    assert msg.to_dict() == {"msg": "ping"}


def test_parse_event_category():
    msg = WsMessage.parse(b'{"kind": "event", "msg": "x", "cat": "ENTITY", "ts": "2024-05-01T12:00:00Z"}')
    assert msg.cat is EventCategory.ENTITY
    assert msg.ts == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_envelopes_are_immutable():
    msg = WsMessage.simple_request(1, "test")
    with pytest.raises(ValidationError):
        msg.msg = "other"
    resp = WsResponse.result(1, 200)
    with pytest.raises(ValidationError):
        resp.code = 500


def test_strict_request_rejects_other_kinds():
    with pytest.raises(ValidationError):
        WsRequest.model_validate({"kind": "resp", "id": 1, "msg": "test"})
    with pytest.raises(ValidationError):
        WsRequest.model_validate({"kind": "req", "msg": "test"})
    with pytest.raises(ValidationError):
        WsResponse.model_validate({"kind": "resp", "req_id": 1, "msg": "result"})


def test_correlation_ids_are_u32():
    with pytest.raises(ValidationError):
        WsMessage.simple_request(-1, "test")
    with pytest.raises(ValidationError):
        WsRequest.create(2**32, "test")
    assert WsMessage.simple_request(2**32 - 1, "test").id == 2**32 - 1


@pytest.mark.parametrize("payload", [float("nan"), {"volume": float("inf")}, [1.0, float("-inf")]])
def test_response_non_finite_float_masks_error(payload):
    resp = WsResponse.create(1, "entity_states", payload)
    assert resp.to_dict() == {
        "kind": "resp",
        "req_id": 1,
        "msg": "result",
        "code": 500,
        "msg_data": {"code": "INTERNAL_ERROR", "message": "Error serializing result"},
    }
    assert WsMessage.response(1, "entity_states", payload).code == 500


@pytest.mark.parametrize("payload", [float("nan"), {"position": {"value": float("nan")}}])
def test_request_non_finite_float_raises(payload):
    with pytest.raises(PayloadSerializationError):
        WsRequest.create(1, "entity_command", payload)
    with pytest.raises(PayloadSerializationError):
        WsMessage.request(1, "entity_command", payload)


def test_event_unserializable_payload_raises():
    with pytest.raises(PayloadSerializationError):
        WsMessage.event("entity_change", EventCategory.ENTITY, object())
    with pytest.raises(PayloadSerializationError):
        WsMessage.event("entity_change", EventCategory.ENTITY, {"attributes": {"volume": float("nan")}})


def test_event_without_payload_omits_msg_data():
    event = WsMessage.event("abort_driver_setup", EventCategory.DEVICE, None)
    data = event.to_dict()
    assert "msg_data" not in data
    assert data["kind"] == "event"
    assert data["msg"] == "abort_driver_setup"
