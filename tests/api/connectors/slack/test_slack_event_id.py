import hashlib
import json

from api.connectors.slack.event_id import compute_inbound_event_id


def test_compute_inbound_event_id_uses_event_id() -> None:
    payload = {"type": "event_callback", "event_id": "Ev0PV52K21", "event": {"type": "app_mention"}}
    raw = json.dumps(payload).encode("utf-8")

    assert compute_inbound_event_id(payload, raw) == "Ev0PV52K21"


def test_compute_inbound_event_id_uses_trigger_id() -> None:
    payload = {"type": "shortcut", "trigger_id": "944799105734.773906753841.38b5894552bdd4a780554ee59d1f3bbb"}

    assert compute_inbound_event_id(payload, b"payload=...") == payload["trigger_id"]


def test_compute_inbound_event_id_hashes_raw_body() -> None:
    raw = b"command=%2Fhello&text=oi"

    expected = f"payload:{hashlib.sha256(raw).hexdigest()}"

    assert compute_inbound_event_id({"command": "/hello"}, raw) == expected


def test_compute_inbound_event_id_fallback_hash() -> None:
    payload = {"ssl_check": "1"}

    digest = hashlib.sha256(json.dumps(payload, sort_keys=True).encode("utf-8")).hexdigest()

    assert compute_inbound_event_id(payload, b"") == f"payload:{digest}"
