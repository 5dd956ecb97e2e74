import io
import sys
import json
import pytest
from voxlife.messaging.bus import MessageBus, MessageStore
from voxlife.messaging.renderer import CliRenderer, JsonRenderer


@pytest.fixture
def msg_store():
    store = MessageStore()
    # Manually add a message for testing
    store._messages["test.hello"] = "Hello, {name}!"
    return store


def test_message_store_loads_defaults():
    store = MessageStore(locale="en")
    msg = store.get("generation.adopted", generation=3, alive_count=10, born=4, died=1)
    assert "Generation 3" in msg
    assert "+4" in msg


def test_message_store_reports_unknown_and_malformed_messages():
    store = MessageStore()
    assert store.get("no.such.message") == "<no.such.message>"
    assert "missing key" in store.get("generation.adopted")


def test_message_bus_renderer_delegation():
    store = MessageStore()
    store._messages["test.msg"] = "Value: {val}"
    bus = MessageBus(store)

    received = []

    class MockRenderer:
        def render(self, msg_id, level, **kwargs):
            received.append((msg_id, level, kwargs))

    bus.set_renderer(MockRenderer())
    bus.info("test.msg", val=42)
    bus.debug("test.msg", val=1)

    assert received == [("test.msg", "info", {"val": 42}), ("test.msg", "debug", {"val": 1})]


def test_cli_renderer(msg_store):
    output = io.StringIO()
    renderer = CliRenderer(store=msg_store, stream=output)

    renderer.render("test.hello", "info", name="World")

    assert "Hello, World!" in output.getvalue()


def test_cli_renderer_formats_extents():
    output = io.StringIO()
    renderer = CliRenderer(store=MessageStore(), stream=output)

    renderer.render("run.started", "info", extents=(4, 5, 6), lower=2, upper=3)

    assert "4x5x6" in output.getvalue()


def test_json_renderer_structure_and_content():
    output = io.StringIO()
    renderer = JsonRenderer(stream=output)

    renderer.render("generation.adopted", "info", generation=7, alive_count=12)

    data = json.loads(output.getvalue())
    assert "timestamp" in data
    assert data["level"] == "INFO"
    assert data["event_id"] == "generation.adopted"
    assert data["data"] == {"generation": 7, "alive_count": 12}


def test_json_renderer_log_level_filtering():
    output = io.StringIO()
    renderer = JsonRenderer(stream=output, min_level="WARNING")

    renderer.render("transition.failed", "error", request_id=3)
    renderer.render("transition.requested", "debug", request_id=4)

    logs = output.getvalue().strip()
    assert '"level": "ERROR"' in logs
    assert '"level": "DEBUG"' not in logs
    assert len(logs.splitlines()) == 1


def test_renderers_write_to_the_current_stderr(monkeypatch, msg_store):
    cli = CliRenderer(store=msg_store)
    structured = JsonRenderer()

    # Both were built before stderr was swapped.
    replacement = io.StringIO()
    monkeypatch.setattr(sys, "stderr", replacement)
    cli.render("test.hello", "info", name="again")
    structured.render("generation.adopted", "info", generation=1)

    lines = replacement.getvalue().splitlines()
    assert lines[0] == "Hello, again!"
    assert json.loads(lines[1])["event_id"] == "generation.adopted"
