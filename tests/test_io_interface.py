import asyncio

import pytest
from solojack.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    LoggingIOInterface,
    TestIOInterface,
)


def test_dummy_io_interface_methods():
    interface = DummyIOInterface()

    assert interface.output("Test") is None
    assert interface.input("prompt") == ""
    assert asyncio.run(interface.output_async("Test")) is None


def test_console_io_interface_methods(mocker, capsys):
    interface = ConsoleIOInterface()

    mocker.patch("builtins.input", side_effect=["test_input"])

    interface.output("Test message")
    assert interface.input("Enter something: ") == "test_input"

    captured = capsys.readouterr()
    assert "Test message" in captured.out


def test_console_io_interface_clear(capsys):
    ConsoleIOInterface().clear()
    assert capsys.readouterr().out == "\033[H\033[2J"


def test_test_io_interface_methods():
    interface = TestIOInterface(["first"])

    interface.output("Test")
    assert interface.sent_messages == ["Test"]

    interface.add_input("second", "third")
    assert interface.input("a") == "first"
    assert interface.input("b") == "second"
    assert interface.input("c") == "third"
    assert interface.prompts == ["a", "b", "c"]

    with pytest.raises(EOFError):
        interface.input("d")


def test_test_io_interface_transcript():
    interface = TestIOInterface()
    asyncio.run(interface.output_async("one"))
    interface.output("two")
    assert interface.transcript == "one\ntwo"


def test_logging_io_interface_writes_to_file(tmp_path):
    log_file = tmp_path / "trace.log"
    interface = LoggingIOInterface(str(log_file))

    interface.output("sync line")
    asyncio.run(interface.output_async("async line"))
    assert interface.input("Draw?") == ""

    assert log_file.read_text(encoding="utf-8").splitlines() == [
        "sync line",
        "async line",
        "[INPUT PROMPT] Draw?",
    ]
