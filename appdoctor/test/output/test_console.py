"""Tests for appdoctor.output.console module."""

from __future__ import annotations

from appdoctor.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.WARNING) == "warning"
        assert str(Style.ERROR) == "error"
        assert str(Style.DEFAULT) == "default"

    def test_all_styles_exist(self) -> None:
        expected = {"DEFAULT", "SUCCESS", "WARNING", "ERROR", "DIM", "HEADER"}
        assert {s.name for s in Style} == expected


class TestMockConsole:
    """Test MockConsole for testing purposes."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT)]

    def test_print_with_style(self) -> None:
        console = MockConsole()
        console.print("[✓] Xcode", Style.SUCCESS)
        assert console.outputs[0].style == Style.SUCCESS

    def test_error(self) -> None:
        console = MockConsole()
        console.error("something failed")
        assert console.outputs[0].message == "error: something failed"
        assert console.outputs[0].style == Style.ERROR

    def test_header(self) -> None:
        console = MockConsole()
        console.header("iOS toolchain")
        assert console.outputs[0] == OutputRecord("iOS toolchain", Style.HEADER)

    def test_newline(self) -> None:
        console = MockConsole()
        console.newline()
        assert console.messages == [""]

    def test_helpers(self) -> None:
        console = MockConsole()
        console.print("CocoaPods version 1.11.3")
        console.print("Homebrew not installed", Style.ERROR)
        console.print("Xcode end user license agreement not signed", Style.ERROR)

        assert console.text.splitlines()[0] == "CocoaPods version 1.11.3"
        assert len(console.find("not")) == 2
        assert console.count(Style.ERROR) == 2
        assert console.count(Style.SUCCESS) == 0


class TestProtocolConformance:
    def test_mock_console_is_console(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("ok")

    def test_rich_console_is_console(self) -> None:
        console: ConsoleProtocol = RichConsole()
        assert callable(console.print)
