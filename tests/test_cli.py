"""End-to-end tests for the command line."""

from __future__ import annotations

import importlib

import pytest
from typer.testing import CliRunner

from ugreen_leds import cli
from ugreen_leds.const import LedType, OpMode
from ugreen_leds.controller.base import LedStatus

runner = CliRunner()


@pytest.fixture
def installed_controller(monkeypatch, controller):
    """Make the fake controller the only installed transport."""
    monkeypatch.setattr(
        cli, "load_controller_factories", lambda: [lambda: controller]
    )
    return controller


class TestRun:
    """Test run() exit codes, output and controller use."""

    def test_no_tokens_prints_usage(self, capsys):
        """Empty input shows usage and succeeds without a controller."""

        def factory():
            raise AssertionError("controller must not be opened")

        assert cli.run([], [factory]) == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Usage: ugreen_leds_cli" in captured.err

    def test_names_only_report_status(self, make_controller, capsys):
        """Without flags each selected LED prints one status line."""
        controller = make_controller(
            statuses={
                LedType.POWER: LedStatus(
                    is_available=True,
                    op_mode=OpMode.BREATH,
                    brightness=200,
                    color_r=10,
                    color_g=20,
                    color_b=30,
                    t_on=100,
                    t_off=900,
                ),
                LedType.DISK4: LedStatus(is_available=False),
            }
        )
        assert cli.run(["power", "disk4"], [lambda: controller]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "power: status = breath, brightness = 200, color = RGB(10, 20, 30), "
            "blink_on = 100 ms, blink_off = 900 ms",
            "disk4: unavailable or non-existent",
        ]
        assert controller.write_calls == []

    def test_brightness_out_of_range(self, controller, capsys):
        """A range error exits non-zero before any controller call."""
        opened = []
        code = cli.run(
            ["power", "-brightness", "300"], [lambda: opened.append(1) or controller]
        )
        assert code != 0
        assert opened == []
        assert controller.calls == []
        err = capsys.readouterr().err
        assert "300 is not in [0, 255]" in err
        assert "Usage:" in err

    def test_unknown_name(self, controller, capsys):
        """An unknown LED name is rejected with usage text."""
        code = cli.run(["power", "fan", "-on"], [lambda: controller])
        assert code == 2
        assert controller.calls == []
        err = capsys.readouterr().err
        assert "Err: unknown LED name fan" in err
        assert "Usage:" in err

    def test_unknown_parameter(self, controller, capsys):
        """An unknown flag is rejected even after valid flags."""
        code = cli.run(["power", "-on", "-dim"], [lambda: controller])
        assert code == 2
        assert controller.calls == []
        assert "unknown parameter -dim" in capsys.readouterr().err

    def test_applies_in_nested_order(self, controller):
        """Operations run for each target in turn."""
        code = cli.run(
            ["disk1", "power", "-color", "1", "2", "3", "-blink", "100", "200"],
            [lambda: controller],
        )
        assert code == 0
        assert controller.write_calls == [
            ("set_rgb", LedType.DISK1, 1, 2, 3),
            ("set_blink", LedType.DISK1, 100, 200),
            ("set_rgb", LedType.POWER, 1, 2, 3),
            ("set_blink", LedType.POWER, 100, 200),
        ]

    def test_failure_keeps_earlier_changes(self, make_controller, capsys):
        """A failed change exits non-zero and stops the remaining work."""
        controller = make_controller(failures={("set_onoff", LedType.POWER): 1})
        code = cli.run(
            ["disk1", "power", "-on", "-brightness", "9"], [lambda: controller]
        )
        assert code == 1
        assert controller.write_calls == [
            ("set_onoff", LedType.DISK1, True),
            ("set_brightness", LedType.DISK1, 9),
            ("set_onoff", LedType.POWER, True),
        ]
        assert "failed to change status!" in capsys.readouterr().err

    def test_os_error_during_dispatch(self, make_controller, capsys):
        """A transport error is reported as a failed change."""
        controller = make_controller()

        def broken(led, on):
            raise OSError("bus error")

        controller.set_onoff = broken
        assert cli.run(["power", "-off"], [lambda: controller]) == 1
        assert "failed to change status!" in capsys.readouterr().err

    def test_all_with_status_flag(self, make_controller, capsys):
        """'all' plus -status prints only the available LEDs."""
        controller = make_controller(
            statuses={led: LedStatus(is_available=False) for led in LedType}
        )
        controller.statuses[LedType.NETDEV] = LedStatus(
            is_available=True, op_mode=OpMode.ON, brightness=1
        )
        assert cli.run(["all", "-status"], [lambda: controller]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "netdev: status = on, brightness = 1, color = RGB(0, 0, 0)"
        ]

    def test_no_controller(self, capsys):
        """Failing to start any transport exits non-zero with a hint."""
        assert cli.run(["power"], []) == 1
        err = capsys.readouterr().err
        assert "fail to open the LED controller" in err
        assert "root permission" in err

    def test_huge_operand_is_range_error(self, controller, capsys):
        """An absurdly long operand gets the range diagnostic."""
        code = cli.run(["power", "-brightness", "9" * 5000], [lambda: controller])
        assert code == 2
        assert controller.calls == []
        assert "is not in [0, 255]" in capsys.readouterr().err

    @pytest.mark.parametrize("tokens", [["all", "-on"], ["power"]])
    def test_os_error_reading_status(self, make_controller, capsys, tokens):
        """Transport errors while reading status exit 1 with a diagnostic."""
        controller = make_controller()

        def broken(led):
            raise OSError("bus error")

        controller.get_status = broken
        assert cli.run(tokens, [lambda: controller]) == 1
        assert controller.write_calls == []
        assert "Err: failed to read LED status!" in capsys.readouterr().err

    def test_usage_lists_catalogue_names(self, capsys):
        """The usage text names every LED and the pseudo-name."""
        cli.run([], [])
        err = capsys.readouterr().err
        assert "disk1, disk2, disk3, disk4, disk5, disk6, disk7, disk8" in err
        assert "netdev, power, all" in err

    def test_controller_name_on_stderr(self, controller, capsys):
        """The chosen transport is announced on stderr, not stdout."""
        assert cli.run(["power", "-shot"], [lambda: controller]) == 0
        captured = capsys.readouterr()
        assert "Using fake controller." in captured.err
        assert captured.out == ""


class TestApp:
    """Test the typer application wiring."""

    def test_no_arguments(self, installed_controller):
        """Invoking without arguments prints usage and exits 0."""
        result = runner.invoke(cli.app, [])
        assert result.exit_code == 0
        assert "Usage: ugreen_leds_cli" in result.output
        assert installed_controller.calls == []

    def test_single_dash_flags_pass_through(self, installed_controller):
        """Single-dash flags and operands reach the parser intact."""
        result = runner.invoke(
            cli.app, ["netdev", "-on", "-oneshot", "10", "20", "-shot"]
        )
        assert result.exit_code == 0, result.output
        assert installed_controller.write_calls == [
            ("set_onoff", LedType.NETDEV, True),
            ("set_onoff", LedType.NETDEV, True),
            ("set_oneshot", LedType.NETDEV, 10, 20),
            ("shot", LedType.NETDEV),
        ]

    def test_negative_operand_rejected(self, installed_controller):
        """A negative operand is a range error, not an option."""
        result = runner.invoke(cli.app, ["power", "-brightness", "-1"])
        assert result.exit_code == 2
        assert "-1 is not in [0, 255]" in result.output
        assert installed_controller.calls == []

    def test_double_dash_is_dropped(self, installed_controller):
        """A lone '--' is consumed by the option parser, as documented."""
        result = runner.invoke(cli.app, ["power", "--", "-on"])
        assert result.exit_code == 0, result.output
        assert installed_controller.write_calls == [
            ("set_onoff", LedType.POWER, True)
        ]


def test_module_import_does_not_run_cli():
    """Importing the __main__ module leaves the CLI idle."""
    module = importlib.import_module("ugreen_leds.__main__")
    assert module.app is cli.app
