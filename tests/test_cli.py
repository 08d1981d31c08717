import io

from openpyxl import load_workbook
from rich.console import Console

from meraki_bssids import cli
from meraki_bssids.api import MerakiAPIError, MerakiClient
from meraki_bssids.config import Settings
from meraki_bssids.sdk import SdkClient


def quiet_console():
    return Console(file=io.StringIO(), width=120)


def feed(*answers):
    it = iter(answers)
    return lambda prompt: next(it)


def test_run_interactive_end_to_end(tmp_path, fake_client):
    settings = Settings(output_dir=str(tmp_path))
    code = cli.run(settings, console=quiet_console(), input_func=feed("2", "AP-US", "y"), client=fake_client)
    assert code == 0
    assert ("devices", "2", "AP-US") in fake_client.calls
    assert ("networks", "2") not in fake_client.calls

    files = list(tmp_path.glob("MerakiBSSIDs_*.xlsx"))
    assert len(files) == 1
    ws = load_workbook(files[0])["APs"]
    assert ws.max_row == 3
    assert ws["C2"].value == "AA-BB-CC-DD-EE-FF"


def test_run_non_interactive(tmp_path, fake_client):
    settings = Settings(output_dir=str(tmp_path), org_number=1, name_filter="", assume_yes=True,
                        static_commands=True)
    code = cli.run(settings, console=quiet_console(), input_func=feed(), client=fake_client)
    assert code == 0
    assert ("devices", "1", "") in fake_client.calls
    ws = load_workbook(next(tmp_path.glob("*.xlsx")))["APs"]
    assert ws["H2"].value.startswith("set-CsOnlineLisWirelessAccessPoint")


def test_run_cancel_after_preview(tmp_path, fake_client):
    settings = Settings(output_dir=str(tmp_path), org_number=2, name_filter="")
    assert cli.run(settings, console=quiet_console(), input_func=feed("n"), client=fake_client) == 0
    assert not list(tmp_path.glob("*.xlsx"))
    assert not [c for c in fake_client.calls if c[0] == "status"]


def test_run_no_matching_devices(tmp_path, fake_client):
    settings = Settings(output_dir=str(tmp_path), org_number=1, name_filter="nothing-matches")
    assert cli.run(settings, console=quiet_console(), input_func=feed(), client=fake_client) == 0
    assert not list(tmp_path.glob("*.xlsx"))


def test_run_no_organizations(tmp_path):
    from .conftest import FakeClient

    settings = Settings(output_dir=str(tmp_path))
    assert cli.run(settings, console=quiet_console(), input_func=feed(), client=FakeClient()) == 1


def test_make_client_selects_backend(monkeypatch):
    monkeypatch.setattr("meraki_bssids.sdk.meraki.DashboardAPI", lambda **kwargs: object())
    assert isinstance(cli.make_client(Settings(api_key="a" * 40)), MerakiClient)
    assert isinstance(cli.make_client(Settings(api_key="a" * 40, use_sdk=True)), SdkClient)


def test_main_returns_1_on_api_error(monkeypatch, tmp_path, capsys):
    def boom(settings):
        raise MerakiAPIError(401, "Invalid API key", None, "https://api.meraki.com/api/v1/organizations")

    monkeypatch.setattr(cli, "run", boom)
    code = cli.main(["--api-key", "a" * 40, "--log-dir", str(tmp_path), "--output-dir", str(tmp_path)])
    assert code == 1
    assert "Invalid API key" in capsys.readouterr().err


def test_main_returns_130_on_interrupt(monkeypatch, tmp_path):
    def interrupted(settings):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "run", interrupted)
    assert cli.main(["--log-dir", str(tmp_path), "--output-dir", str(tmp_path)]) == 130


def test_main_success(monkeypatch, tmp_path):
    monkeypatch.setattr(cli, "run", lambda settings: 0)
    assert cli.main(["--log-dir", str(tmp_path), "--output-dir", str(tmp_path)]) == 0


def test_main_creates_missing_log_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(cli, "run", lambda settings: 0)
    log_dir = tmp_path / "logs" / "nested"
    assert cli.main(["--log-dir", str(log_dir), "--output-dir", str(tmp_path)]) == 0
    assert log_dir.is_dir()


def test_main_unusable_log_dir_exits_1(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(cli, "run", lambda settings: 0)
    blocker = tmp_path / "file"
    blocker.write_text("x")
    assert cli.main(["--log-dir", str(blocker / "logs"), "--output-dir", str(tmp_path)]) == 1
    assert "Cannot write log" in capsys.readouterr().err
