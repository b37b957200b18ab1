from __future__ import annotations

import pytest

from ip_notifier.main import IPNotifierApp, create_argument_parser, main
from ip_notifier.notifiers.base_notifier import BaseNotifier
from ip_notifier.utils.error_handler import NotifyError

from conftest import FakeClock, ipv4


CONFIG = """
gotify:
  server_url: http://gotify.lan
  token: t
discovery:
  max_duration: 10
  retry_interval: 5
"""


class RecordingNotifier(BaseNotifier):
    def __init__(self, error=None):
        super().__init__()
        self.sent = []
        self.error = error

    def send(self, title, message):
        self.sent.append((title, message))
        if self.error:
            raise self.error


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "notifier_config.yml"
    path.write_text(CONFIG, encoding="utf-8")
    return path


def _app(table, notifier, clock=None):
    gotify_configs = []

    def factory(gotify):
        gotify_configs.append(gotify)
        return notifier

    app = IPNotifierApp(
        clock=clock or FakeClock(),
        interface_source=lambda: table,
        hostname_source=lambda: "host1",
        notifier_factory=factory,
    )
    return app, gotify_configs


def _args(*argv):
    return create_argument_parser().parse_args(list(argv))


def test_found_addresses_are_notified(config_path):
    notifier = RecordingNotifier()
    app, gotify_configs = _app({"eth0": [ipv4("10.0.0.5"), ipv4("192.168.1.20")]}, notifier)

    exit_code = app.run(_args("--config", str(config_path)))

    assert exit_code == 0
    assert notifier.sent == [("[host1] IP地址通知", "主机：host1\n发现以下IP地址：\n- 192.168.1.20\n")]
    assert gotify_configs[0].server_url == "http://gotify.lan"


def test_discovery_failure_is_still_notified_once(config_path):
    notifier = RecordingNotifier()
    clock = FakeClock()
    app, _ = _app({"lo": [ipv4("127.0.0.1")]}, notifier, clock=clock)

    exit_code = app.run(_args("--config", str(config_path)))

    assert exit_code == 0
    assert len(notifier.sent) == 1
    title, message = notifier.sent[0]
    assert title == "[host1] IP地址获取失败"
    assert "192.168" in message
    assert clock.sleeps == [5, 5]


def test_notify_failure_exits_non_zero(config_path):
    notifier = RecordingNotifier(error=NotifyError("status code: 500", status_code=500))
    app, _ = _app({"eth0": [ipv4("192.168.1.20")]}, notifier)

    exit_code = app.run(_args("--config", str(config_path)))

    assert exit_code == 1
    assert len(notifier.sent) == 1


def test_configuration_error_sends_nothing(tmp_path):
    notifier = RecordingNotifier()
    app, _ = _app({"eth0": [ipv4("192.168.1.20")]}, notifier)

    exit_code = app.run(_args("--config", str(tmp_path / "missing.yml")))

    assert exit_code == 1
    assert notifier.sent == []


def test_unknown_host_placeholder_in_title(config_path):
    notifier = RecordingNotifier()

    def broken_hostname():
        raise OSError("no hostname")

    app = IPNotifierApp(
        clock=FakeClock(),
        interface_source=lambda: {"eth0": [ipv4("192.168.1.20")]},
        hostname_source=broken_hostname,
        notifier_factory=lambda gotify: notifier,
    )

    assert app.run(_args("--config", str(config_path))) == 0
    assert notifier.sent[0][0] == "[未知主机] IP地址通知"


def test_init_config_writes_template(tmp_path):
    path = tmp_path / "new.yml"
    notifier = RecordingNotifier()
    app, _ = _app({}, notifier)

    assert app.run(_args("--init-config", "--config", str(path))) == 0
    assert path.exists()
    assert notifier.sent == []


def test_main_returns_exit_code_for_missing_config(tmp_path):
    assert main(["--config", str(tmp_path / "missing.yml")]) == 1


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        create_argument_parser().parse_args(["--version"])

    assert exc_info.value.code == 0
    assert "IP Notifier" in capsys.readouterr().out
