import pytest

from cmadness.webserver.config import ServerConfig, VirtualHost, load_config


def test_reads_known_keys(tmp_path):
    conf = tmp_path / "server.conf"
    conf.write_text(
        "listen_port = 8080\n"
        "listen_ip = 127.0.0.1\n"
        "logfile = /var/log/web.log\n"
        "error_page = /srv/error.html\n"
        "unknown = 5\n"
    )
    config = load_config(str(conf))
    assert config.listen_port == 8080
    assert config.listen_ip == "127.0.0.1"
    assert config.logfile == "/var/log/web.log"
    assert config.error_page == "/srv/error.html"


def test_spaces_around_equals_are_optional(tmp_path):
    conf = tmp_path / "server.conf"
    conf.write_text("listen_port=9000\n")
    assert load_config(str(conf)).listen_port == 9000


def test_long_values_are_truncated(tmp_path):
    conf = tmp_path / "server.conf"
    conf.write_text("listen_ip = " + "a" * 100 + "\nlogfile = " + "b" * 400 + "\n")
    config = load_config(str(conf))
    assert config.listen_ip == "a" * 63
    assert config.logfile == "b" * 255


def test_invalid_port_is_ignored(tmp_path):
    conf = tmp_path / "server.conf"
    conf.write_text("listen_port = abc\n")
    assert load_config(str(conf)).listen_port == ServerConfig().listen_port


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_config(str(tmp_path / "absent.conf"))


def test_defaults_are_independent():
    first = ServerConfig()
    second = ServerConfig()
    first.allow_ips.append("10.0.0.1")
    first.vhosts.append(VirtualHost("example.com"))
    assert second.allow_ips == []
    assert second.vhosts == []