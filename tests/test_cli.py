"""
命令行入口测试模块。
"""

from crypton.cli import main
from crypton.config import ALPHANUMERIC_ALPHABET


def test_selftest(capsys):
    assert main(['selftest']) == 0
    assert "0xA5DC00007F6B" in capsys.readouterr().out


def test_password(capsys):
    assert main(['password', '--length', '10', '--count', '2']) == 0
    lines = capsys.readouterr().out.split()
    assert len(lines) == 2
    for line in lines:
        assert len(line) == 10
        assert set(line) <= set(ALPHANUMERIC_ALPHABET)


def test_demo(capsys):
    assert main(['demo']) == 0
    assert "c4453830847eb995" in capsys.readouterr().out


def test_no_command(capsys):
    assert main([]) == 0


def test_bad_checksum_config(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("generator:\n  reference_checksum: 1\n", encoding="utf-8")
    assert main(['--config', str(path), 'password']) == 1
    assert "校验和" in capsys.readouterr().err


def test_selftest_reports_buffer_quality(capsys):
    assert main(['selftest']) == 0
    out = capsys.readouterr().out
    assert "单比特频率" in out
    assert "信息熵" in out
    assert "✗" not in out


def test_missing_entropy_device(tmp_path, capsys):
    path = tmp_path / "dev.yaml"
    path.write_text("generator:\n  entropy_device: /nonexistent/dev\n", encoding="utf-8")
    assert main(['--config', str(path), 'password']) == 1
    assert "熵源" in capsys.readouterr().err


def test_unknown_config_field(tmp_path, capsys):
    path = tmp_path / "bogus.yaml"
    path.write_text("generator:\n  bogus: 1\n", encoding="utf-8")
    assert main(['--config', str(path), 'password']) == 1
    assert "bogus" in capsys.readouterr().err


def test_malformed_yaml(tmp_path, capsys):
    path = tmp_path / "broken.yaml"
    path.write_text("generator: [unclosed\n", encoding="utf-8")
    assert main(['--config', str(path), 'selftest']) == 1
    assert "配置错误" in capsys.readouterr().err


def test_missing_config_file(tmp_path, capsys):
    assert main(['--config', str(tmp_path / "absent.yaml"), 'demo']) == 1
    assert "配置错误" in capsys.readouterr().err
