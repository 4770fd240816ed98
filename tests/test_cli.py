import json

import msgpack

from msgunpack.cli import main


def _write(tmp_path, data: bytes):
    p = tmp_path / "in.msgpack"
    p.write_bytes(data)
    return str(p)


def test_info_prints_first_value(tmp_path, capsys):
    path = _write(tmp_path, msgpack.packb({"a": [1, -2, None]}) + b"\x01")
    assert main(["info", path]) == 0
    assert json.loads(capsys.readouterr().out) == {"a": [1, -2, None]}

def test_info_all(tmp_path, capsys):
    path = _write(tmp_path, msgpack.packb(1) + msgpack.packb("x"))
    assert main(["info", path, "--all"]) == 0
    assert json.loads(capsys.readouterr().out) == [1, "x"]

def test_info_summary(tmp_path, capsys):
    path = _write(tmp_path, b"\x01\x02\x03")
    assert main(["info", path, "--summary"]) == 0
    assert capsys.readouterr().out.strip() == "values=3, bytes=3"

def test_info_binary_and_extended(tmp_path, capsys):
    path = _write(tmp_path, msgpack.packb([b"\xff", msgpack.ExtType(5, b"\x7f")]))
    assert main(["info", path]) == 0
    assert json.loads(capsys.readouterr().out) == [
        {"$binary": "/w=="},
        {"$ext": 5, "data": "fw=="},
    ]

def test_info_non_string_keys_become_pairs(tmp_path, capsys):
    path = _write(tmp_path, b"\x82\x01\x0a\x01\x0b")
    assert main(["info", path]) == 0
    assert json.loads(capsys.readouterr().out) == [[1, 11]]

def test_info_compat(tmp_path, capsys):
    path = _write(tmp_path, b"\xa2hi")
    assert main(["info", path, "--compat"]) == 0
    assert json.loads(capsys.readouterr().out) == {"$binary": "aGk="}

def test_info_decode_error(tmp_path, capsys):
    path = _write(tmp_path, b"\xc1")
    assert main(["info", path]) == 2
    assert "InvalidData" in capsys.readouterr().err

def test_info_truncated(tmp_path, capsys):
    path = _write(tmp_path, b"\xc4\x05\x01")
    assert main(["info", path]) == 2
    assert "InsufficientData" in capsys.readouterr().err

def test_info_bad_max_depth(tmp_path, capsys):
    path = _write(tmp_path, b"\x01")
    assert main(["info", path, "--max-depth", "0"]) == 2
    assert "invalid option" in capsys.readouterr().err

def test_info_max_depth_exceeded(tmp_path, capsys):
    path = _write(tmp_path, b"\x91\x91\x01")
    assert main(["info", path, "--max-depth", "1"]) == 2
    assert "DepthLimitExceeded" in capsys.readouterr().err

def test_no_command_prints_help(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().out

def test_info_verbose_after_subcommand(tmp_path, capsys):
    path = _write(tmp_path, b"\x01")
    assert main(["info", path, "-v"]) == 0
    assert json.loads(capsys.readouterr().out) == 1

def test_verbose_before_subcommand(tmp_path, capsys):
    path = _write(tmp_path, b"\x01")
    assert main(["-v", "info", path]) == 0
    assert json.loads(capsys.readouterr().out) == 1

def test_info_too_deep_for_stack(tmp_path, capsys):
    path = _write(tmp_path, b"\x91" * 5000 + b"\x01")
    assert main(["info", path]) == 2
    assert "DepthLimitExceeded" in capsys.readouterr().err
