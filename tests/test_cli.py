from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from cnabparse.cli import cli

from records import header_arquivo_record


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config" / "config.toml"


def invoke(runner, config_path, *args):
    return runner.invoke(cli, ["--config", str(config_path), *args])


def test_parse_text(runner, config_path, cnab_file):
    result = invoke(runner, config_path, "parse", str(cnab_file))

    assert result.exit_code == 0, result.output
    assert "#3 segmento_d" in result.output
    assert '"D"' in result.output
    assert '"000000000012345"' in result.output


def test_parse_json_strip(runner, config_path, cnab_file):
    result = invoke(runner, config_path, "parse", str(cnab_file), "--format", "json", "--strip")

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert len(data) == 5
    assert data[2]["kind"] == "segmento_d"
    assert data[2]["line"] == 3
    assert data[2]["fields"]["valor_cheque"] == "12345"
    assert data[0]["fields"]["nome_empresa"] == "EMPRESA TESTE LTDA"


def test_parse_csv(runner, config_path, cnab_file):
    result = invoke(runner, config_path, "parse", str(cnab_file), "--format", "csv")

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "line,kind,field,value"
    assert "3,segmento_d,segmento,D" in lines


def test_parse_to_file(runner, config_path, cnab_file, tmp_path):
    out = tmp_path / "out.json"
    result = invoke(runner, config_path, "parse", str(cnab_file), "--format", "json", "-o", str(out))

    assert result.exit_code == 0, result.output
    assert "5 records written" in result.output
    assert len(json.loads(out.read_text(encoding="utf-8"))) == 5


def test_parse_bad_record_length(runner, config_path, tmp_path):
    path = tmp_path / "bad.rem"
    path.write_bytes(header_arquivo_record() + b"\r\n" + b"0" * 100 + b"\r\n")

    result = invoke(runner, config_path, "parse", str(path))

    assert result.exit_code == 1
    assert "Line 2" in result.output


def test_parse_uses_config_defaults(runner, config_path, cnab_file):
    config_path.parent.mkdir(parents=True)
    config_path.write_text('format = "json"\nstrip = true\n', encoding="utf-8")

    result = invoke(runner, config_path, "parse", str(cnab_file))

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data[2]["fields"]["seu_numero"] == "CHQ-001"


def test_option_overrides_config(runner, config_path, cnab_file):
    config_path.parent.mkdir(parents=True)
    config_path.write_text('format = "json"\nstrip = true\n', encoding="utf-8")

    result = invoke(runner, config_path, "parse", str(cnab_file), "--raw", "--format", "csv")

    assert result.exit_code == 0, result.output
    assert "3,segmento_d,seu_numero,CHQ-001             " in result.output.splitlines()


def test_invalid_config(runner, config_path, cnab_file):
    config_path.parent.mkdir(parents=True)
    config_path.write_text('format = "xml"\n', encoding="utf-8")

    result = invoke(runner, config_path, "parse", str(cnab_file))

    assert result.exit_code == 2
    assert "format must be one of" in result.output


@pytest.mark.parametrize("encoding", ["no-such-codec", "base64", "hex"])
def test_unknown_encoding_option(runner, config_path, cnab_file, encoding):
    result = invoke(runner, config_path, "parse", str(cnab_file), "--encoding", encoding)
    assert result.exit_code == 2
    assert "unknown encoding" in result.output


def test_non_text_encoding_in_config(runner, config_path, cnab_file):
    config_path.parent.mkdir(parents=True)
    config_path.write_text('encoding = "rot13"\n', encoding="utf-8")

    result = invoke(runner, config_path, "parse", str(cnab_file))

    assert result.exit_code == 2
    assert "unknown encoding 'rot13'" in result.output


def test_layout(runner, config_path):
    result = invoke(runner, config_path, "layout", "segmento_d")

    assert result.exit_code == 0, result.output
    assert "segmento_d (240 bytes, 27 fields)" in result.output
    assert "cmc7" in result.output
    assert "21-54" in result.output


def test_layout_unknown_kind(runner, config_path):
    result = invoke(runner, config_path, "layout", "segmento_x")
    assert result.exit_code == 2


def test_kinds(runner, config_path):
    result = invoke(runner, config_path, "kinds")

    assert result.exit_code == 0, result.output
    for kind in ("header_arquivo", "header_lote", "segmento_d", "trailer_lote", "trailer_arquivo"):
        assert kind in result.output


def test_config_init_and_show(runner, config_path):
    result = invoke(runner, config_path, "config", "--init")
    assert result.exit_code == 0, result.output
    assert config_path.exists()

    result = invoke(runner, config_path, "config")
    assert result.exit_code == 0, result.output
    assert "encoding: utf-8" in result.output
    assert "format:   text" in result.output


def test_config_show_missing_file(runner, config_path):
    result = invoke(runner, config_path, "config")
    assert result.exit_code == 0, result.output
    assert "not found, using defaults" in result.output
