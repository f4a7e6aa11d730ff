import io

import pytest

from solong_map.cli import main, print_map

VALID_TEXT = "11111\n1PCE1\n1C001\n11111"


def _write(tmp_path, text):
    path = tmp_path / "map.ber"
    path.write_text(text, encoding="utf-8", newline="")
    return path


def test_print_map_writes_rows_verbatim():
    rows = ["111\n", "1P1\n", "111"]
    out = io.StringIO()
    print_map(rows, out)
    assert out.getvalue() == "".join(rows)


def test_main_prints_valid_map(tmp_path, capsys):
    path = _write(tmp_path, VALID_TEXT)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == VALID_TEXT


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 0
    assert capsys.readouterr().out == "Error: No se pudo abrir el archivo\n"


def test_main_empty_file(tmp_path, capsys):
    path = _write(tmp_path, "")
    main([str(path)])
    assert capsys.readouterr().out == "Error: El mapa esta vacio\n"


def test_main_invalid_character(tmp_path, capsys):
    path = _write(tmp_path, "11111\n1PXE1\n11111")
    main([str(path)])
    assert capsys.readouterr().out == "Error: Caracter no válido en el mapa\n"


def test_main_bad_border(tmp_path, capsys):
    path = _write(tmp_path, "11111\n0PCE1\n11111")
    main([str(path)])
    assert capsys.readouterr().out == "Error: bordes invalidos lados\n"


def test_main_bad_counts(tmp_path, capsys):
    path = _write(tmp_path, "11111\n1P0E1\n11111")
    main([str(path)])
    assert capsys.readouterr().out == "Error: Faltan/sobran characteres\n"


def test_main_default_path_uses_map_txt(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "map.txt").write_text(VALID_TEXT, encoding="utf-8", newline="")
    main([])
    assert capsys.readouterr().out == VALID_TEXT


@pytest.mark.parametrize("text", ["1111\n1PE1\n1C11\n1111\n"])
def test_main_trailing_newline_is_rejected(tmp_path, capsys, text):
    path = _write(tmp_path, text)
    main([str(path)])
    assert capsys.readouterr().out.startswith("Error: ")