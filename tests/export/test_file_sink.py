import pytest
from flask import Response

from event_attendance.export import FileSink, with_bom
from event_attendance.export.sink import DownloadSink


def test_file_sink_writes_utf8_file(tmp_path):
    sink = FileSink(tmp_path / "exports")

    path = sink.deliver("resumen_2026-02-01.csv", with_bom("Metrica,Valor\nAsistentes (conteo),5\n"))

    assert path == tmp_path / "exports" / "resumen_2026-02-01.csv"
    assert path.read_bytes() == b"\xef\xbb\xbfMetrica,Valor\nAsistentes (conteo),5\n"


def test_file_sink_rejects_paths(tmp_path):
    sink = FileSink(tmp_path)

    with pytest.raises(ValueError):
        sink.deliver("../escape.csv", "x\n")
    with pytest.raises(ValueError):
        sink.deliver("", "x\n")


def test_download_sink_quotes_the_filename():
    resp = DownloadSink(Response).deliver('asistencias; "mes" 02.csv', "A\n1\n")

    assert resp.mimetype == "text/csv"
    assert resp.headers["Content-Disposition"] == 'attachment; filename="asistencias; \\"mes\\" 02.csv"'
    assert resp.get_data() == b"A\n1\n"
