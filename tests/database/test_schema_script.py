from event_attendance.database.bootstrap import SCHEMA_PATH, _iter_sql_statements, _strip_create_db_and_use


def test_schema_splits_into_statements():
    sql = _strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8"))
    statements = list(_iter_sql_statements(sql))

    assert len(statements) == 7
    assert not any(s.upper().startswith(("CREATE DATABASE", "USE ")) for s in statements)
    assert statements[4].startswith("CREATE OR REPLACE VIEW v_attendance_with_event")
    procedure = statements[-1]
    assert procedure.startswith("CREATE PROCEDURE attendance_by_barrio_month")
    assert procedure.endswith("END")
    assert "GROUP BY neighborhood" in procedure


def test_semicolons_inside_quotes_do_not_split():
    sql = "INSERT INTO t VALUES ('a;\nb');\n-- comment;\nSELECT 1;"

    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;\nb')", "SELECT 1"]
