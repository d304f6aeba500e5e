from src.attendance_tracker.attendance_tracker.stats.mysql_stats_repository import MySQLStatsRepository


def test_scalar_counts(fake_db):
    conn, factory = fake_db([{"rows": [{"count": 4}]}, {"rows": [{"count": 2}]}])
    repo = MySQLStatsRepository(factory)

    assert repo.count_records() == 4
    assert repo.count_records_of_type("WFO") == 2
    assert conn.executed[1] == (
        "SELECT COUNT(*) AS count FROM attendance_records WHERE attendance_type=%s",
        ("WFO",),
    )


def test_count_by_type_keeps_query_order(fake_db):
    rows = [{"attendance_type": "WFO", "count": 3}, {"attendance_type": "WFH", "count": 1}]
    conn, factory = fake_db([{"rows": rows}])
    repo = MySQLStatsRepository(factory)

    groups = repo.count_by_type()

    assert [(g.attendance_type, g.count) for g in groups] == [("WFO", 3), ("WFH", 1)]
    assert "GROUP BY attendance_type ORDER BY count DESC" in conn.executed[0][0]
