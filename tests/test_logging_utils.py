from small_step_simple.logging_utils import parse_log_filter


def test_parse_global_level_only():
    assert parse_log_filter("info") == ("info", {})


def test_parse_module_levels():
    level, modules = parse_log_filter("debug, small_step_simple.eval=trace, small_step_simple.cli=false")

    assert level == "debug"
    assert modules == {"small_step_simple.eval": "TRACE", "small_step_simple.cli": False}


def test_parse_reads_environment(monkeypatch):
    monkeypatch.setenv("SIMPLE_LOG_FILTER", "ERROR")
    assert parse_log_filter() == ("error", {})

    monkeypatch.delenv("SIMPLE_LOG_FILTER")
    assert parse_log_filter() == ("warning", {})
