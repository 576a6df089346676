from aegraph.settings import (
    DEFAULT_SCHEMA_VERSION,
    Settings,
    load_settings,
    with_schema_fields,
)


def test_defaults_from_empty_environment():
    s = load_settings({})
    assert s == Settings()
    assert s.log_level == "WARNING"
    assert s.add_schema_fields is False
    assert s.schema_version == DEFAULT_SCHEMA_VERSION


def test_values_from_environment():
    s = load_settings({
        "AEGRAPH_LOG_LEVEL": "debug",
        "AEGRAPH_ADD_SCHEMA_FIELDS": "yes",
        "AEGRAPH_SCHEMA_VERSION": "2.1.0",
    })
    assert s.log_level == "DEBUG"
    assert s.add_schema_fields is True
    assert s.schema_version == "2.1.0"


def test_unknown_log_level_falls_back():
    assert load_settings({"AEGRAPH_LOG_LEVEL": "chatty"}).log_level == "WARNING"


def test_schema_fields_are_opt_in():
    payload = {"schema": "x"}
    assert with_schema_fields(payload, kind="rule-run", settings=Settings()) == payload

    out = with_schema_fields(payload, kind="rule-run", settings=Settings(add_schema_fields=True))
    assert out == {"schema": "x", "kind": "rule-run", "schema_version": DEFAULT_SCHEMA_VERSION}


def test_schema_fields_never_overwrite():
    out = with_schema_fields({"kind": "mine"}, kind="rule-run", settings=Settings(add_schema_fields=True))
    assert out["kind"] == "mine"
