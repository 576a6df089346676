import json
import os
import subprocess
import sys


def _run(args, repo_root, stdin=None, env_extra=None):
    env = dict(os.environ)
    env.update(env_extra or {})
    return subprocess.run(
        [sys.executable, "-m", "aegraph.aegraph_cli", *args],
        cwd=str(repo_root),
        input=stdin,
        capture_output=True,
        text=True,
        env=env,
    )


def test_list_double_cuts(repo_root):
    p = _run(["list", "double-cut", "([[C]])"], repo_root)
    assert p.returncode == 0, p.stderr
    obj = json.loads(p.stdout)
    assert obj["schema"] == "aegraph-rule-run.v1"
    assert obj["action"] == "list"
    assert obj["rule"] == "double-cut"
    assert obj["input"] == "([[C]])"
    assert obj["candidates"] == [[0]]
    assert obj["ok"] is True
    assert obj["warnings"] == []


def test_apply_double_cut(repo_root):
    p = _run(["apply", "double-cut", "[0]", "([[C]])"], repo_root)
    assert p.returncode == 0, p.stderr
    obj = json.loads(p.stdout)
    assert obj["output"] == "(C)"
    assert obj["address"] == [0]
    assert obj["output_stats"] == {"size": 1, "depth": 0, "cuts": 0}


def test_apply_at_invalid_address_reports_not_ok(repo_root):
    p = _run(["apply", "double-cut", "[0]", "(A, [B])"], repo_root)
    assert p.returncode == 1
    obj = json.loads(p.stdout)
    assert obj["ok"] is False
    assert obj["output"] is None
    assert obj["warnings"] and "double cut" in obj["warnings"][0].lower()


def test_reads_graph_from_stdin(repo_root):
    p = _run(["list", "deiteration", "--stdin"], repo_root, stdin="(A, [A])\n")
    assert p.returncode == 0, p.stderr
    assert json.loads(p.stdout)["candidates"] == [[0, 0]]

    p = _run(["apply", "deiteration", "--stdin", "[0, 0]"], repo_root, stdin="(A, [A])\n")
    assert p.returncode == 0, p.stderr
    assert json.loads(p.stdout)["output"] == "([], A)"


def test_reads_graph_from_file(repo_root, tmp_path):
    f = tmp_path / "graph.txt"
    f.write_text("(A, [B, C])\n", encoding="utf-8")
    p = _run(["list", "erasure", "--file", str(f)], repo_root)
    assert p.returncode == 0, p.stderr
    assert json.loads(p.stdout)["candidates"] == [[0, 0], [0, 1]]


def test_erasure_level_option(repo_root):
    p = _run(["list", "erasure", "(A, [B, C])", "--level", "1"], repo_root)
    assert p.returncode == 0, p.stderr
    assert json.loads(p.stdout)["candidates"] == [[0], [1]]


def test_erasure_level_minus_one(repo_root):
    p = _run(["list", "erasure", "(A)", "--level", "-1"], repo_root)
    assert p.returncode == 0, p.stderr
    assert json.loads(p.stdout)["candidates"] == [[0]]


def test_level_rejected_for_other_rules(repo_root):
    p = _run(["list", "double-cut", "([[C]])", "--level", "1"], repo_root)
    assert p.returncode == 2
    assert "--level" in p.stderr


def test_malformed_graph_exits_2(repo_root):
    p = _run(["list", "erasure", "(A]"], repo_root)
    assert p.returncode == 2
    assert "Invalid input" in p.stderr
    assert p.stdout == ""


def test_bad_address_exits_2(repo_root):
    p = _run(["apply", "erasure", "[0, true]", "(A, [B, C])"], repo_root)
    assert p.returncode == 2
    assert "Address[1]" in p.stderr


def test_unknown_rule_exits_2(repo_root):
    p = _run(["list", "iteration", "(A)"], repo_root)
    assert p.returncode == 2
    assert "Unknown rule" in p.stderr


def test_rules_and_schema(repo_root):
    p = _run(["rules"], repo_root)
    assert p.returncode == 0
    names = [line.split("\t")[0] for line in p.stdout.splitlines()]
    assert names == ["deiteration", "double-cut", "erasure", "insert-double-cut"]

    p = _run(["--schema"], repo_root)
    assert p.returncode == 0
    assert p.stdout.strip() == "aegraph-rule-run.v1 docs/rule_run_schema.md"


def test_opt_in_schema_fields(repo_root):
    p = _run(["list", "double-cut", "([[C]])"], repo_root, env_extra={"AEGRAPH_ADD_SCHEMA_FIELDS": "1"})
    obj = json.loads(p.stdout)
    assert obj["kind"] == "rule-run"
    assert obj["schema_version"] == "1.0.0"


def test_debug_logging_goes_to_stderr(repo_root):
    p = _run(["list", "erasure", "(A, [B, C])"], repo_root, env_extra={"AEGRAPH_LOG_LEVEL": "DEBUG"})
    assert p.returncode == 0
    json.loads(p.stdout)
    assert "aegraph.rules.erasure" in p.stderr
