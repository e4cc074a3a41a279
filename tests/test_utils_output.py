"""Tests for utils/output.py — row normalization and JSON/CSV output."""
import json

from jet_merchant.utils.output import OutputFormat, print_csv, print_json, print_output, to_rows


# ── to_rows ──────────────────────────────────────────────────────────

def test_to_rows_picks_list_key():
    data = {"order_urls": ["/orders/a", "/orders/b"]}
    assert to_rows(data, "order_urls") == [{"value": "/orders/a"}, {"value": "/orders/b"}]


def test_to_rows_missing_list_key_keeps_dict():
    data = {"status": "not_found", "status_code": 404}
    assert to_rows(data, "order_urls") == [data]


def test_to_rows_list_of_dicts():
    assert to_rows([{"a": 1}, 2]) == [{"a": 1}, {"value": 2}]


def test_to_rows_scalar():
    assert to_rows("x") == [{"value": "x"}]


# ── print_json ───────────────────────────────────────────────────────

def test_print_json_dict(capsys):
    print_json({"key": "value"})
    assert json.loads(capsys.readouterr().out) == {"key": "value"}


def test_print_json_keeps_wrapper(capsys):
    print_output({"order_urls": ["/a"]}, fmt=OutputFormat.JSON, list_key="order_urls")
    assert json.loads(capsys.readouterr().out) == {"order_urls": ["/a"]}


# ── print_csv ────────────────────────────────────────────────────────

def test_print_csv_basic(capsys):
    print_csv([{"name": "a", "val": 1}, {"name": "b", "val": 2}])
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "name,val"
    assert len(lines) == 3


def test_print_csv_nested_values_as_json(capsys):
    print_csv([{"sku": "s1", "price": {"amount": 9.99}}])
    out = capsys.readouterr().out
    assert '"{""amount"": 9.99}"' in out


def test_print_csv_selected_columns(capsys):
    print_csv([{"name": "a", "val": "1", "extra": "x"}], columns=["name", "val"])
    assert "extra" not in capsys.readouterr().out


def test_print_csv_empty(capsys):
    print_csv([])
    assert capsys.readouterr().out == ""


def test_print_output_csv_routes_through_rows(capsys):
    print_output({"sku_urls": ["/merchant-skus/a"]}, fmt=OutputFormat.CSV, list_key="sku_urls")
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == ["value", "/merchant-skus/a"]
