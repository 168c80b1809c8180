import io
import json

from tiered_discounts.app.cli import main
from tiered_discounts.settings import CART_LINES_TARGET, DELIVERY_OPTIONS_TARGET


def write_document(tmp_path, name: str, document) -> str:
    path = tmp_path / name
    path.write_text(document if isinstance(document, str) else json.dumps(document))
    return str(path)


def make_payload(classes: list[str], delivery_group_ids: list[str] | None = None) -> dict:
    return {
        "cart": {
            "lines": [{"id": "l1", "quantity": 2}],
            "cost": {"subtotalAmount": {"amount": "250.0"}},
            "deliveryGroups": [{"id": group_id} for group_id in delivery_group_ids or []],
        },
        "discount": {"discountClasses": classes},
    }


def test_run_writes_output_document(tmp_path, capsys):
    path = write_document(tmp_path, "input.json", make_payload(["PRODUCT", "ORDER"]))
    code = main(["run", "--target", CART_LINES_TARGET, "--input", path])
    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert len(output["operations"]) == 2


def test_run_reads_stdin_by_default(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(make_payload(["SHIPPING"], ["dg1"]))))
    code = main(["run", "--target", DELIVERY_OPTIONS_TARGET])
    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["operations"][0]["deliveryDiscountsAdd"]["candidates"][0]["targets"] == [
        {"deliveryGroup": {"id": "dg1"}}
    ]


def test_run_exits_nonzero_when_delivery_groups_missing(tmp_path, capsys):
    path = write_document(tmp_path, "input.json", make_payload(["SHIPPING"]))
    code = main(["run", "--target", DELIVERY_OPTIONS_TARGET, "--input", path])
    assert code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No delivery groups found" in captured.err


def test_run_exits_nonzero_on_unknown_target(tmp_path, capsys):
    path = write_document(tmp_path, "input.json", make_payload([]))
    assert main(["run", "--target", "unknown.target", "--input", path]) == 1
    assert "not registered" in capsys.readouterr().err


def test_run_exits_nonzero_on_invalid_json(tmp_path, capsys):
    path = write_document(tmp_path, "input.json", "{oops")
    assert main(["run", "--input", path]) == 1
    assert "Invalid JSON input" in capsys.readouterr().err


def test_targets_lists_registered_targets(capsys):
    assert main(["targets"]) == 0
    assert capsys.readouterr().out.split() == sorted([CART_LINES_TARGET, DELIVERY_OPTIONS_TARGET])


def test_validate_config_prints_effective_config(tmp_path, capsys):
    path = write_document(
        tmp_path,
        "config.json",
        {
            "quantity_threshold": 3,
            "quantity_discount_percentage": 12.5,
            "order_threshold_1": 150.0,
            "order_discount_percentage_1": 15,
            "free_shipping_threshold": 75,
        },
    )
    assert main(["validate-config", path]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "quantity_threshold": 3,
        "quantity_discount_percentage": "12.5",
        "order_threshold_1": "150",
        "order_discount_percentage_1": "15",
        "free_shipping_threshold": "75",
    }


def test_validate_config_rejects_incomplete_config(tmp_path, capsys):
    path = write_document(tmp_path, "config.json", {"quantity_threshold": 3})
    assert main(["validate-config", path]) == 1
    assert "defaults would be used" in capsys.readouterr().err


def test_run_exits_nonzero_when_input_file_missing(tmp_path, capsys):
    code = main(["run", "--target", CART_LINES_TARGET, "--input", str(tmp_path / "missing.json")])
    assert code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR: Cannot read input" in captured.err


def test_validate_config_exits_nonzero_when_file_missing(tmp_path, capsys):
    code = main(["validate-config", str(tmp_path / "missing.json")])
    assert code == 1
    assert "ERROR: Cannot read config" in capsys.readouterr().err
