"""End-to-end tests for the click CLI against a tmp data directory."""

import json

from click.testing import CliRunner

from sellerdash.infrastructure.cli.main import cli


def _run(data_dir, *args):
    return CliRunner().invoke(cli, ["--data-dir", str(data_dir), *args])


class TestDashboardShow:

    def test_json_document(self, data_dir):
        result = _run(
            data_dir, "dashboard", "show", "--seller", "s1",
            "--start", "2024-01-01", "--end", "2024-01-05", "--json",
        )
        assert result.exit_code == 0, result.output
        doc = json.loads(result.output)
        assert doc["summary"] == {
            "totalOrders": 3,
            "paidAndDeliveredOrders": 1,
            "pendingPaymentOrders": 1,
            "processingOrders": 2,
            "totalRevenue": 60,
            "availableBooks": 2,
        }
        assert [o["_id"] for o in doc["orders"]] == ["o3", "o2", "o8", "o1"]
        o1 = doc["orders"][-1]
        assert o1["pricing"]["sellerEarnings"] == 15
        assert o1["books"] == [{"title": "Dune", "quantity": 1}]

    def test_table_output(self, data_dir):
        result = _run(
            data_dir, "dashboard", "show", "--seller", "s2",
            "--start", "2024-01-01", "--end", "2024-01-05",
        )
        assert result.exit_code == 0, result.output
        assert "Seller s2" in result.output
        assert "$45.00" in result.output
        assert "4 x Emma" in result.output
        assert "Dune" not in result.output

    def test_data_dir_from_environment(self, data_dir):
        result = CliRunner().invoke(
            cli,
            ["dashboard", "show", "--seller", "s2", "--start", "2024-01-01",
             "--end", "2024-01-05", "--json"],
            env={"SELLERDASH_DATA_DIR": str(data_dir)},
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["summary"]["totalRevenue"] == 45

    def test_unknown_seller(self, data_dir):
        result = _run(data_dir, "dashboard", "show", "--seller", "nobody")
        assert result.exit_code == 1
        assert "Seller 'nobody' not found" in result.output

    def test_broken_data_file_is_an_error(self, data_dir):
        (data_dir / "orders.json").write_text("[", encoding="utf-8")
        result = _run(data_dir, "dashboard", "show", "--seller", "s1")
        assert result.exit_code == 1
        assert "Cannot read data file" in result.output


class TestBookList:

    def test_lists_sellers_books(self, data_dir):
        result = _run(data_dir, "book", "list", "--seller", "s1")
        assert result.exit_code == 0, result.output
        assert "Dune" in result.output
        assert "Ubik" in result.output
        assert "Emma" not in result.output

    def test_no_books(self, data_dir):
        result = _run(data_dir, "book", "list", "--seller", "nobody")
        assert "No books found" in result.output
