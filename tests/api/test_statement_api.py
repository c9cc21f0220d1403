"""
Tests for statement API endpoints.
"""

import csv
import io
from decimal import Decimal
from urllib.parse import parse_qs, urlparse

import pytest


@pytest.fixture
def seeded(client):
    for payload in (
        {"date": "2024-01-01", "particulars": "Alice", "credit": "100"},
        {"date": "2024-01-02", "particulars": "Bob", "debit": "40"},
        {"date": "2024-01-03", "particulars": "Smith, Jones", "credit": "5"},
    ):
        client.post("/entries", json=payload)
    return client


class TestStatementView:

    def test_no_filter_returns_everything(self, seeded):
        data = seeded.get("/statement").json()
        assert len(data) == 3

    def test_start_date_filter(self, seeded):
        data = seeded.get("/statement", params={"start_date": "2024-01-02"}).json()
        assert [e["particulars"] for e in data] == ["Bob", "Smith, Jones"]
        assert Decimal(data[0]["balance"]) == Decimal("60")

    def test_blank_params_are_ignored(self, seeded):
        response = seeded.get(
            "/statement",
            params={"particulars": "", "start_date": "", "end_date": ""},
        )
        assert response.status_code == 200
        assert len(response.json()) == 3

    def test_text_filter(self, seeded):
        data = seeded.get("/statement", params={"particulars": "ALI"}).json()
        assert [e["particulars"] for e in data] == ["Alice"]

    def test_bad_date_returns_400(self, seeded):
        response = seeded.get("/statement", params={"start_date": "2024-99-99"})
        assert response.status_code == 400


class TestExport:

    def test_csv_download(self, seeded):
        response = seeded.get("/statement/export", params={"format": "csv"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "account-statement.csv" in response.headers["content-disposition"]

        rows = list(csv.reader(io.StringIO(response.text)))
        assert rows[0][0] == "Date"
        assert rows[1] == ["01/01/2024", "Alice", "-", "-", "-", "100", "100"]
        assert rows[3][1] == "Smith, Jones"
        assert rows[3][-1] == "65"

    def test_text_export_with_filter(self, seeded):
        response = seeded.get(
            "/statement/export",
            params={"format": "text", "particulars": "bob"},
        )
        assert response.status_code == 200
        assert response.text.splitlines() == [
            "Account Statement:",
            "",
            "02/01/2024 | Bob | Debit Country: - | Debit: 40 | "
            "Credit Country: - | Credit: - | Balance: 60",
        ]

    def test_unknown_format_returns_400(self, seeded):
        response = seeded.get("/statement/export", params={"format": "pdf"})
        assert response.status_code == 400


class TestShare:

    def test_share_returns_link(self, seeded):
        response = seeded.post("/statement/share", json={"end_date": "2024-01-01"})

        assert response.status_code == 200
        url = response.json()["url"]
        assert url.startswith("https://wa.me/?text=")

        text = parse_qs(urlparse(url).query)["text"][0]
        assert text.startswith("Account Statement:\n\n")
        assert "Alice" in text
        assert "Bob" not in text
