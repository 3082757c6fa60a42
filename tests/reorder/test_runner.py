"""Tests for src/reorder/runner.py"""

from unittest.mock import call

import pytest

from src.reorder.runner import RunSummary, run
from src.shopify.errors import RequestFailure


def _product(pid, *variants):
    return {
        "id": pid,
        "title": f"Product {pid}",
        "variants": [{"id": vid, "title": t, "position": pos} for vid, t, pos in variants],
    }


class TestRun:
    def test_widget_end_to_end(self, client, sleep, make_response, widget_json):
        events = []

        def request(method, path, data=None):
            events.append((method, path, data))
            if method == "GET":
                return make_response({"products": [widget_json]})
            return make_response()

        client.request.side_effect = request
        sleep.side_effect = lambda d: events.append(("sleep", d))

        summary = run(client, sleep=sleep)

        assert events == [
            ("GET", "products.json?limit=250", None),
            ("PUT", "variants/11.json", {"variant": {"id": 11, "position": 1}}),
            ("sleep", 1.0),
            ("PUT", "variants/10.json", {"variant": {"id": 10, "position": 2}}),
            ("sleep", 1.0),
        ]
        assert summary == RunSummary(pages=1, products=1, reordered=1)

    def test_processes_every_product_across_pages(self, client, sleep, make_response, next_link):
        page1 = {"products": [
            _product(1, (10, "Sample", 1), (11, "Bolt", 2)),
            _product(2, (20, "Bolt", 1), (21, "Sample", 2)),
        ]}
        page2 = {"products": [
            _product(3, (30, "Yard", 1)),
            _product(4, (40, "sample", 1), (41, "Yard", 2), (42, "BOLT", 3)),
        ]}
        client.request.side_effect = [
            make_response(page1, {"Link": next_link("P2")}),
            make_response(),
            make_response(),
            make_response(page2),
            make_response(),
            make_response(),
        ]

        summary = run(client, sleep=sleep)

        assert summary == RunSummary(pages=2, products=4, reordered=2)
        puts = [c for c in client.request.call_args_list if c.args[0] == "PUT"]
        assert puts == [
            call("PUT", "variants/11.json", {"variant": {"id": 11, "position": 1}}),
            call("PUT", "variants/10.json", {"variant": {"id": 10, "position": 2}}),
            call("PUT", "variants/42.json", {"variant": {"id": 42, "position": 1}}),
            call("PUT", "variants/40.json", {"variant": {"id": 40, "position": 3}}),
        ]

    def test_empty_catalog(self, client, sleep, make_response):
        client.request.return_value = make_response({"products": []})

        assert run(client, sleep=sleep) == RunSummary()

    def test_dry_run_only_reads(self, client, sleep, make_response, widget_json):
        client.request.return_value = make_response({"products": [widget_json]})

        summary = run(client, dry_run=True, sleep=sleep)

        assert summary.reordered == 1
        assert all(c.args[0] == "GET" for c in client.request.call_args_list)

    def test_write_failure_aborts_run(self, client, sleep, make_response, next_link, widget_json):
        client.request.side_effect = [
            make_response({"products": [widget_json]}, {"Link": next_link("P2")}),
            RequestFailure(500, "boom"),
        ]

        with pytest.raises(RequestFailure):
            run(client, sleep=sleep)

        # Second page never requested
        assert client.request.call_count == 2

    def test_logs_progress(self, client, sleep, make_response, widget_json, caplog):
        client.request.side_effect = [make_response({"products": [widget_json]}),
                                      make_response(), make_response()]

        with caplog.at_level("INFO", logger="src"):
            run(client, sleep=sleep)

        assert "Processing page 1 with 1 products..." in caplog.text
        assert 'Reordering Product ID: 1 - "Widget"' in caplog.text
        assert "Sample (pos: 1) before Bolt (pos: 2)" in caplog.text
