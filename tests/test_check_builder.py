"""Tests for building checks from dashboard panels."""

import pytest

from alerting.check_builder import CheckBuilder, format_threshold
from alerting.errors import IneligiblePanelError, MalformedPanelError, NoThresholdsError, NotAGraphError
from tests.conftest import make_panel


@pytest.fixture
def builder():
    return CheckBuilder()


class TestEligibility:

    def test_not_a_graph(self, builder):
        panel = make_panel(panel_type="singlestat")
        with pytest.raises(NotAGraphError):
            builder.build(panel)

    def test_not_a_graph_wins_over_malformed_fields(self, builder):
        with pytest.raises(NotAGraphError):
            builder.build({"type": "text", "grid": "nonsense"})

    def test_missing_type_is_not_a_graph(self, builder):
        with pytest.raises(NotAGraphError):
            builder.build({"title": "x", "grid": {}})

    @pytest.mark.parametrize("thresholds", [(), (5.0,), (5.0, None)])
    def test_fewer_than_two_thresholds(self, builder, thresholds):
        with pytest.raises(NoThresholdsError):
            builder.build(make_panel(thresholds=thresholds))

    def test_panel_not_an_object(self, builder):
        with pytest.raises(MalformedPanelError):
            builder.build(["graph"])

    def test_missing_grid(self, builder):
        panel = make_panel()
        del panel["grid"]
        with pytest.raises(MalformedPanelError):
            builder.build(panel)

    def test_missing_title(self, builder):
        panel = make_panel()
        del panel["title"]
        with pytest.raises(MalformedPanelError):
            builder.build(panel)

    def test_alert_id_wrong_type(self, builder):
        with pytest.raises(MalformedPanelError):
            builder.build(make_panel(alert_id=17))

    def test_targets_wrong_type(self, builder):
        panel = make_panel()
        panel["targets"] = "stats.cpu"
        with pytest.raises(MalformedPanelError):
            builder.build(panel)

    def test_int_too_large_for_float_is_no_thresholds(self, builder):
        with pytest.raises(NoThresholdsError):
            builder.build(make_panel(thresholds=(10**400, 5)))

    def test_all_failures_share_a_base(self, builder):
        for panel in (make_panel(panel_type="table"), make_panel(thresholds=()), 42):
            with pytest.raises(IneligiblePanelError):
                builder.build(panel)


class TestBuild:

    def test_formats_warn_and_error(self, builder):
        check = builder.build(make_panel(thresholds=(5.0, 10.0)))
        assert check.warn == "5.000000"
        assert check.error == "10.000000"

    def test_uses_first_two_in_discovery_order(self, builder):
        panel = make_panel(thresholds=())
        panel["grid"].update({"threshold2": 90, "threshold1": 70, "threshold3": 99})
        check = builder.build(panel)
        assert (check.warn, check.error) == ("90.000000", "70.000000")

    def test_fields(self, builder):
        check = builder.build(make_panel(title="Disk IO", alert_id="abc"))
        assert check.id == "abc"
        assert check.name == "Disk IO"
        assert check.description == "Check added from grafana for 'Disk IO'"
        assert check.target == "stats.cpu"
        assert check.enabled is True
        assert check.live is False
        assert check.from_ is None
        assert check.until is None

    def test_missing_alert_id_means_new_check(self, builder):
        panel = make_panel()
        del panel["alertID"]
        assert builder.build(panel).id == ""

    def test_first_non_empty_target(self, builder):
        panel = make_panel()
        panel["targets"] = [{"refId": "A"}, "junk", {"target": ""}, {"target": "b.c"}, {"target": "d"}]
        assert builder.build(panel).target == "b.c"

    def test_no_targets_is_empty_string(self, builder):
        panel = make_panel(target=None)
        del panel["targets"]
        assert builder.build(panel).target == ""

    def test_does_not_mutate_panel(self, builder):
        panel = make_panel(alert_id="7")
        before = repr(panel)
        builder.build(panel)
        assert repr(panel) == before

    def test_format_threshold(self):
        assert format_threshold(0.1) == "0.100000"
        assert format_threshold(-3) == "-3.000000"
        assert format_threshold(1234567.8912345) == "1234567.891235"


    def test_oversized_threshold_skipped(self, builder):
        check = builder.build(make_panel(thresholds=(10**400, 1, 2)))
        assert (check.warn, check.error) == ("1.000000", "2.000000")


class TestPayload:

    def test_wire_body(self, builder):
        payload = builder.build(make_panel(alert_id="99")).to_payload()
        assert payload == {
            "name": "CPU",
            "description": "Check added from grafana for 'CPU'",
            "target": "stats.cpu",
            "warn": "5.000000",
            "error": "10.000000",
            "enabled": True,
            "live": False,
        }
        assert "id" not in payload

    def test_from_and_until_sent_when_set(self, builder):
        check = builder.build(make_panel()).model_copy(update={"from_": "-1h", "until": "now"})
        payload = check.to_payload()
        assert payload["from"] == "-1h"
        assert payload["until"] == "now"
