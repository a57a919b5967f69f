import pytest

from cheveretokit.models.endpoint import Endpoint
from cheveretokit.models.probe import DiagnosticReport, ProbeOutcome
from cheveretokit.models.response import CheveretoResponse


class TestEndpoint:
    def test_label_is_host_name(self):
        assert str(Endpoint("https://pixr.co/api/1/upload", "key")) == "pixr.co"

    @pytest.mark.parametrize("url, key", [("", "key"), ("http://x.com", ""), ("   ", "key")])
    def test_rejects_empty_values(self, url, key):
        with pytest.raises(ValueError):
            Endpoint(url, key)

    def test_is_immutable_and_compared_by_value(self):
        endpoint = Endpoint("http://x.com/api", "key")
        assert endpoint == Endpoint("http://x.com/api", "key")
        with pytest.raises(AttributeError):
            endpoint.api_key = "other"  # type: ignore[misc]


class TestCheveretoResponse:
    def test_full_response(self):
        response = CheveretoResponse.from_json(
            '{"image": {"url": "u", "url_viewer": "v", "thumb": {"url": "t"}}}'
        )
        assert response is not None
        assert response.image is not None
        assert response.image.url == "u"
        assert response.image.url_viewer == "v"
        assert response.image.thumb is not None
        assert response.image.thumb.url == "t"

    def test_missing_image(self):
        response = CheveretoResponse.from_json('{"status_code": 200}')
        assert response is not None
        assert response.image is None

    def test_missing_thumb(self):
        response = CheveretoResponse.from_json('{"image": {"url": "u", "url_viewer": "v"}}')
        assert response is not None and response.image is not None
        assert response.image.thumb is None

    @pytest.mark.parametrize("body", ["", "not json", "[1, 2]", "null", "42"])
    def test_unparseable_body(self, body):
        assert CheveretoResponse.from_json(body) is None

    def test_non_object_image_is_ignored(self):
        response = CheveretoResponse.from_json('{"image": "oops"}')
        assert response is not None
        assert response.image is None


class TestDiagnosticReport:
    def test_outcome_rendering(self):
        assert str(ProbeOutcome("a.com", 120)) == "a.com (120ms)"
        assert str(ProbeOutcome("b.com")) == "b.com"
        assert ProbeOutcome("a.com", 0).succeeded
        assert not ProbeOutcome("b.com", error="boom").succeeded

    def test_format(self):
        report = DiagnosticReport(
            successful=(ProbeOutcome("c.com", 40), ProbeOutcome("a.com", 120)),
            failed=(ProbeOutcome("b.com"),),
        )
        assert report.format() == (
            "Successful uploads (2):\n\nc.com (40ms)\na.com (120ms)\n\n"
            "Failed uploads (1):\n\nb.com"
        )
        assert report.total == 3

    def test_format_empty(self):
        report = DiagnosticReport(successful=(), failed=())
        assert report.format() == "Successful uploads (0):\n\n\n\nFailed uploads (0):\n\n"
