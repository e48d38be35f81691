"""End-to-end tests for the account linking page."""

from src.api.authorize import success_redirect_uri


class TestAuthorizePage:
    """Test GET /authorize."""

    def test_renders_tokens_and_links(self, test_client):
        response = test_client.get(
            "/authorize",
            params={
                "account_linking_token": "ALT-1",
                "redirect_uri": "https://facebook.com/link?x=1",
            },
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        body = response.text
        assert "ALT-1" in body
        assert 'href="https://facebook.com/link?x=1"' in body
        assert (
            'href="https://facebook.com/link?x=1&amp;authorization_code=1234567890"'
            in body
        )

    def test_missing_redirect_uri_is_rejected(self, test_client):
        response = test_client.get("/authorize", params={"account_linking_token": "ALT"})

        assert response.status_code == 422

    def test_values_are_escaped(self, test_client):
        response = test_client.get(
            "/authorize",
            params={
                "account_linking_token": "<script>alert(1)</script>",
                "redirect_uri": "https://facebook.com/link",
            },
        )

        assert "<script>" not in response.text
        assert "&lt;script&gt;" in response.text


def test_success_redirect_uri():
    assert (
        success_redirect_uri("https://fb.example/cb?state=1", "42")
        == "https://fb.example/cb?state=1&authorization_code=42"
    )
