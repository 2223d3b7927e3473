from graduates import create_app
from graduates.errors import AppError, NotFoundError, UpstreamError, ValidationFailedError


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_unknown_route_returns_json(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Not found"}


def test_app_error_handler_returns_kind(app, client):
    @app.get("/boom")
    def boom():
        raise NotFoundError("Short not found")

    response = client.get("/boom")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Short not found", "code": "NotFound"}


def test_error_kinds_and_status_codes():
    assert (NotFoundError("x").kind, NotFoundError("x").status_code) == ("NotFound", 404)
    assert (ValidationFailedError("x").kind, ValidationFailedError("x").status_code) == ("ValidationFailed", 400)
    assert (UpstreamError("x").kind, UpstreamError("x").status_code) == ("Upstream", 502)
    assert AppError("x", status_code=418).status_code == 418


def test_graphql_errors_carry_code(graphql, app):
    body = graphql('{ getShortById(id: "missing") { id } }')

    assert body["errors"][0]["extensions"]["code"] == "NotFound"


def test_overrides_apply(tmp_path):
    app = create_app("testing", overrides={"UPLOAD_DIR": str(tmp_path / "u"), "SHORTS_FILTER_BY_RELATION": False})

    assert app.config["SHORTS_FILTER_BY_RELATION"] is False
    assert app.config["TESTING"] is True
    assert (tmp_path / "u").is_dir()


def test_sentry_uses_configured_sample_rate(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr("graduates.sentry_sdk.init", lambda **kwargs: calls.append(kwargs))

    create_app(
        "testing",
        overrides={
            "UPLOAD_DIR": str(tmp_path / "u"),
            "SENTRY_DSN": "https://key@sentry.example.com/1",
            "SENTRY_TRACES_SAMPLE_RATE": 0.5,
        },
    )

    assert len(calls) == 1
    assert calls[0]["traces_sample_rate"] == 0.5
    assert calls[0]["environment"] == "testing"


def test_sentry_skipped_without_dsn(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr("graduates.sentry_sdk.init", lambda **kwargs: calls.append(kwargs))

    app = create_app("testing", overrides={"UPLOAD_DIR": str(tmp_path / "u"), "SENTRY_DSN": None})

    assert calls == []
    assert app.config["SENTRY_TRACES_SAMPLE_RATE"] == 0.05
