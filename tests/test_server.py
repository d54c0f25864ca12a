"""Test the static asset server and its SPA fallback routing."""

from unittest.mock import patch

import pytest

from wordsearch import serve
from wordsearch.server import ServerConfig, DEFAULT_PORT, create_app


INDEX_HTML = "<!doctype html><div id=\"root\"></div>"


@pytest.fixture
def dist(tmp_path):
    """A built asset directory with an index, a script and a stylesheet."""
    (tmp_path / "index.html").write_text(INDEX_HTML)
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "index.js").write_text("console.log('word search');")
    (tmp_path / "assets" / "index.css").write_text("body { margin: 0; }")
    (tmp_path / "favicon.svg").write_text("<svg></svg>")
    return tmp_path


@pytest.fixture
def client(dist):
    app = create_app(ServerConfig(dist_dir=dist))
    app.testing = True
    return app.test_client()


class TestStaticFiles:
    """Test serving of existing assets."""

    def test_root_serves_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.get_data(as_text=True) == INDEX_HTML

    def test_javascript_content_type(self, client):
        response = client.get("/assets/index.js")
        assert response.status_code == 200
        assert response.mimetype == "application/javascript"
        assert "word search" in response.get_data(as_text=True)

    def test_css_content_type(self, client):
        response = client.get("/assets/index.css")
        assert response.status_code == 200
        assert response.mimetype == "text/css"

    def test_other_file(self, client):
        response = client.get("/favicon.svg")
        assert response.status_code == 200
        assert response.get_data(as_text=True) == "<svg></svg>"


class TestFallbackRouting:
    """Test routing for paths that are not existing files."""

    def test_unknown_api_route(self, client):
        """API paths get a JSON 404 instead of the index."""
        response = client.get("/api/unknown")
        assert response.status_code == 404
        assert response.get_json() == {"error": "API endpoint not found"}

    def test_api_prefix_without_slash(self, client):
        response = client.get("/api")
        assert response.status_code == 404
        assert response.get_json() == {"error": "API endpoint not found"}

    def test_missing_file(self, client):
        """Paths that look like files get a plain-text 404."""
        response = client.get("/assets/missing.js")
        assert response.status_code == 404
        assert response.mimetype == "text/plain"
        assert response.get_data(as_text=True) == "File not found"

    def test_spa_route_serves_index(self, client):
        """Anything else is left to client-side routing."""
        response = client.get("/games/daily")
        assert response.status_code == 200
        assert response.get_data(as_text=True) == INDEX_HTML

    def test_dotfile_is_hidden(self, client, dist):
        """Existing dotfiles are not served and fall through to the dot rule."""
        (dist / ".env").write_text("SECRET=1")
        response = client.get("/.env")
        assert response.status_code == 404
        assert response.get_data(as_text=True) == "File not found"

    def test_file_in_dot_directory_is_hidden(self, client, dist):
        (dist / ".git").mkdir()
        (dist / ".git" / "config").write_text("[core]")
        response = client.get("/.git/config")
        assert response.status_code == 404
        assert "core" not in response.get_data(as_text=True)

    def test_non_get_request(self, client):
        """Unmatched methods get a 404, not a 405."""
        response = client.post("/api/unknown")
        assert response.status_code == 404
        assert response.mimetype == "text/plain"
        assert response.get_data(as_text=True) == "Cannot POST /api/unknown"

    def test_custom_api_prefix(self, dist):
        app = create_app(ServerConfig(dist_dir=dist, api_prefix="/backend"))
        client = app.test_client()
        assert client.get("/backend/words").status_code == 404
        assert client.get("/api/words").status_code == 200


class TestServerConfig:
    """Test server configuration defaults."""

    def test_default_port(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        assert ServerConfig().port == DEFAULT_PORT == 5000

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert ServerConfig().port == 8080

    def test_explicit_port_wins(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert ServerConfig(port=9000).port == 9000


class TestServeCommand:
    """Test the server CLI's top-level error handling."""

    def test_missing_dist_dir(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["serve", "--dist", str(tmp_path / "missing")])
        with pytest.raises(SystemExit) as exc_info:
            serve.main()
        assert exc_info.value.code == 1
        assert "Error: Asset directory not found" in capsys.readouterr().err

    @patch("wordsearch.serve.run")
    def test_startup_error_exits_cleanly(self, mock_run, dist, monkeypatch, capsys):
        """A port already in use is reported without a traceback."""
        mock_run.side_effect = OSError("Address already in use")
        monkeypatch.setattr("sys.argv", ["serve", "--dist", str(dist), "--port", "5000"])

        with pytest.raises(SystemExit) as exc_info:
            serve.main()

        assert exc_info.value.code == 1
        assert capsys.readouterr().err.strip() == "Error: Address already in use"

    @patch("wordsearch.serve.run")
    def test_runs_with_overrides(self, mock_run, dist, monkeypatch):
        monkeypatch.setattr("sys.argv", ["serve", "--dist", str(dist), "--port", "8123"])
        assert serve.main() == 0
        config = mock_run.call_args.args[0]
        assert config.port == 8123
        assert config.dist_dir == dist
