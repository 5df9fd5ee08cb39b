"""Shared test fixtures for kickstart.

Provides:
- workspace: Temporary directory used as the current working directory
- registry_items: Sample GitHub search results
- registry_transport: httpx.MockTransport that counts requests
- stub_registry: RegistryClient stand-in with canned results
- cli_runner: Click CliRunner
"""

import json

import httpx
import pytest
from click.testing import CliRunner

from kickstart.catalog import TemplateDescriptor
from kickstart.hooks import clear_init_hooks
from kickstart.registry import RegistryTemplate


@pytest.fixture(autouse=True)
def isolated_hooks():
    """Start and end every test with no registered init hooks."""
    clear_init_hooks()
    yield
    clear_init_hooks()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the user config at a file that does not exist."""
    monkeypatch.setenv("KICKSTART_CONFIG", str(tmp_path / "no-config.json"))


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Temporary directory that is also the current working directory.

    monkeypatch restores the original cwd even when the code under test
    changes directory.
    """
    ws = tmp_path / "ws"
    ws.mkdir()
    monkeypatch.chdir(ws)
    return ws


@pytest.fixture
def registry_items():
    return [
        {
            "name": "hello-app",
            "stargazers_count": 120,
            "clone_url": "https://github.com/acme/hello-app.git",
        },
        {
            "name": "vue-starter",
            "stargazers_count": 7,
            "clone_url": "https://github.com/acme/vue-starter.git",
        },
    ]


class CountingTransport(httpx.MockTransport):
    """MockTransport that records every request it answers."""

    def __init__(self, handler):
        self.requests = []

        def record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def registry_transport(registry_items):
    return CountingTransport(lambda request: httpx.Response(200, json={"items": registry_items}))


@pytest.fixture
def registry_client(registry_transport):
    return httpx.Client(transport=registry_transport)


class StubRegistry:
    """Stands in for RegistryClient without any network access."""

    def __init__(self, templates=None):
        self.templates = templates or []
        self.calls = 0

    def search(self):
        self.calls += 1
        return list(self.templates)


@pytest.fixture
def stub_registry():
    return StubRegistry()


@pytest.fixture
def remote_registry():
    return StubRegistry([
        RegistryTemplate(
            TemplateDescriptor("hello-app", "https://github.com/acme/hello-app.git"),
            stars=120,
        ),
    ])


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def sample_project(tmp_path):
    """A generated project with a package.json."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "package.json").write_text(json.dumps({
        "name": "template-name",
        "version": "1.2.3",
        "scripts": {"start": "node index.js"},
        "kickstart": {"packager": "yarn"},
    }, indent=2) + "\n")
    return project
