"""Tests for kickstart.selector module."""

import click
import httpx
import pytest
from rich.console import Console

from kickstart.catalog import list_official
from kickstart.registry import RegistryClient
from kickstart.selector import (
    OFFICIAL_TAG,
    TemplateSelector,
    filter_candidates,
)


@pytest.fixture
def quiet_console():
    return Console(file=None, quiet=True)


def _answers(monkeypatch, *answers):
    """Feed canned answers to click.prompt."""
    it = iter(answers)
    prompts = []

    def fake_prompt(text, **kwargs):
        prompts.append(text)
        return next(it)

    monkeypatch.setattr(click, "prompt", fake_prompt)
    return prompts


class TestLoad:
    """Tests for TemplateSelector.load()."""

    def test_official_first_then_registry(self, remote_registry, quiet_console):
        candidates = TemplateSelector(remote_registry, quiet_console).load()
        official = list_official()
        assert [c.descriptor for c in candidates[:len(official)]] == official
        assert all(c.tag == OFFICIAL_TAG for c in candidates[:len(official)])
        assert candidates[-1].descriptor.name == "hello-app"
        assert candidates[-1].tag == "120⭑"

    def test_registry_failure_yields_official_only(self, quiet_console):
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(503)))
        selector = TemplateSelector(RegistryClient(client=client), quiet_console)
        assert [c.descriptor for c in selector.load()] == list_official()

    def test_registry_queried_once(self, registry_client, registry_transport, quiet_console):
        selector = TemplateSelector(RegistryClient(client=registry_client), quiet_console)
        # three keystrokes
        selector.filter("h")
        selector.filter("he")
        selector.filter("hel")
        assert len(registry_transport.requests) == 1

    def test_cached_list_reused(self, stub_registry, quiet_console):
        selector = TemplateSelector(stub_registry, quiet_console)
        assert selector.load() is selector.load()
        assert stub_registry.calls == 1


class TestFilterCandidates:
    """Tests for filter_candidates()."""

    @pytest.fixture
    def candidates(self, remote_registry, quiet_console):
        return TemplateSelector(remote_registry, quiet_console).load()

    def test_empty_filter_returns_all(self, candidates):
        assert filter_candidates(candidates, "") == candidates

    def test_no_match(self, candidates):
        assert filter_candidates(candidates, "zzz-nothing") == []

    def test_case_insensitive(self, candidates):
        names = [c.descriptor.name for c in filter_candidates(candidates, "HELLO")]
        assert names == ["hello-world", "hello-app"]

    def test_matches_tag(self, candidates):
        names = [c.descriptor.name for c in filter_candidates(candidates, "official")]
        assert names == [d.name for d in list_official()]

    def test_does_not_mutate(self, candidates):
        before = list(candidates)
        filter_candidates(candidates, "web")
        assert candidates == before


class TestSelect:
    """Tests for TemplateSelector.select()."""

    def test_pick_by_number(self, monkeypatch, stub_registry, quiet_console):
        _answers(monkeypatch, "2")
        selected = TemplateSelector(stub_registry, quiet_console).select()
        assert selected == list_official()[1]

    def test_filter_then_pick(self, monkeypatch, remote_registry, quiet_console):
        _answers(monkeypatch, "app", "1")
        selected = TemplateSelector(remote_registry, quiet_console).select()
        # "web-app" is official and comes first
        assert selected.name == "web-app"

    def test_no_match_cannot_be_confirmed(self, monkeypatch, stub_registry, quiet_console):
        prompts = _answers(monkeypatch, "zzz", "", "1")
        selected = TemplateSelector(stub_registry, quiet_console).select()
        assert selected == list_official()[0]
        assert prompts[1] == "Filter"

    def test_out_of_range_number_reprompts(self, monkeypatch, stub_registry, quiet_console):
        _answers(monkeypatch, "99", "1")
        assert TemplateSelector(stub_registry, quiet_console).select() == list_official()[0]

    def test_abort_propagates(self, monkeypatch, stub_registry, quiet_console):
        def cancel(*args, **kwargs):
            raise click.Abort()
        monkeypatch.setattr(click, "prompt", cancel)
        with pytest.raises(click.Abort):
            TemplateSelector(stub_registry, quiet_console).select()

    def test_slash_prefix_filters_by_digits(self, monkeypatch, quiet_console):
        items = [{"name": "vue2-starter", "stargazers_count": 3, "clone_url": "https://github.com/acme/vue2-starter.git"}]
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={"items": items})))
        _answers(monkeypatch, "/2", "1")
        selected = TemplateSelector(RegistryClient(client=client), quiet_console).select()
        assert selected.name == "vue2-starter"
