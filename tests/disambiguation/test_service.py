import logging
import threading

import pytest

from adventure_core.common.config import MAX_SUGGESTIONS_ENV, WORLD_PATH_ENV
from adventure_core.world.world import World
from disambiguation.service import SuggestionService


@pytest.fixture()
def service(test_world):
    with SuggestionService(world=test_world, max_suggestions=5) as svc:
        yield svc


@pytest.fixture()
def shared_preposition_world():
    world = World()
    world.add_verb("look", prepositions=["at"])
    world.add_verb("throw", prepositions=["at"])
    world.add_noun("wall", "stone")
    return world


def test_suggest_returns_context(service):
    result = service.suggest("examine pale red ")

    assert result.ok
    assert not result.fatal
    assert result.error is None
    assert [s.text for s in result.suggestions] == ["plastic", "bucket", "sandy", "small"]
    assert service.last_result is result


def test_recoverable_error_means_no_suggestions(service, caplog):
    with caplog.at_level(logging.DEBUG, logger="disambiguation.service"):
        result = service.suggest("qqq ")

    assert not result.ok
    assert not result.fatal
    assert result.suggestions == ()
    assert "qqq" in result.error
    assert service.enabled
    assert service.suggest("take ").ok


def test_fatal_error_disables_suggestions(shared_preposition_world, caplog):
    service = SuggestionService(world=shared_preposition_world, max_suggestions=3)

    with caplog.at_level(logging.ERROR, logger="disambiguation.service"):
        result = service.suggest("look at ")

    assert result.fatal
    assert "at" in result.error
    assert not service.enabled
    assert "Disabling suggestions" in caplog.text

    later = service.suggest("look ")
    assert later.fatal
    assert later.suggestions == ()


def test_only_the_latest_request_is_computed(service):
    assert not service.needs_refresh
    assert service.refresh() is None

    service.request("ex")
    service.request("examine ", 8)
    assert service.needs_refresh

    result = service.refresh()
    assert result.text == "examine "
    assert result.suggestions[0].text == "examine"
    assert not service.needs_refresh
    assert service.refresh() is None
    assert service.last_result is result


def test_requests_from_many_threads_coalesce(service):
    texts = ["t", "ta", "tak", "take", "take "]
    threads = [threading.Thread(target=service.request, args=(text,)) for text in texts]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    result = service.refresh()
    assert result.text in texts
    assert service.refresh() is None


def test_close_clears_pending_work(service):
    service.request("take ")
    service.close()
    assert not service.needs_refresh
    assert service.last_result is None


def test_from_config_uses_environment(monkeypatch):
    monkeypatch.delenv(WORLD_PATH_ENV, raising=False)
    monkeypatch.setenv(MAX_SUGGESTIONS_ENV, "2")

    service = SuggestionService.from_config()

    assert service.max_suggestions == 2
    assert service.world.title == "Test Game"
    assert [s.text for s in service.suggest("").suggestions] == ["take", "x"]


def test_catalog_follows_world_changes(service, test_world):
    test_world.add_noun("lamp", "brass")
    assert "lamp" in [s.text for s in service.suggest("take brass l").suggestions]


def test_pending_state_is_read_under_the_lock(service):
    service.request("take ")
    seen = []
    reader = threading.Thread(target=lambda: seen.append(service.needs_refresh))

    with service._lock:
        reader.start()
        reader.join(timeout=0.2)
        assert reader.is_alive()
        assert seen == []

    reader.join(timeout=5)
    assert seen == [True]
