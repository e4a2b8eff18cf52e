import pytest
import requests

from flappy_gator.api_client import ScoreServiceClient
from flappy_gator.errors import TransientServiceError


class FakeResponse:
    def __init__(self, payload=None, status=200, bad_json=False):
        self.payload = payload
        self.status_code = status
        self.bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self.bad_json:
            raise ValueError("Expecting value: line 1 column 1")
        return self.payload


class FakeSession:
    def __init__(self, *responses, error=None):
        self.responses = list(responses)
        self.error = error
        self.calls = []
        self.closed = False

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append((method, url, timeout, kwargs))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)

    def close(self):
        self.closed = True


def make_client(*responses, error=None):
    session = FakeSession(*responses, error=error)
    return ScoreServiceClient("http://scores.test/", timeout=1.5, session=session), session


def test_get_high_scores_filters_by_game_and_sorts():
    client, session = make_client(FakeResponse([
        {"id": 1, "name": "Ada", "score": 12, "game_type": "flappy-gator"},
        {"id": 2, "name": "Pac", "score": 99, "game_type": "pac-gator"},
        {"id": 3, "name": "Bob", "score": 30, "game_type": "flappy-gator"},
    ]))
    entries = client.get_high_scores("flappy-gator")

    assert [(e.name, e.score) for e in entries] == [("Bob", 30), ("Ada", 12)]
    method, url, timeout, kwargs = session.calls[0]
    assert (method, url, timeout) == ("GET", "http://scores.test/api/highscores", 1.5)
    assert kwargs["params"] == {"game_type": "flappy-gator"}


def test_submit_score_posts_payload():
    client, session = make_client(FakeResponse({"success": True, "id": 7, "isNewHighScore": True}))
    result = client.submit_score("flappy-gator", "Player", 23)

    assert result.success and result.id == 7 and result.is_new_high_score
    method, url, _, kwargs = session.calls[0]
    assert (method, url) == ("POST", "http://scores.test/api/highscores")
    assert kwargs["json"] == {"game_type": "flappy-gator", "name": "Player", "score": 23}


@pytest.mark.parametrize("score", [-1, 2.5, "10", True])
def test_submit_rejects_invalid_scores_before_sending(score):
    client, session = make_client()
    with pytest.raises(ValueError):
        client.submit_score("flappy-gator", "Player", score)
    assert session.calls == []


def test_connection_error_is_transient():
    client, _ = make_client(error=requests.ConnectionError("refused"))
    with pytest.raises(TransientServiceError):
        client.get_high_scores("flappy-gator")


def test_timeout_is_transient():
    client, _ = make_client(error=requests.Timeout("slow"))
    with pytest.raises(TransientServiceError):
        client.submit_score("flappy-gator", "Player", 1)


def test_http_error_status_is_transient():
    client, _ = make_client(FakeResponse({"success": False}, status=500))
    with pytest.raises(TransientServiceError):
        client.submit_score("flappy-gator", "Player", 1)


def test_invalid_json_is_transient():
    client, _ = make_client(FakeResponse(bad_json=True))
    with pytest.raises(TransientServiceError):
        client.get_high_scores()


def test_unexpected_payload_shape_is_transient():
    client, _ = make_client(FakeResponse({"error": "nope"}))
    with pytest.raises(TransientServiceError):
        client.get_high_scores("flappy-gator")


def test_get_history_filters_by_game():
    client, _ = make_client(FakeResponse([
        {"score": 1, "game_type": "pac-gator"},
        {"score": 2, "game_type": "flappy-gator"},
    ]))
    assert client.get_history("flappy-gator") == [{"score": 2, "game_type": "flappy-gator"}]


def test_update_score_name():
    client, session = make_client(FakeResponse({"success": True}))
    assert client.update_score_name(7, "Gator").success
    method, url, _, kwargs = session.calls[0]
    assert (method, url, kwargs["json"]) == ("PUT", "http://scores.test/api/highscores/7", {"name": "Gator"})


def test_get_stats_fills_defaults():
    client, _ = make_client(FakeResponse({"highScore": 40, "totalGamesPlayed": 3}))
    stats = client.get_stats("flappy-gator")
    assert stats == {"highScore": 40, "totalGamesPlayed": 3, "totalScore": 0, "averageScore": 0}


def test_close_closes_session():
    client, session = make_client()
    client.close()
    assert session.closed


@pytest.mark.parametrize("payload", [
    [{"name": "Ada", "score": None, "game_type": "flappy-gator"}],
    [{"name": "Ada", "score": "n/a", "game_type": "flappy-gator"}],
    ["oops"],
])
def test_malformed_score_rows_are_transient(payload):
    client, _ = make_client(FakeResponse(payload))
    with pytest.raises(TransientServiceError):
        client.get_high_scores("flappy-gator")


@pytest.mark.parametrize("call", [
    lambda c: c.submit_score("flappy-gator", "Player", 1),
    lambda c: c.update_score_name(7, "Gator"),
    lambda c: c.get_stats("flappy-gator"),
])
def test_list_where_object_expected_is_transient(call):
    client, _ = make_client(FakeResponse([{"success": True}]))
    with pytest.raises(TransientServiceError):
        call(client)


def test_history_must_be_a_list():
    client, _ = make_client(FakeResponse({"score": 2}))
    with pytest.raises(TransientServiceError):
        client.get_history("flappy-gator")


def test_history_rows_must_be_objects():
    client, _ = make_client(FakeResponse(["oops"]))
    with pytest.raises(TransientServiceError):
        client.get_history("flappy-gator")


def test_untagged_rows_do_not_count_for_a_game():
    client, _ = make_client(FakeResponse([
        {"name": "Maze", "score": 500},
        {"name": "Ada", "score": 12, "game_type": "flappy-gator"},
    ]))
    assert [e.name for e in client.get_high_scores("flappy-gator")] == ["Ada"]


def test_untagged_history_rows_are_dropped():
    client, _ = make_client(FakeResponse([{"score": 1}, {"score": 2, "game_type": "flappy-gator"}]))
    assert client.get_history("flappy-gator") == [{"score": 2, "game_type": "flappy-gator"}]
