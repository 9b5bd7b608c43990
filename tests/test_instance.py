import re
from urllib.parse import urlsplit

import pytest
import responses

from mastoclient.helper import APIError
from mastoclient.instance import InstanceAPI
from mastoclient.transport import Config

SERVER = "https://mastodon.example.com"
SERVER_ERROR = (500, {}, "Internal Server Error\n")


@pytest.fixture
def mock():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    return InstanceAPI(
        Config(server=SERVER, client_id="foo", client_secret="secret", access_token="token")
    )


def serve(mock, handler):
    pattern = re.compile(re.escape(SERVER) + r"/.*")
    for method in ("GET", "POST", "PUT", "PATCH", "DELETE"):
        mock.add_callback(method, pattern, callback=handler)


def fail_first(body):
    state = {"failed": False}

    def handler(request):
        if not state["failed"]:
            state["failed"] = True
            return SERVER_ERROR
        return (200, {}, body)

    return handler


def test_get_instance(mock, client):
    serve(
        mock,
        fail_first(
            '{"title": "mastodon", "uri": "http://mstdn.example.com", '
            '"description": "test mastodon", "email": "mstdn@mstdn.example.com", '
            '"contact_account": {"username": "mattn"}}'
        ),
    )
    with pytest.raises(APIError):
        client.get_instance()
    instance = client.get_instance()
    assert instance.title == "mastodon"
    assert instance.uri == "http://mstdn.example.com"
    assert instance.description == "test mastodon"
    assert instance.email == "mstdn@mstdn.example.com"
    assert instance.contact_account.username == "mattn"


def test_get_instance_more(mock, client):
    serve(
        mock,
        fail_first(
            '{"title": "mastodon", "uri": "http://mstdn.example.com", '
            '"description": "test mastodon", "email": "mstdn@mstdn.example.com", '
            '"version": "0.0.1", "urls":{"foo":"http://stream1.example.com", '
            '"bar": "http://stream2.example.com"}, '
            '"thumbnail": "http://mstdn.example.com/logo.png", '
            '"configuration":{"accounts": {"max_featured_tags": 10}, '
            '"statuses": {"max_characters": 500}}, '
            '"stats":{"user_count":1, "status_count":2, "domain_count":3}}'
        ),
    )
    with pytest.raises(APIError):
        client.get_instance()
    instance = client.get_instance()
    assert instance.title == "mastodon"
    assert instance.uri == "http://mstdn.example.com"
    assert instance.description == "test mastodon"
    assert instance.email == "mstdn@mstdn.example.com"
    assert instance.version == "0.0.1"
    assert instance.urls["foo"] == "http://stream1.example.com"
    assert instance.urls["bar"] == "http://stream2.example.com"
    assert instance.thumbnail == "http://mstdn.example.com/logo.png"
    assert instance.stats.user_count == 1
    assert instance.stats.status_count == 2
    assert instance.stats.domain_count == 3

    config = instance.get_config()
    assert config.accounts == {"max_featured_tags": 10}
    assert config.statuses == {"max_characters": 500}
    assert config.polls is None


def test_get_instance_activity(mock):
    serve(
        mock,
        fail_first('[{"week":"1516579200","statuses":"1","logins":"1","registrations":"0"}]'),
    )
    client = InstanceAPI(Config(server=SERVER))
    with pytest.raises(APIError):
        client.get_instance_activity()
    activity = client.get_instance_activity()
    assert activity[0].week == "1516579200"
    assert activity[0].logins == 1
    assert activity[0].statuses == 1
    assert activity[0].registrations == 0


def test_get_instance_peers(mock):
    serve(mock, fail_first('["mastodon.social","mstdn.jp"]'))
    client = InstanceAPI(Config(server=SERVER))
    with pytest.raises(APIError):
        client.get_instance_peers()
    peers = client.get_instance_peers()
    assert peers == ["mastodon.social", "mstdn.jp"]


def test_get_domain_blocks(mock, client):
    paths = []

    def handler(request):
        paths.append(urlsplit(request.url).path)
        return (
            200,
            {},
            '[{"domain":"bad.example.com","digest":"abc","severity":"suspend"}]',
        )

    serve(mock, handler)
    blocks = client.get_domain_blocks()
    assert paths == ["/api/v1/instance/domain_blocks"]
    assert len(blocks) == 1
    assert blocks[0].domain == "bad.example.com"
    assert blocks[0].digest == "abc"
    assert blocks[0].severity == "suspend"