import io

import pytest
import responses

from mastoclient.cli import main, show_instance, show_instance_activity, show_instance_peers
from mastoclient.client import Client
from mastoclient.helper import APIError
from mastoclient.transport import Config

SERVER = "http://mstdn.example.com"


@pytest.fixture
def mock():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    with Client(Config(server=SERVER, access_token="token")) as api:
        yield api


def test_instance_title_shown(mock, client):
    mock.add(responses.GET, SERVER + "/api/v1/instance", json={"title": "zzz"})
    out = io.StringIO()
    show_instance(client, out)
    assert "zzz" in out.getvalue()
    assert out.getvalue() == (
        "URI        : \nTitle      : zzz\nDescription: \nEMail      : \n"
    )


def test_instance_full_output(mock, client):
    mock.add(
        responses.GET,
        SERVER + "/api/v1/instance",
        json={
            "title": "mastodon",
            "uri": "http://mstdn.example.com",
            "description": "test mastodon",
            "email": "mstdn@example.com",
            "version": "0.0.1",
            "thumbnail": "http://mstdn.example.com/logo.png",
            "urls": {"foo": "http://stream1.example.com", "bar": "http://stream2.example.com"},
            "stats": {"user_count": 1, "status_count": 2, "domain_count": 3},
        },
    )
    out = io.StringIO()
    show_instance(client, out)
    assert out.getvalue().splitlines() == [
        "URI        : http://mstdn.example.com",
        "Title      : mastodon",
        "Description: test mastodon",
        "EMail      : mstdn@example.com",
        "Version    : 0.0.1",
        "Thumbnail  : http://mstdn.example.com/logo.png",
        "bar: http://stream2.example.com",
        "foo: http://stream1.example.com",
        "User Count   : 1",
        "Status Count : 2",
        "Domain Count : 3",
    ]


def test_instance_error_raises(mock, client):
    mock.add(responses.GET, SERVER + "/api/v1/instance", status=500)
    with pytest.raises(APIError):
        show_instance(client, io.StringIO())


def test_instance_activity(mock, client):
    mock.add(
        responses.GET,
        SERVER + "/api/v1/instance/activity",
        json=[{"week": "1516579200", "statuses": "1", "logins": "1", "registrations": "0"}],
    )
    out = io.StringIO()
    show_instance_activity(client, out)
    assert out.getvalue() == (
        "Logins        : 1\n"
        "Registrations : 0\n"
        "Statuses      : 1\n"
        "Week          : 1516579200\n"
    )


def test_instance_peers(mock, client):
    mock.add(
        responses.GET,
        SERVER + "/api/v1/instance/peers",
        json=["mastodon.social", "mstdn.jp"],
    )
    out = io.StringIO()
    show_instance_peers(client, out)
    assert out.getvalue() == "mastodon.social\nmstdn.jp\n"


def test_main_instance(mock, capsys):
    mock.add(responses.GET, SERVER + "/api/v1/instance", json={"title": "zzz"})
    status = main(["--server", SERVER, "--access-token", "token", "instance"])
    assert status == 0
    assert "Title      : zzz" in capsys.readouterr().out


def test_main_reports_server_error(mock, capsys):
    mock.add(responses.GET, SERVER + "/api/v1/instance/peers", status=500)
    status = main(["--server", SERVER, "instance-peers"])
    assert status == 1
    assert "500" in capsys.readouterr().err


def test_main_requires_server():
    with pytest.raises(SystemExit) as excinfo:
        main(["instance"])
    assert excinfo.value.code == 2


def test_main_xsearch(mock, capsys):
    mock.add(
        responses.GET,
        "http://search.example.com/",
        body=(
            '<div class="post"><div class="mst_content">'
            '<a href="http://example.com/@test/1"><p>test status</p></a></div></div>'
        ),
    )
    status = main(["--xsearch-url", "http://search.example.com/", "xsearch", "test"])
    assert status == 0
    assert capsys.readouterr().out == "http://example.com/@test/1\ntest status\n\n"


def test_main_xsearch_requires_url():
    with pytest.raises(SystemExit) as excinfo:
        main(["mikami"])
    assert excinfo.value.code == 2