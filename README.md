# mastoclient

A small, synchronous client for the Mastodon REST API, built on `requests`,
together with a command-line tool for looking at an instance and for
searching posts through an external search page.

## Installation

```
pip install mastoclient
```

For running the test suite:

```
pip install "mastoclient[test]"
pytest
```

## Registering an application

`mastoclient.apps.register_app` registers an application with a server and
returns a `mastoclient.models.Application` holding the id, client id, client
secret and an `auth_uri`, the server's `/oauth/authorize` URL built locally
from the scopes, the redirect URI and the client id.

```python
from mastoclient.apps import AppConfig, register_app

app = register_app(AppConfig(
    server="https://mastodon.example.com",
    client_name="my-client",
    scopes="read write follow",
    website="https://app.example.com",
))
print(app.client_id)
print(app.auth_uri)
```

If `redirect_uris` is left empty, the out-of-band URI
`urn:ietf:wg:oauth:2.0:oob` is sent. An `AppConfig` may carry its own
`requests.Session` in `session`. A server URL without a scheme or host
raises `ValueError`.

## Using the client

`mastoclient.client.Client` is built from a `mastoclient.transport.Config`
and an optional `requests.Session`. It can be used as a context manager,
which closes the session on exit.

```python
from mastoclient.client import Client
from mastoclient.transport import Config, Pagination

config = Config(
    server="https://mastodon.example.com",
    client_id="client-id",
    client_secret="secret",
    access_token="token",
)

with Client(config) as client:
    me = client.get_account_current_user()
    print(me.username, me.followers_count)

    # Walk through every follower, page by page.
    pagination = Pagination()
    followers = []
    while True:
        followers.extend(client.get_account_followers(me.id, pagination))
        if not pagination.max_id:
            break
```

When an access token is set it is sent as a bearer token. A `Pagination`
passed to a listing call sends its `max_id`, `since_id`, `min_id` and
`limit` (when set), and is then overwritten from the response's `Link`
header: `max_id` from the `next` link, `since_id` and `min_id` from the
`prev` link, each empty when absent.

The client has these methods:

- Accounts: `get_account`, `get_account_current_user`, `account_update`,
  `get_account_statuses`, `get_account_pinned_statuses`,
  `get_account_followers`, `get_account_following`, `get_blocks`,
  `account_follow`, `account_unfollow`, `account_block`, `account_unblock`,
  `account_mute`, `account_unmute`, `get_account_relationships`,
  `accounts_search`, `follow_remote_user`, `get_follow_requests`,
  `follow_request_authorize`, `follow_request_reject`, `get_mutes`.
- Applications: `verify_app_credentials`.
- Filters: `get_filters`, `get_filter`, `create_filter`, `update_filter`,
  `delete_filter`.
- Lists: `get_lists`, `get_account_lists`, `get_list_accounts`, `get_list`,
  `create_list`, `rename_list`, `delete_list`, `add_to_list`,
  `remove_from_list`.
- Instance: `get_instance`, `get_instance_activity`, `get_instance_peers`,
  `get_domain_blocks`.

Results are dataclasses from `mastoclient.models` (`Account`,
`Relationship`, `Filter`, `UserList`, `Instance`, `WeeklyActivity`,
`DomainBlock`, `ApplicationVerification`, ...). Statuses returned by
`get_account_statuses` and `get_account_pinned_statuses` are plain decoded
JSON dictionaries.

Profile updates only send the fields that are set:

```python
from mastoclient.models import Profile

client.account_update(Profile(display_name="New name", note="Hello"))
```

Filters need a phrase and at least one context; otherwise `create_filter`
and `update_filter` raise `ValueError` without contacting the server.
`update_filter` sends every field, with an empty `expires_in` when
`expires_at` is `None`.

```python
from mastoclient.models import Filter

client.create_filter(Filter(phrase="spoilers", context=["home", "public"]))
```

Any response other than HTTP 200 raises `mastoclient.helper.APIError`. Its
message carries the HTTP status and, when the server's JSON body has an
`error` field, that text; the status code is kept in `status_code`.

## Helpers

- `mastoclient.helper.base64_encode(data)` turns bytes or a binary file
  object into a `data:` URI, with the MIME type guessed by
  `detect_content_type`; `base64_encode_file(filename)` does the same for a
  named file. Such URIs suit the `avatar` and `header` of a `Profile`.
- `mastoclient.compat.parse_id` accepts an identifier as a string or an
  integer; `parse_sbool` accepts a boolean or a boolean string such as
  `"true"` or `"0"`.
- `mastoclient.xsearch.x_search(url, query, out)` fetches `url` with the
  query as `q` and writes the link and paragraph text of every `.post`
  element; `mikami(url, out)` searches for "三上".

## Command line

```
mastoclient --help
```

Commands:

- `mastoclient --server URL instance` prints the instance's details, its
  URLs and its statistics.
- `mastoclient --server URL instance-activity` prints the weekly activity.
- `mastoclient --server URL instance-peers` prints one known peer per line.
- `mastoclient --xsearch-url URL xsearch QUERY` searches posts through the
  given search page.
- `mastoclient --xsearch-url URL mikami` runs that search for "三上".

`--access-token` may be given for the instance commands. Errors are printed
to standard error and the command exits with status 1.

## What it does not do

The package does not post, delete or edit statuses, read timelines or
notifications, upload media, follow streaming events or run a search
through the server's own search endpoint. It does not exchange an
authorization code or a login for an access token, and it keeps no
configuration file: the server and token are given on each call. The
command line only covers instance information and the external post
search.