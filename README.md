# engineerops

Building blocks for an engineering assistant: in-memory stand-ins for
GitHub, Jira and Slack, a markdown chunker, an HTTP client for a
text-embedding service and an environment-based configuration loader.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `engineerops.github`: `PR` and `GitHubMock`, which is seeded with five
  pull requests. `list_open_prs(author="")` returns the open ones, limited
  to one author if given. `get_pr(number)` returns a PR or `None`.
- `engineerops.jira`: `Ticket` and `JiraMock`, which is thread-safe and
  seeded with tickets `ENG-1` to `ENG-4`. `list(assignee="", status="")`
  filters on whichever arguments are non-empty. `create(summary,
  description, priority, assignee)` adds an `Open` ticket with the next
  `ENG-n` key. If a `bus` object with a `publish(event, data)` method is
  passed, each new ticket is published as `jira_ticket_created`.
- `engineerops.slack`: `Message`, `SlackMock` and `UnknownChannelError`.
  `post(channel, user, text)` accepts only `#engineering`, `#oncall` and
  `#random`. It raises `UnknownChannelError` for any other channel, and
  publishes `slack_message_posted` to the optional bus.
  `recent(channel, limit)` returns up to `limit` messages, newest first.
- `engineerops.chunk`: `Chunk`, `markdown_chunks(...)` and
  `estimate_tokens(s)`. `markdown_chunks` currently returns the whole
  document as one chunk. `estimate_tokens` counts one token per four
  bytes of UTF-8.
- `engineerops.config`: `Config`, `ConfigError` and `load(environ=None)`.
  These are covered under Configuration below.
- `engineerops.embed`: `EmbedClient(base_url, timeout=10.0)` with
  `embed(texts)`, which POSTs `{"texts": [...]}` to `/embed` and returns
  the vectors. It also has `health()`, which GETs `/health`. Both raise
  `EmbedError` on transport errors, non-200 answers or malformed replies.

## Example

```python
from engineerops.jira import JiraMock
from engineerops.slack import SlackMock, UnknownChannelError

jira = JiraMock()
ticket = jira.create("Flaky test", "CI fails now and then", "High", "alice")
print(ticket.key)                 # ENG-5
print(jira.list("", "Open"))

slack = SlackMock()
slack.post("#engineering", "alice", "Deploy done")
try:
    slack.post("#nowhere", "alice", "hello")
except UnknownChannelError as exc:
    print(exc)                    # unknown channel: #nowhere
```

## Configuration

```python
import os
from engineerops.config import load, ConfigError

try:
    cfg = load(os.environ)
except ConfigError as exc:
    print(exc)                    # e.g. VAPI_PUBLIC_KEY is required
```

`VAPI_PUBLIC_KEY` and `VAPI_PRIVATE_KEY` are required. The other settings
have these defaults:

- `QDRANT_URL`: `http://localhost:6334`
- `EMBEDDER_URL`: `http://localhost:8001`
- `PORT`: `8080`

`GITHUB_SEED_REPOS` is a comma-separated list.

## What it does not do

The package has no webhook server and no command to start one. It does
not dispatch tool calls or handle end-of-call reports. The GitHub, Jira
and Slack services keep their data in memory only and talk to no real
service.