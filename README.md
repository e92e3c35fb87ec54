# mmoffline

This is the core of an offline order-taking client. A sales agent loads reference data
(clients, products, groups, measures and so on) from a web back end. The agent then builds
documents and entries offline. This package holds the parts that do not depend on a GUI
toolkit. It uses only the standard library.

## Modules

- `mmoffline.query_templates`
  - `QueryId` enumerates the server queries.
  - `DEFAULT_TEMPLATES` and `TEMPLATE_NAMES` hold the URL templates and their INI keys.
  - `load_templates(path)` reads the templates from the `General` section of an INI file. It writes defaults back for entries that are missing or empty, and creates the file if needed.
  - `fill_placeholder` and `fill_template` substitute `%1`, `%2`, ... placeholders, lowest number first.
  - `check_arg_quantity(query_id, argc)` tells whether a query takes `argc` extra arguments.
- `mmoffline.error_parser`
  - `contains_error(doc)` checks a decoded JSON object for an `error` field.
  - `make_error(doc)` extracts that error into a `ParsedError`.
- `mmoffline.uniresult`
  - `UniformJsonObject` is a flat, string-valued view of a JSON object with ordered keys.
  - It has indexing by position or name, `push`, `set_keys`, `set_fields`, `add_field`, `map_values`, `map_values_with_defaults`, `make_table_definition` and `make_table_insertion`.
  - `join_fields` is the helper these build on.
- `mmoffline.linear_parser`
  - `parse_items(obj)` accepts the response text or its decoded root object and reads its `items` array into a `ParseResult`.
  - It raises `ParseError` for invalid JSON, a missing `items` field, or a database error (available as `ParseError.error`).
- `mmoffline.awaiter`
  - `RequestAwaiter(interval)` waits for one reply future or a timeout given in milliseconds.
  - It decodes the reply body as CP1251 and stores `restext` and `errtext`.
  - It calls the callables in `success_handlers`, `received_handlers` and `timeout_handlers`.
  - `wait(timeout)` blocks until the outcome is known.
  - `strip_rse` removes the `r...({...});` wrapper from a response.
  - `Reply` describes a finished reply.
- `mmoffline.engine`
  - `HttpUpdateEngine(url, templates, transport)` builds query URLs from templates and sends them through a transport. The default transport is `urllib_transport`, which runs a GET in a background thread.
  - The engine keeps the session id, the user id and the query counter.
  - Its methods are `init_connection`, `send_query`, `initiate_session`, `exec_query`, `exec_autofill_query` and `set_session`.
  - `exec_query` raises `ValueError` on a wrong argument count and sends nothing without a session.
- `mmoffline.overlay`
  - `ProcessingCountdown` holds the geometry and countdown state of an "awaiting network response" overlay.
  - Helpers: `find_point_on`, `make_triangle`, `point_on_line`, `make_parallelogram`.
- `mmoffline.spinbox`
  - `SpinBox(SpinType)` models an integer, float, time or date spin box.
  - It supports a range, precision, stepping, clearing and display text, and notifies `change_handlers`.
- `mmoffline.delegates`
  - Size hints for list rows: `client_size_hint`, `document_size_hint`, `entry_size_hint`, `product_size_hint` and `group_size_hint`, all using `FontMetrics`.
  - Text helpers: `short_document_id`, `format_entry_total` and `format_price`.
  - `zebra_row_color` and the delegate colour constants.
- `mmoffline.icon_button`
  - `IconButton` sizes its icon to a share of the button height.
- `mmoffline.branches`
  - `DocumentBranch` is the screen flow for creating a document and its entries. It saves the document only with its first entry.
  - `LogBranch` is the screen flow for deleting or editing saved documents.
  - Both save through an `EntityStore` that you supply.

## Example

```python
from mmoffline.awaiter import RequestAwaiter
from mmoffline.engine import HttpUpdateEngine
from mmoffline.linear_parser import ParseError, parse_items
from mmoffline.query_templates import QueryId, load_templates

templates = load_templates("request_templates.ini")
engine = HttpUpdateEngine("http://localhost/", templates)
engine.set_session("session-id", "42")

awaiter = RequestAwaiter(5000)
engine.exec_query(QueryId.GET_TIPS, "1", awaiter=awaiter)
if awaiter.wait(6) and not awaiter.errtext:
    try:
        result = parse_items(awaiter.restext)
        print([item.keys() for item in result.items])
    except ParseError as exc:
        print("server error:", exc)
```

## What the package does not do

The package has no graphical screens and no command-line program. It does not store
clients, products, documents or entries itself: the branch classes hand entities to an
`EntityStore` that the caller provides. It also does not turn parsed items into typed
entities. `parse_items` returns `UniformJsonObject` values, and interpreting them is up to
the caller.

The tests use pytest, which the `test` extra installs.