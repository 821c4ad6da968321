# ochamiclient

An asyncio client for the OpenCHAMI backend services:

- **Power Control Service (PCS)**: power status, power transitions and power caps.
- **Hardware State Manager (HSM)**: state components.

It also validates node xnames, the names that identify nodes in a cluster.

## Installation

```
pip install ochamiclient
```

To run the tests, install the `test` extra:

```
pip install "ochamiclient[test]"
pytest
```

## Connecting

Every client function is a coroutine. Each takes the base URL of the API
gateway, a bearer token and the PEM certificate (bytes or text) that signed the
gateway's TLS certificate; the certificate is added to the default trust store,
and an empty value adds nothing. If the `SOCKS5` environment variable is set,
requests go through that proxy.

```python
import asyncio
from pathlib import Path

base_url = "https://api.example.com/apis"
token = "token"
root_cert = Path("ca.pem").read_bytes()
```

`ochamiclient.transport.build_client(root_cert)` returns the configured
`httpx.AsyncClient` if you want to make other calls yourself, and
`check_response(response, text_statuses)` turns a failed response into the
errors described below.

## Validating xnames

```python
from ochamiclient.xname import validate_xname_format

validate_xname_format("x1000c0s0b0n0")   # True
validate_xname_format("node001")         # False
```

## Power status

```python
from ochamiclient import power_status_client

status = asyncio.run(power_status_client.post(
    base_url, token, root_cert,
    ["x1000c0s0b0n0"], "on", "available",
))
for entry in status.status:
    print(entry.xname, entry.power_state, entry.management_state)
```

The xname list and both filters may be `None`; they are then sent as an empty
list and empty strings. The result is a `PowerStatusAll` from
`ochamiclient.power_status_types`, holding `PowerStatus` entries with
`PowerState` and `ManagementState` values.

## Power transitions

Operations are `on`, `off`, `soft-off`, `soft-restart`, `hard-restart`,
`init` and `force-off` (see `Operation.from_str` in
`ochamiclient.transitions_types`).

```python
from ochamiclient import transitions_client

async def restart():
    # Start a transition and return at once
    created = await transitions_client.post(
        base_url, token, root_cert, "soft-restart", ["x1000c0s0b0n0"]
    )
    # Start a transition and wait for it to complete
    done = await transitions_client.post_block(
        base_url, token, root_cert, "on", ["x1000c0s0b0n0"]
    )
    return created, done

asyncio.run(restart())
```

`get` lists all transitions and `get_by_id` fetches one; both return the
decoded JSON. `wait_to_complete` polls a transition every three seconds, up to
300 times, and prints a progress summary to standard error. If the transition
has not completed by then it raises `ApiError` holding the last transition seen.

## Power caps

```python
from ochamiclient import power_cap_client

task = asyncio.run(
    power_cap_client.post_snapshot(base_url, token, root_cert, ["x1000c0s0b0n0"])
)
print(task.task_id, task.task_status)
```

`get`, `get_task_id`, `post_snapshot` and `patch` all return a
`PowerCapTaskInfo` from `ochamiclient.power_cap_types`. `patch` takes a list
of `PowerCapComponent` objects.

## HSM state components

```python
from ochamiclient import components_client
from ochamiclient.components_client import ComponentFilter
from ochamiclient.component_types import Component

async def main():
    nodes = await components_client.get(
        base_url, token, root_cert, ComponentFilter(type="Node", state="Ready")
    )
    for component in nodes.components:
        print(component.id, component.state)

    one = await components_client.get_one(base_url, token, root_cert, "x1000c0s0b0n0")
    await components_client.put(
        base_url, token, root_cert, Component(id="x1000c0s0b0n0", enabled=False)
    )

asyncio.run(main())
```

Also available: `get_by_nid`, `get_query` (components under an xname),
`post`, `post_query` (with a `ComponentPostQuery`), `post_by_nid_query` (with a
`ComponentPostByNidQuery`), `delete_all` and `delete_one`. `put` raises
`MessageError` if the component has no `id`.

All data types are dataclasses with `to_dict()` giving the JSON the service
expects; the response types also have a `from_dict()` class method.

## Errors

Every error derives from `ochamiclient.transport.OchamiClientError`:

- `NetError`: the request could not be sent, the root certificate was invalid,
  or the reply could not be decoded.
- `ApiError`: the service answered with an error status; its JSON body is in
  `payload`. Also raised when a transition does not complete in time.
- `RequestError`: an HSM component call was refused with HTTP 401; the status
  code and reply text are attached.
- `MessageError`: a plain message, such as an invalid power operation, a
  failed transitions request (the reply text), or a reply missing an expected
  field.

## What this package does not do

It does not obtain tokens, manage HSM groups or boot parameters, or check that
xnames belong to a group; it only checks their format. There is no
command-line tool.