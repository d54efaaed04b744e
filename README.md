# cascade_client

This is the core of a monitoring client as a plain Python library. It has no user interface. It
models time points, alerts, sensors, the pages of a main window, and links to devices over TCP,
a serial port or USB.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `cascade_client.timepoint`

- `TimePoint(moment)` takes a `datetime`. A naive datetime is read as local time. Any other
  argument raises `TypeError`.
  - `str()` gives local time in the form `YYYY-MM-DD HH:MM:SS`.
  - `TimePoint + timedelta` and `TimePoint - timedelta` give a new `TimePoint`.
  - `TimePoint + TimePoint` adds the second point's offset from the Unix epoch.
  - `TimePoint - TimePoint` gives a `timedelta`.
  - Time points can be compared and hashed.
  - `second()`, `minute()`, `hour()`, `day()`, `month()` and `year()` return the fields in local
    time. `month()` runs from 1 to 12.
  - `moment` is the instant as an aware UTC datetime.
- `Clock().now()` returns the current `TimePoint`.

### `cascade_client.alert`

- `AlertType` has three members: `ALARM`, `WARNING` and `INFO`, ordered from most to least severe.
- `Alert(type, name, timepoint, text, alertist_name, tags=())` is a frozen dataclass.
  - `timepoint` is a string.
  - `tags` is stored as a tuple.
  - Two alerts are equal when they have the same `name` and `alertist_name`.

### `cascade_client.page`

`Page(name)` starts in `WorkingState.OFF`. The allowed transitions are:

- `on()`: from `OFF` only.
- `off()`: from `ON` or `SUSPENDED`.
- `suspend()`: from `ON`.
- `resume()`: from `SUSPENDED`. It runs the resume hook and the state stays `SUSPENDED`.

Any other transition raises `PageStateError`.

Subclasses can override the hooks `on_on`, `on_off`, `on_suspend` and `on_resume`. The default
hooks record their event in `events`. `report()` returns `"default empty report"`.

### `cascade_client.alerts_page`

`AlertsPage(name)` starts with three sample alerts.

- `add_alert(alert)` raises `DuplicateAlertError` if an equal alert is already on the page.
- `remove_alert(alert_name, alertist_name)` does nothing when no alert matches.
- `sort_alerts(key=None)` sorts by `key` and remembers it. Without a key it uses the last key
  given, or `by_date` if none was given.
- The sort keys are `by_name`, `by_date` (the timepoint string) and `by_type` (severity).
- `alerts()` returns the alerts in their current order.

The page re-sorts after every add and every remove.

### `cascade_client.sensors_page`

`Sensor(name)` compares by name.

`SensorsPage(name)` starts empty.

- `add_sensor(sensor)` raises `DuplicateSensorError` if a sensor with that name is already on the
  page.
- `remove_sensor(sensor_name)` removes the sensor with that name.
- `sort_sensors(key=None)` sorts by `key` and remembers it. Without a key it uses the last key
  given, or `sensor_name` if none was given.
- `sensors()` returns the sensors in their current order.

### `cascade_client.pages`

- `ChartsPage`, `ScenariosPage` and `ConnectionsPage` have the `toolbar` layout
  `LIST_PAGE_TOOLBAR`. In that layout, `"|"` (`SEPARATOR`) marks a separator.
- `SettingsPage` and `LogbookPage` have an empty toolbar.
- `ConnectionsPage.add_connection()` only counts the request (see `add_requests`).
  `connections()` stays empty.
- `Chart(name)` compares by name.

### `cascade_client.main_window`

`MainWindow()` builds seven pages in this order: `alerts`, `sensors`, `connections`, `charts`,
`scenarios`, `logbook` and `settings`. It selects each page as it is added, so `settings` ends
up current.

- `get_pages()` returns the pages by name, sorted by name.
- `add_page(page)` appends a page.
  - A page that is already there is left in place.
  - A non-`Page` raises `TypeError`.
- `remove_page(page)` removes a page. If the removed page was current, a neighbour becomes current.
- `set_current_page(page)` makes a page current.
- `remove_page` and `set_current_page` raise `ValueError` for a page that is not in the window.
- `current_page()` returns the current page, or `None` when the window has no pages.
- `pages` gives the pages in stack order.

### Connections

`cascade_client.connection.Connection` is the abstract base of every connection.

- Register callbacks with `on_data_received`, `on_connection_changed` and `on_error`.
- Failures are sent to the error callbacks and raised as `ConnectionError`.
- A connection works as a context manager and disconnects on exit.

There are three implementations:

- `TcpConnection(name, host_address, port)`
  - `connect_device()` waits up to three seconds.
  - `send_data(data)` sends the bytes.
  - `read_available()` returns the bytes that have arrived and passes them to the data callbacks.
  - When the peer closes the socket, the connection disconnects.
- `ComConnection(name, port_name, baud_rate=9600, data_bits=8, parity="N", stop_bits=1, flow_control="none")`
  uses a serial port through pyserial.
  - `port_name` may also be a pyserial URL such as `loop://`.
  - `flow_control` is `"none"`, `"hardware"` or `"software"`. Any other value raises `ValueError`.
  - `available_ports()` lists the serial ports present on the machine.
- `UsbConnection(name, vendor_id, product_id)` has no transport yet. It only tracks whether it is
  connected. `send_data` raises when it is not connected.

## Examples

```python
from cascade_client.alert import Alert, AlertType
from cascade_client.alerts_page import AlertsPage, by_name

page = AlertsPage("alerts")
page.add_alert(Alert(AlertType.WARNING, "co2_high", "00-00-04", "CO2 above limit", "CO2 sensor"))
page.sort_alerts(by_name)
for alert in page.alerts():
    print(alert.name, alert.alertist_name)
```

```python
from datetime import timedelta
from cascade_client.timepoint import Clock

later = Clock().now() + timedelta(minutes=5)
print(later, later.hour())
```

```python
from cascade_client.com_connection import ComConnection

with ComConnection("loop", "loop://") as link:
    link.connect_device()
    link.send_data(b"ping")
    print(link.read_available())
```

```python
from cascade_client.tcp_connection import TcpConnection

link = TcpConnection("station", "localhost", 5000)
link.on_error(print)
try:
    link.connect_device()
except ConnectionError:
    pass
else:
    with link:
        link.send_data(b"ping")
        print(link.read_available())
```

## What it does not do

- There are no windows, toolbars, icons or list widgets. Pages and the main window only hold state.
- There is no embedded scripting engine and no interactive console.
- There is no sensor template editor.
- There is no command-line program.
- Nothing is stored to disk. Alerts, sensors and pages live only in memory.
- `TcpConnection` and `ComConnection` do not read in the background. Call `read_available()` to
  collect incoming data.