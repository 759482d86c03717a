# owohaptics

A client library for OWO haptic vests. It builds sensations in the OWO text
format, finds the OWO application on the local network over UDP and sends
sensations to it. It has no dependencies beyond the standard library.

## Installing

```
pip install .
```

The tests need pytest:

```
pip install ".[test]"
pytest
```

## Building sensations

`owohaptics.sensations.create_sensation` builds a single pulse from a
frequency (1–100), a duration in seconds (0.1–20), an intensity (0–100),
ramp-up and ramp-down times (0–2 s), an exit delay (0–2 s), a name and a
priority. Values out of range are clamped.

```python
from owohaptics.sensations import create_sensation
from owohaptics.muscles import Muscle, MusclesGroup

pulse = create_sensation(100, 0.5, 80, 0, 0, 0, "", 0)
on_chest = pulse.with_muscles(
    MusclesGroup([Muscle.pectoral_r(), Muscle.pectoral_l()]).with_intensity(60)
)
print(on_chest)          # 100,5,80,0,0,0,|0%60,1%60
```

`Muscle` has a class method for each of the ten muscles (`pectoral_r`,
`pectoral_l`, `abdominal_r`, `abdominal_l`, `arm_r`, `arm_l`, `dorsal_r`,
`dorsal_l`, `lumbar_r`, `lumbar_l`); `MusclesGroup.front()`, `back()` and
`all()` give the usual groups. Groups can be added and subtracted muscle by
muscle: shared muscles have their intensities summed or subtracted (clamped
to 0–100); addition appends muscles the left group lacks.

```python
group = MusclesGroup.back().with_intensity(40) + MusclesGroup.all().with_intensity(30)
```

Other sensation kinds are `SensationsSequence` (played one after another,
written joined by `&`) and `BakedSensation` (registered under an id and sent
by that id alone). `total_duration()` gives a sensation's length in seconds.

## Parsing

`owohaptics.parsers.parse_sensation` reads any sensation from its text form
and gives it a priority; `owohaptics.muscles.parse_muscles` reads a muscle
group such as `"0%60,1%60"`.

```python
from owohaptics.parsers import parse_sensation

sensation = parse_sensation("100,5,80,0,0,0,Hit|0%60,1%60", 3)
```

Malformed input raises `WrongSensationFormatError` or
`WrongMusclesFormatError` from `owohaptics.errors`; both are `ValueError`s.

## Baking and game authentication

A sensation can be baked under an id and a name so the application can list
it, and `GameAuth` carries the game id and the baked definitions it
announces when connecting. `GameAuth.create` keeps only baked definitions
(those containing `~`) and turns an empty id into `"0"`.

```python
from owohaptics.sensations import bake
from owohaptics.game_auth import GameAuth

baked = bake(pulse, 1, "Pulse")
print(baked.stringify())  # 1~Pulse~100,5,80,0,0,0,~0~
auth = GameAuth.create([baked.stringify()], "my-game")
```

## Connecting and sending

```python
import time
from owohaptics.owo import OWO
from owohaptics.network import ConnectionState
from owohaptics.udp_network import UDPNetwork

owo = OWO.create(UDPNetwork())
owo.configure(auth)
owo.auto_connect()                       # broadcast to find the application

start = time.monotonic()
while True:
    now_ms = int((time.monotonic() - start) * 1000)
    owo.update_status(now_ms)            # call regularly; acts every 500 ms
    if owo.state() is ConnectionState.CONNECTED:
        owo.send(on_chest)
        break
    time.sleep(0.05)

owo.stop()
owo.disconnect()
```

`OWO.create()` with no argument uses a `UDPNetwork` on port 54020.
`owo.connect(["192.0.2.10"])` connects to known addresses instead of
broadcasting. `owo.scan(now_ms)` looks for applications without connecting,
and `owo.discovered_apps()` returns the addresses found, sorted.
`owo.change_update_frequency(ms)` changes the 500 ms polling period.

A sensation whose priority is lower than that of the one still playing is
dropped until the playing one ends; `owo.stop()` clears that. Sending and
stopping do nothing while not connected. If the application reports that it
closed, the state goes back to `CONNECTING`.

`UDPNetwork` raises `NetworkError` for an invalid IPv4 address or a failed
send. Another transport can be used by subclassing
`owohaptics.network.Network` and implementing `listen`, `initialize` and
`send_to`.

## What it does not do

The package is a library only: it has no command-line tool. Messages are
sent as plain text; `SendEncryptedMessage` sends them to every connected
address without encrypting them. Only IPv4 is supported.