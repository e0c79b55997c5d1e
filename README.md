# lcbasetools

A collection of small, dependency-free building blocks: linked lists, a
stack and a queue, clamped linear mapping, piecewise linear curves, 24-bit
colors with 16-bit (565) packing, a polled countdown timer, a running
average, a text ring buffer and a couple of string helpers.

## What is inside

| Module | What it gives you |
| --- | --- |
| `lcbasetools.lists` | `LinkListObj`, `LinkList`, `Stack`, `Queue` and `DblLinkListObj`: single and double linked lists with sorting, indexing and searching. |
| `lcbasetools.mapper` | `Mapper`: a clamped linear map from one range to another, with integration under the line. |
| `lcbasetools.multimap` | `MultiMap`: a piecewise linear curve built from points added in any order; map values onto it and integrate over it. |
| `lcbasetools.colors` | `RGBPack`, `ColorObj`, `ColorMapper` and `ColorMultiMap`: 24-bit colors, 16-bit (565) packing, greyscale, blending and color gradients. Named colors such as `RED`, `BLUE` and `WHITE` are ready to use. |
| `lcbasetools.timer` | `TimeObj`: a timer that "dings" when it runs out, can be stepped for drift-free repeats and reports the fraction of time left. |
| `lcbasetools.running_avg` | `RunningAvg`: a running average over the last n values, with minimum, maximum, delta, endpoint delta, standard deviation and optional input limits. |
| `lcbasetools.text_buff` | `TextBuff`: a fixed-size buffer for streamed text, optionally overwriting the oldest characters. |
| `lcbasetools.str_tools` | `up_case`, `lwr_case` and `TempStr`. |

## Examples

Mapping one range onto another, with clamping:

```python
from lcbasetools.mapper import Mapper

scale = Mapper(0, 10, 0, 100)
scale.map(5)                # 50.0
scale.map(20)               # 100.0, clamped to the end of the range
scale.integrate()           # 500.0, the area under the whole line
```

Fitting a curve with a handful of points and reading it back:

```python
from lcbasetools.multimap import MultiMap

curve = MultiMap()
curve.add_point(0, 0)
curve.add_point(100, 10)
curve.add_point(50, 8)      # order does not matter

curve.map(25)               # 4.0, halfway between the first two points
curve.integrate(0, 100)     # 650.0, the area under the whole curve
```

Smoothing noisy readings:

```python
from lcbasetools.running_avg import RunningAvg

smoother = RunningAvg(5)
for reading in (10, 12, 11, 50, 9):
    smoothed = smoother.add_data(reading)

smoothed                                  # 18.4
smoother.maximum(), smoother.minimum()    # (50, 9)
```

Values outside limits set with `set_limits(lower, upper)` are dropped and
leave the average as it was.

Buffering streamed text and reading it back a string at a time:

```python
from lcbasetools.text_buff import TextBuff

buffer = TextBuff(32)
buffer.add_str("hello", True)
buffer.add_str("world", True)
buffer.read_str()           # "hello"
buffer.read_str()           # "world"
```

Working with colors:

```python
from lcbasetools.colors import BLACK, WHITE, ColorMapper, ColorObj

orange = ColorObj.from_color16(0xFC00)    # ColorObj(red=255, green=128, blue=0)
orange.color16()                          # 0xFC00
orange.greyscale()                        # 128

ColorMapper(BLACK, WHITE).map(50)         # ColorObj(red=128, green=128, blue=128)
```

Timing with an injected clock (microseconds as an integer); by default
`TimeObj` uses the system's monotonic clock:

```python
from lcbasetools.timer import TimeObj

now = [0]
timer = TimeObj(5, clock=lambda: now[0])  # 5 ms, started at once
timer.ding()                # False
now[0] = 6000
timer.ding()                # True, and stays True until restarted
```

Stacks and queues hold `LinkListObj` nodes; subclass it and override
`is_greater_than` and `is_less_than` to make a `LinkList` sortable with
`sort(ascending)`.

## What it does not do

There is no background scheduler or idle loop here: nothing runs on its own,
and `TimeObj` only reports expiry when you poll `ding()`. The package also
does no input or output of any kind — no pins, buttons, analog readings or
serial lines. It provides the data structures and calculations; wiring them
to a device or an event loop is left to your program.

## Requirements

Python 3.10 or later. The package has no runtime dependencies; the test
suite uses pytest (`pip install .[test]`).