# motorwatch

Building blocks for monitoring the condition of an electric motor. The package
turns raw readings from a motor's sensors into physical quantities:

- `motorwatch.adxl345`: an ADXL345 three-axis accelerometer reached through
  any object that offers register reads and writes.
- `motorwatch.crc8`: the 8-bit CRC used on the 1-Wire bus
  (x^8 + x^5 + x^4 + 1).
- `motorwatch.tachometer`: shaft speed in RPM from tachometer pulse
  timestamps on a wrapping 32-bit microsecond counter.
- `motorwatch.power`: RMS voltage and current from interleaved 12-bit ADC
  samples, and the calibration factors for both channels.
- `motorwatch.aiformat`: packing and unpacking of the 32-bit array format
  words used by an embedded neural-network runtime.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

### Accelerometer

`ADXL345` needs a bus object with two methods:
`read_register(address, register, length) -> bytes` and
`write_register(address, register, value)`.

```python
from motorwatch.adxl345 import ADXL345, DeviceNotFoundError

sensor = ADXL345(bus)          # default address 0x53
sensor.initialize()            # raises DeviceNotFoundError if the ID is not 0xE5
sensor.set_range(1)            # range bits 0..3, full resolution kept
x, y, z = sensor.read_xyz()    # acceleration in g
```

`initialize` sets a 200 Hz data rate, full resolution with range bits 1, and
measurement mode. `decode_axes(raw, scale)` turns the six little-endian data
bytes into `(x, y, z)` without a bus.

### CRC-8

```python
from motorwatch.crc8 import crc8, check_crc8

crc8(b"\x28\xff\x00\x00\x00\x00\x00")   # CRC of the bytes
check_crc8(scratchpad)                  # True when the last byte matches
```

`crc8` raises `ValueError` for empty input; `check_crc8` needs at least two
bytes.

### Speed

```python
from motorwatch.tachometer import RpmTracker, elapsed_us

tracker = RpmTracker()   # rated 1500 RPM, max 3000 RPM, 1 pulse/rev
tracker.pulse(now_us)    # call on every tachometer edge
tracker.tick(now_us)     # call periodically to apply the stop timeout
print(tracker.rpm())
```

Pulses closer together than the maximum speed allows, or a second or more
apart, are ignored. New readings above the rated speed are dropped; the rest
are smoothed with a factor of 0.2. Once no pulse has come for the stop timeout
(3 s by default), each tick multiplies the speed by 0.97 until it falls below
10 RPM, when it is set to zero. `elapsed_us(now_us, last_us)` gives the time
between two counter values, allowing for one wrap.

### Power

```python
from motorwatch.power import PowerCalibration, analyse_samples

reading = analyse_samples(adc_buffer, PowerCalibration())
print(reading.voltage, reading.current, reading.raw_peak)
```

Even positions of `adc_buffer` hold voltage-channel codes and odd positions
hold current-sensor codes. `PowerReading` also carries the largest, smallest
and half peak-to-peak voltage codes.

Calibration:

```python
from motorwatch.power import (
    PowerCalibration, current_rms, current_scale_factor, voltage_calibration_factor,
)

baseline = current_rms(unloaded_current_codes)
loaded = current_rms(loaded_current_codes)          # with a 0.444 A load
calibration = PowerCalibration(
    voltage_factor=voltage_calibration_factor(voltage_codes, 230.0),
    current_baseline=baseline,
    current_scale=current_scale_factor(baseline, loaded),
)
```

`voltage_rms` and `current_rms` give the uncalibrated RMS of one channel.

### Model format words

```python
from motorwatch.aiformat import FormatType, decode_format, encode_format, integer_bits

fmt = encode_format(FormatType.Q, sign=1, complex_=0, pmask=0, bits=8, fbits=7, ldiv=0)
decode_format(fmt).family   # FormatType.Q
integer_bits(fmt)           # 0
```

`format_flags`, `strip_flags`, `same_format` and `mask_q` read and clear the
flag and Q-format fields.

## What the package does not do

It has no command-line program and no monitoring loop. It does not drive a
1-Wire bus or read a temperature sensor (only the CRC-8 is provided), does not
compute vibration features from accelerometer windows, and does not score
motor health or produce reports. Those pieces are left to the code that uses
these modules.