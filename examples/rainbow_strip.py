"""Basic example: Build a rainbow for an LED strip and pack it for the wire."""

import io
import struct

from ledcolor.colors import COLORS, hue_rainbow, lerp
from ledcolor.wire import decode, encode_many


def main():
    """Generate colors, encode them behind a count header, and read them back."""
    led_count = 12

    rainbow = hue_rainbow(led_count, saturation=0.9)
    print(f"Rainbow with {len(rainbow)} colors:")
    for i, color in enumerate(rainbow):
        print(f"  {i:2d}: {color} {color.to_hex()}")

    fade = [lerp(COLORS.RED, COLORS.BLUE, i / (led_count - 1)) for i in range(led_count)]

    # The protocol layer supplies the count; here a u16 header stands in for it
    payload = struct.pack("<H", len(fade)) + encode_many(fade)
    print(f"\nEncoded {len(fade)} colors into {len(payload)} bytes")

    stream = io.BytesIO(payload)
    (count,) = struct.unpack("<H", stream.read(2))
    decoded = decode(stream, count)
    print(f"Decoded {len(decoded)} colors, round trip ok: {decoded == fade}")


if __name__ == "__main__":
    main()
