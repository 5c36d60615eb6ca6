# vgpreader

Building blocks for a small paged text reader that draws onto a
monochrome or grayscale framebuffer.

## Modules

- `vgpreader.framebuf`: `GrayFrameBuffer` (one byte per pixel) and
  `MonoFrameBuffer` (one bit per pixel, vertical LSB-first bytes, with a
  two-byte color header). Both offer `get_pixel`, `set_pixel`, `clear`,
  `fill_rect`, `draw_hline`, `draw_vline`, `draw_line` and `blit`, clipped
  at the frame edges. `COLOR_CLEAR` and `COLOR_SET` are the two standard
  colors.
- `vgpreader.bmfont`: `BitmapFont` lays out UTF-8 text (bytes or `str`)
  within optional width and height limits. `draw_text` renders it and
  returns the number of bytes consumed. `text_width` measures text, and
  `text_offset` tells how many bytes fit, which is how a page end is found.
  `last_char_start` steps back to the start of the previous character.
- `vgpreader.fonts`: `AsciiFont` and the built-in fonts `quan_8x8()`
  (proportional) and `unifont_8x16()` (fixed width). Both cover the
  printable ASCII characters from `!` to `~`.
- `vgpreader.ui`: `text_area` fills a box with a background color and draws
  wrapped text inside it, aligned by the `Align` flags (`HCENTER`,
  `HRIGHT`, `VCENTER`, `VBOTTOM`).
- `vgpreader.env`: `Host` is the abstract interface a host implements, with
  `get_feature` and `call`. `Environment` wraps a host with typed helpers:
  screen size and format, tick counter, trace output, save storage, the
  real-time clock and the raw gamepad key mask. `Feature`, `Function` and
  `ColorFormat` hold the identifiers.
- `vgpreader.screen`: `Screen` creates the frame buffer that matches the
  host's color format (`init`), releases it (`deinit`), and sends its
  pixels to the host (`flush`).

## Install

```
pip install .
```

## Example

```python
from vgpreader.framebuf import MonoFrameBuffer
from vgpreader.fonts import quan_8x8
from vgpreader.ui import Align, text_area

frame = MonoFrameBuffer(128, 64, 0xFF)
font = quan_8x8()
text_area(font, "Hello, reader!", frame, 0, 0, 128, 64,
          Align.HCENTER | Align.VCENTER, 0xFF, 0x00)
print(frame.get_pixel(64, 32))
```

To drive a screen, subclass `Host` with your own `get_feature` and `call`.
Then pass an `Environment` over it to `Screen`:

```python
from vgpreader.env import Environment, Host
from vgpreader.screen import Screen

class MyHost(Host):
    def get_feature(self, feature_id):
        return {0: (128 << 12) | 64, 1: 1}.get(feature_id, 0)

    def call(self, function_id, *args):
        return 0

screen = Screen(Environment(MyHost()))
screen.init()
screen.frame.fill_rect(0, 0, 10, 10, 0xFF)
screen.flush()
```

## What it does not do

The package has no reader program and no command to run. It does not page
through a book, turn key presses into events, or format output
printf-style. `Environment.gamepad_status` only returns the raw key mask.
Fonts beyond the two built-in ASCII fonts must be supplied as `BitmapFont`
glyph tables by the caller.

## Tests

```
pip install .[test]
pytest
```