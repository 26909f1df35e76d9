"""Animated Lissajous figures encoded as GIF."""

from __future__ import annotations

import math
import random
from typing import BinaryIO, Optional

from PIL import Image

# Index 0 is the background, index 1 the trace.
_PALETTE = [0, 0, 0, 0, 255, 0]
_TRACE_INDEX = 1
_RESOLUTION = 0.001  # angular resolution
_DELAY_MS = 80  # delay between frames
_PHASE_STEP = 0.1


def lissajous(
    out: BinaryIO,
    size: int,
    cycles: int,
    n_frames: int,
    freq: Optional[float] = None,
) -> None:
    """Write an animated GIF of a Lissajous figure to out.

    The canvas covers [-size, +size] in both directions, ``cycles`` is the
    number of complete revolutions of the x oscillator and ``n_frames`` the
    number of animation frames (also used as the loop count).  ``freq`` is
    the relative frequency of the y oscillator; it is random in [0, 3) when
    not given.  Nothing is written when there are no frames.
    """
    if freq is None:
        freq = random.random() * 3.0
    side = 2 * size + 1
    limit = cycles * 2 * math.pi
    frames = []
    phase = 0.0
    for _ in range(n_frames):
        img = Image.new("P", (side, side), 0)
        img.putpalette(_PALETTE)
        pixels = img.load()
        t = 0.0
        while t < limit:
            px = size + int(math.sin(t) * size + 0.5)
            py = size + int(math.sin(t * freq + phase) * size + 0.5)
            if 0 <= px < side and 0 <= py < side:
                pixels[px, py] = _TRACE_INDEX
            t += _RESOLUTION
        phase += _PHASE_STEP
        frames.append(img)
    if not frames:
        return
    frames[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        loop=n_frames,
        duration=_DELAY_MS,
        optimize=False,
    )