# rgbdtrack

Building blocks for tracking people across video frames. Every piece is a
small NumPy-based module that can be used and tested on its own:

- `rgbdtrack.geometry` — `Rect` (integer box with `area()`, `top_left()`,
  `center()` and `clipped(width, height)`), `Detection` (a box plus a 3D
  point) and `overlap_roi(r1, r2)`, the fraction of `r1` covered by `r2`.
- `rgbdtrack.kalman` — `KalmanFilter` with state `(x, y, dx, dy, w, h)` and
  measurement `(x, y, w, h)`; `predict()` and `correct(x, y, width, height)`.
- `rgbdtrack.track` — `Track`, one tracked target: a Kalman-smoothed box,
  detection and miss counters, an id, a colour, and the last histograms.
- `rgbdtrack.histograms` — `color_histogram` (normalised 16×16×16 colour
  histogram of masked pixels), `keypoint_maps` and `feature_histogram`
  (64-bin histogram of the descriptors of keypoints inside a box).
- `rgbdtrack.color_feature` and `rgbdtrack.color_orb_feature` —
  `ColorFeature` and `ColorOrbFeature`, features that sum a randomly chosen
  box of histogram bins (and, for `ColorOrbFeature`, a range of descriptor
  bins).
- `rgbdtrack.association` — `distance_matrix`, `gate_matrix` and
  `associate`, which match detections to tracks from per-track scores and a
  20-pixel distance gate, returning an `Association`.
- `rgbdtrack.convolution` — `conv_tri` and `conv_tri1`, separable triangle
  smoothing filters.
- `rgbdtrack.color_conversion` — `rgb2luv` and `convert_color` with the
  `ColorSpace` choices `ORIG` (RGB scaled to [0, 1]) and `LUV`.
- `rgbdtrack.natsort` — `compare_natural`, `natural_less` and
  `natural_sorted` for ordering names such as frame sequences.

Only NumPy is required.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Usage

Rectangles and overlap:

```python
from rgbdtrack.geometry import Rect, overlap_roi

a = Rect(0, 0, 10, 10)
b = Rect(5, 0, 10, 10)
a.center()           # (5, 5)
overlap_roi(a, b)    # 0.5
```

A Kalman-smoothed track:

```python
from rgbdtrack.track import Track

track = Track((20, 30), 40, 80, (255, 0, 0))
track.get_position()          # predicted state (x, y, dx, dy, w, h)
track.update((22, 31), 40, 80)
track.add_detection()
track.get_position()
print(track.bbox(), track.num_detections)
```

Histograms of a detection:

```python
import numpy as np
from rgbdtrack.geometry import Rect
from rgbdtrack.histograms import color_histogram, feature_histogram, keypoint_maps

image = np.random.default_rng(0).integers(0, 255, (120, 160, 3))
hist = color_histogram(image[30:110, 20:60])      # shape (16, 16, 16), sums to 1

keypoints = [(25.0, 40.0), (50.0, 90.0)]
descriptors = np.random.default_rng(1).random((2, 64)) * 254
index, mask = keypoint_maps(keypoints, image.shape)
feat = feature_histogram(Rect(20, 30, 40, 80), descriptors, index, mask)  # shape (64,)
```

Histogram features:

```python
import random
from rgbdtrack.color_orb_feature import ColorOrbFeature

feature = ColorOrbFeature(16, rng=random.Random(0))
feature.limits()                 # three colour ranges, then one descriptor range
feature.evaluate((hist, feat))   # sum over those bins
```

Association of detections with tracks:

```python
import numpy as np
from rgbdtrack.association import associate

scores = [[0.4, -0.1],
          [-0.2, -0.3]]              # tracks x detections
gate = np.zeros((2, 2), dtype=bool)
result = associate(scores, gate)
result.old_tracks   # {0: (0, 0.4)}
result.new_tracks   # [1]
result.used         # [True, False]
```

Natural sorting of frame names:

```python
from rgbdtrack.natsort import natural_sorted

natural_sorted(["frame10.png", "frame2.png", "frame1.png"])
# ['frame1.png', 'frame2.png', 'frame10.png']
```

## What the package does not do

- There is no complete tracker object that runs frame by frame: the pieces
  above (tracks, histograms, features, association) have to be combined by
  the caller.
- There is no boosted classifier that learns to score a detection against a
  track; `associate` takes those scores as input.
- There is no person detector, keypoint detector or descriptor extractor;
  keypoints and descriptors must come from elsewhere. Of the detector's
  channel features only the smoothing filters and the colour conversion are
  here — no gradient or HOG channels.
- There is no command-line program, no display window and no message
  publishing.