"""Matching of detections to existing tracks by classifier votes and distance gating."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

DISTANCE_GATE = 20.0


@dataclass
class Association:
    """Outcome of one association round.

    ``old_tracks`` maps a track index to ``(detection index, confidence)``,
    ordered by track index; ``new_tracks`` lists detections that start new
    tracks; ``used`` tells which tracks were matched.
    """

    old_tracks: dict[int, tuple[int, float]] = field(default_factory=dict)
    new_tracks: list[int] = field(default_factory=list)
    used: list[bool] = field(default_factory=list)


def distance_matrix(track_points, detections) -> np.ndarray:
    """Distances (tracks x detections) between track points and detection centres."""
    points = list(track_points)
    boxes = [getattr(d, "bbox", d) for d in detections]
    out = np.zeros((len(points), len(boxes)), dtype=np.float64)
    for i, (px, py) in enumerate(points):
        for j, box in enumerate(boxes):
            cx, cy = box.center()
            out[i, j] = math.hypot(px - cx, py - cy)
    return out


def gate_matrix(distances, num_detections, threshold=DISTANCE_GATE) -> np.ndarray:
    """Boolean gate of track/detection pairs closer than ``threshold``.

    When several tracks fall inside the gate of one detection, the track with
    more accumulated detections keeps it; on a tie the later track wins.
    """
    dist = np.asarray(distances, dtype=np.float64)
    if dist.ndim != 2:
        raise ValueError("distances must be a 2D matrix")
    counts = list(num_detections)
    if len(counts) != dist.shape[0]:
        raise ValueError("need one detection count per track")
    gate = dist < threshold
    rows, cols = gate.shape
    for i in range(rows):
        for j in range(cols):
            if not gate[i, j]:
                continue
            for k in range(i + 1, rows):
                if gate[k, j]:
                    if counts[i] > counts[k]:
                        gate[k, j] = False
                    else:
                        gate[i, j] = False
                        break
    return gate


def associate(predictions, gate, use_gate=True) -> Association:
    """Assign detections to tracks.

    ``predictions`` holds the strong-classifier score of each track (rows)
    for each detection (columns). A detection goes to the track with the
    highest positive score; the first detection claimed by a track keeps it.
    Detections without a positive score are new unless ``use_gate`` is set
    and the distance gate links them to a track.
    """
    costs = np.asarray(predictions, dtype=np.float64)
    allowed = np.array(gate, dtype=bool, copy=True)
    if costs.ndim != 2 or allowed.shape != costs.shape:
        raise ValueError("predictions and gate must be matrices of the same shape")
    num_tracks, num_detections = costs.shape

    result = Association(used=[False] * num_tracks)
    old: dict[int, tuple[int, float]] = {}

    for det in range(num_detections):
        column = costs[:, det]
        if column.size and column.max() > 0.0:
            idx = int(np.argmax(column))
            if idx not in old:
                old[idx] = (det, float(column[idx]))
            allowed[idx, det] = False
            result.used[idx] = True
        else:
            result.new_tracks.append(det)

    if use_gate:
        for i in range(num_tracks):
            for j in range(num_detections):
                if not allowed[i, j]:
                    continue
                if j in result.new_tracks:
                    result.new_tracks.remove(j)
                if i not in old:
                    old[i] = (j, float(costs[i, j]))
                result.used[i] = True

    result.old_tracks = dict(sorted(old.items()))
    return result