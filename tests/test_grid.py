import pytest

from sc2bot.grid import (
    PlacementOptions,
    classify_terrain,
    cluster_points,
    has_creep_around,
    is_surround_visible,
    neighbors8,
    placement_rings,
    z_height_from_raw,
)


def test_placement_options_defaults():
    options = PlacementOptions()
    assert (options.max_distance, options.step, options.random, options.addon) == (
        15,
        2,
        False,
        False,
    )


def test_z_height_bounds():
    assert z_height_from_raw(0) == pytest.approx(-16.0)
    assert z_height_from_raw(255) == pytest.approx(16.0)


def test_z_height_is_increasing():
    values = [z_height_from_raw(v) for v in range(256)]
    assert values == sorted(values)


def test_surround_visible_all():
    assert is_surround_visible(lambda p: True, (10, 10), 2) is True


def test_surround_visible_missing_corner():
    hidden = {(12, 12)}
    assert is_surround_visible(lambda p: p not in hidden, (10, 10), 2) is False


def test_surround_visible_outside_radius_ignored():
    hidden = {(13, 10)}
    assert is_surround_visible(lambda p: p not in hidden, (10, 10), 2) is True


def test_creep_corner_outside_circle_ignored():
    missing = {(12, 12)}
    assert has_creep_around(lambda p: p not in missing, (10, 10), 2) is True


def test_creep_missing_on_axis():
    missing = {(12, 10)}
    assert has_creep_around(lambda p: p not in missing, (10, 10), 2) is False


def test_placement_rings_count_and_distance():
    near = (50.5, 40.5)
    options = PlacementOptions(max_distance=15, step=2)
    rings = list(placement_rings(near, options))
    assert len(rings) == len(range(2, 15, 2))
    for distance, ring in zip(range(2, 15, 2), rings):
        for x, y in ring:
            assert max(abs(x - near[0]), abs(y - near[1])) == distance


def test_placement_rings_first_ring_order():
    ring = next(placement_rings((0.0, 0.0), PlacementOptions(step=4)))
    assert ring[:4] == [(-4.0, -4.0), (-4.0, 4.0), (-4.0, -4.0), (4.0, -4.0)]


def test_placement_rings_zero_step_rejected():
    with pytest.raises(ValueError):
        list(placement_rings((0.0, 0.0), PlacementOptions(step=0)))


def test_neighbors8_order():
    assert neighbors8((5, 7)) == [
        (6, 7),
        (4, 7),
        (5, 8),
        (5, 6),
        (6, 8),
        (4, 6),
        (6, 6),
        (4, 8),
    ]


def test_classify_terrain_splits_blockers_and_ramps():
    heights = {}
    for x in range(10):
        for y in range(10):
            heights[(x, y)] = 0 if x < 5 else 3
    pathable = {(2, 2), (4, 4), (7, 7)}
    placeable = {(7, 7)}
    blockers, ramps = classify_terrain(
        [(2, 2), (4, 4), (7, 7), (8, 8)],
        lambda p: p in pathable,
        lambda p: p in placeable,
        lambda p: heights.get(p, 0),
    )
    assert blockers == [(2, 2)]
    assert ramps == {(4, 4)}


def test_cluster_points_separate_groups():
    points = [(0, 0), (1, 0), (1, 1), (10, 10), (11, 11)]
    clusters = cluster_points(points, neighbors8)
    assert [sorted(c) for c in clusters] == [
        [(0, 0), (1, 0), (1, 1)],
        [(10, 10), (11, 11)],
    ]


def test_cluster_points_cover_input_once():
    points = [(x, 0) for x in range(0, 20, 3)] + [(1, 0)]
    clusters = cluster_points(points, neighbors8)
    flat = [p for c in clusters for p in c]
    assert sorted(flat) == sorted(points)
    assert len(flat) == len(set(flat))


def test_cluster_points_empty():
    assert cluster_points([], neighbors8) == []