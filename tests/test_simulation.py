import math

import pytest

from fireworks import spark
from fireworks.rng_service import RNGService
from fireworks.simulation import FireworkSimulation


class RecordingPainter:
    def __init__(self):
        self.calls = []

    def fade(self, width, height):
        self.calls.append(("fade", width, height))

    def draw_dot(self, dot):
        self.calls.append(("dot", dot))

    def draw_projectile(self, proj):
        self.calls.append(("projectile", proj))

    def draw_spark(self, s):
        self.calls.append(("spark", s.alpha))


@pytest.fixture
def sim():
    return FireworkSimulation(800, 600, rng=RNGService(2024))


def run_until_no_projectiles(sim, limit=500):
    for _ in range(limit):
        sim.tick()
        if not sim.projectiles:
            return
    raise AssertionError("projectiles never exploded")


def test_initial_state(sim):
    assert len(sim.dots) == 150
    assert sim.projectiles == [] and sim.sparks == []
    assert sim.celebrating is False


def test_launch_is_queued_until_tick(sim):
    sim.launch()
    assert sim.projectiles == []
    assert sim.pending_launches == 1
    summary = sim.tick()
    assert summary["launched"] == 1
    assert len(sim.projectiles) == 1
    assert sim.pending_launches == 0


def test_launch_origin_and_random_target_bounds(sim):
    for _ in range(200):
        x, y = sim.random_target()
        assert 100 <= x < 700
        assert 50 <= y < 300
    sim.launch()
    sim.tick()
    assert sim.projectiles[0].origin == (400, 600)


def test_single_projectile_yields_one_burst(sim):
    sim.launch()
    sim.tick()
    target = sim.projectiles[0].target
    total_spawned = 0
    for _ in range(500):
        summary = sim.tick()
        total_spawned += summary["sparks_spawned"]
        if summary["exploded"]:
            assert summary["exploded"] == 1
            break
    assert sim.projectiles == []
    assert total_spawned == 50
    assert len(sim.sparks) == 50
    # burst is anchored at the aim point; sparks have moved one tick from it
    assert all(abs(s.y - target[1]) <= 11 for s in sim.sparks)


def test_zero_distance_launch_bursts_at_shared_point(sim, monkeypatch):
    sites = []
    real_spawn_burst = spark.spawn_burst

    def recording_spawn_burst(site, count, rng):
        sites.append(site)
        return real_spawn_burst(site, count, rng)

    monkeypatch.setattr(spark, "spawn_burst", recording_spawn_burst)

    point = (400, 600)  # equals the launch origin
    sim.launch(target=point)
    sim.tick()  # released and marked exploded
    assert sim.projectiles[0].exploded
    summary = sim.tick()
    assert summary["exploded"] == 1
    assert summary["sparks_spawned"] == 50
    assert sim.projectiles == []
    assert len(sim.sparks) == 50
    assert sites == [point]
    # Undo the single spark pass: every spark started at the shared point
    for s in sim.sparks:
        assert s.x - math.cos(s.angle) * s.speed == pytest.approx(point[0])
        assert s.y - math.sin(s.angle) * s.speed - s.gravity == pytest.approx(point[1])


def test_simultaneous_explosions_are_all_removed(sim):
    for _ in range(3):
        sim.launch(target=sim.launch_origin)
    sim.tick()
    assert len(sim.projectiles) == 3
    summary = sim.tick()
    assert summary["exploded"] == 3
    assert sim.projectiles == []
    assert len(sim.sparks) == 150


def test_sparks_expire_and_are_never_drawn_with_negative_alpha(sim):
    painter = RecordingPainter()
    sim.launch(target=sim.launch_origin)
    for _ in range(100):
        sim.tick(painter)
    assert sim.sparks == []
    alphas = [c[1] for c in painter.calls if c[0] == "spark"]
    assert alphas and min(alphas) > 0


def test_celebrating_spawns_randomly(sim):
    sim.set_celebrating(True)
    launched = sum(sim.tick()["launched"] for _ in range(400))
    # p = 0.05 per tick -> ~20 expected
    assert 5 <= launched <= 45


def test_not_celebrating_never_spawns(sim):
    assert sum(sim.tick()["launched"] for _ in range(300)) == 0


def test_launch_burst_stagger(sim):
    sim.launch_burst(3, stagger=2)
    launched = [sim.tick()["launched"] for _ in range(6)]
    assert launched[:5] == [1, 0, 1, 0, 1]
    assert sim.pending_launches == 0


def test_launch_burst_rejects_negative(sim):
    with pytest.raises(ValueError):
        sim.launch_burst(-1)
    with pytest.raises(ValueError):
        sim.launch_burst(2, stagger=-1)
    with pytest.raises(ValueError):
        sim.launch(delay=-1)


def test_frame_order(sim):
    painter = RecordingPainter()
    sim.launch()
    sim.tick()
    sim.tick(painter)
    kinds = [c[0] for c in painter.calls]
    assert kinds[0] == "fade"
    assert kinds.count("fade") == 1
    assert kinds.count("dot") == 150
    assert kinds.index("projectile") > max(i for i, k in enumerate(kinds) if k == "dot")


def test_resize_keeps_particle_positions(sim):
    sim.launch()
    sim.tick()
    before_dots = [(d.x, d.y) for d in sim.dots]
    before_proj = sim.projectiles[0].pos
    sim.resize(320, 240)
    assert [(d.x, d.y) for d in sim.dots] == before_dots
    assert sim.projectiles[0].pos == before_proj
    assert sim.launch_origin == (160, 240)
    sim.tick()
    for d in sim.dots:
        assert 0 <= d.x <= 320 and 0 <= d.y <= 240


def test_degenerate_viewport_does_not_fail():
    sim = FireworkSimulation(0, 0, rng=RNGService(5))
    sim.set_celebrating(True)
    sim.launch_burst(3)
    for _ in range(50):
        sim.tick()
    sim.resize(-10, -10)
    x, y = sim.random_target()
    assert (x, y) == (-5, -5)
    for _ in range(20):
        sim.tick()


def test_reset_clears_collections(sim):
    sim.launch_burst(4)
    sim.tick()
    sim.reset()
    assert sim.projectiles == [] and sim.sparks == []
    assert sim.pending_launches == 0
    assert len(sim.dots) == 150
