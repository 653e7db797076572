import math

from dino_dash.config import (
    DINO_BODY_HEIGHT,
    DINO_BODY_WIDTH,
    DINO_X,
    DUCK_SCALE,
    FAST_FALL_MULTIPLIER,
    GROUND_Y,
    JUMP_VELOCITY,
    OBSTACLE_HEIGHT,
    OBSTACLE_WIDTH,
    WINDOW_HEIGHT,
)
from dino_dash.entities import (
    CACTUS_SIZES,
    Bird,
    Cactus,
    CactusType,
    Comet,
    EntityKind,
    Dino,
    GroundRocket,
    Meteor,
    Star,
    Ufo,
)


def airborne_dino(ticks: int) -> Dino:
    dino = Dino()
    dino.jump()
    for _ in range(ticks):
        dino.integrate(1.0)
    return dino


def test_jump_only_from_ground() -> None:
    """Jump launches from the ground and is refused in the air."""
    dino = Dino()
    assert dino.jump() is True
    assert dino.airborne
    assert dino.vy == JUMP_VELOCITY
    dino.integrate(1.0)
    assert dino.jump() is False


def test_air_jump_does_not_change_trajectory() -> None:
    """Jumping mid-air leaves the trajectory untouched."""
    plain = airborne_dino(5)
    pressed = airborne_dino(5)
    pressed.jump()
    for _ in range(60):
        plain.integrate(1.0)
        pressed.integrate(1.0)
        pressed.jump()
        assert (plain.y, plain.vy, plain.airborne) == (pressed.y, pressed.vy, pressed.airborne)


def test_position_stays_between_ceiling_and_ground() -> None:
    """Vertical position stays within [0, ground] at any frame scale."""
    dino = Dino()
    for scale in (0.3, 1.0, 2.0):
        for _ in range(200):
            dino.jump()
            dino.integrate(scale)
            assert 0.0 <= dino.y <= GROUND_Y


def test_ceiling_clamp() -> None:
    """Hitting the top of the screen clamps position and stops the rise."""
    dino = Dino()
    dino.jump()
    dino.y = 5.0
    dino.integrate(1.0)
    assert dino.y == 0.0
    assert dino.vy == 0.0
    assert dino.airborne


def test_landing_clamps_to_ground() -> None:
    """Landing snaps to the ground and zeroes velocity."""
    dino = airborne_dino(200)
    assert dino.y == GROUND_Y
    assert dino.vy == 0.0
    assert not dino.airborne


def test_fast_fall_once_per_press() -> None:
    """Each duck press while falling multiplies velocity once."""
    dino = airborne_dino(25)
    assert dino.vy > 0.0
    falling = dino.vy
    dino.start_duck()
    assert math.isclose(dino.vy, falling * FAST_FALL_MULTIPLIER)
    # Held key repeat is not a new press
    dino.start_duck()
    assert math.isclose(dino.vy, falling * FAST_FALL_MULTIPLIER)
    dino.end_duck()
    dino.start_duck()
    assert math.isclose(dino.vy, falling * FAST_FALL_MULTIPLIER**2)


def test_duck_while_rising_keeps_velocity() -> None:
    """Ducking on the way up does not change velocity."""
    dino = airborne_dino(2)
    rising = dino.vy
    dino.start_duck()
    assert dino.vy == rising


def test_ducking_gravity_is_stronger() -> None:
    """Gravity is stronger while duck is held."""
    plain = airborne_dino(25)
    ducked = airborne_dino(25)
    ducked.ducking = True
    plain.integrate(1.0)
    ducked.integrate(1.0)
    assert ducked.vy > plain.vy


def test_duck_on_ground_only_shrinks_hitbox() -> None:
    """Ducking on the ground shrinks the hitbox without moving the dino."""
    dino = Dino()
    assert dino.hitbox() == (DINO_X, GROUND_Y, DINO_BODY_WIDTH, DINO_BODY_HEIGHT)
    dino.start_duck()
    box = dino.hitbox()
    assert box.y == GROUND_Y
    assert box.height == DINO_BODY_HEIGHT * DUCK_SCALE
    dino.integrate(1.0)
    assert dino.y == GROUND_Y
    dino.end_duck()
    assert dino.hitbox().height == DINO_BODY_HEIGHT


def test_cactus_sits_on_ground_and_scrolls_off() -> None:
    """Cactus rests on the ground and is offscreen once past the left edge."""
    cactus = Cactus(100, CactusType.TALL)
    assert (cactus.draw_width, cactus.draw_height) == CACTUS_SIZES[CactusType.TALL]
    assert cactus.y + cactus.height == WINDOW_HEIGHT
    assert cactus.is_hazard
    for _ in range(40):
        cactus.advance(1.0)
    assert cactus.offscreen()


def test_hazard_kinds() -> None:
    """Only cacti and ground rockets are hazards."""
    assert GroundRocket(0).is_hazard
    assert not Bird(0, 50).is_hazard
    assert not Star(0, 0, 1, 0, 0.05).is_hazard


def test_bird_flaps_and_ufo_bobs() -> None:
    """Birds flap as they fly; UFOs bob around their spawn height."""
    bird = Bird(500, 100, 0.0)
    bird.advance(1.0)
    assert bird.x < 500
    assert bird.flap_phase > 0.0
    ufo = Ufo(500, 100, 0.0)
    assert ufo.kind is EntityKind.UFO
    ys = set()
    for _ in range(30):
        ufo.advance(1.0)
        ys.add(round(ufo.y, 3))
        assert abs(ufo.y - 100) <= 6.0
    assert len(ys) > 1


def test_comet_leaves_through_top() -> None:
    """Comets climb leftwards and leave through the top edge."""
    comet = Comet(600, 10, math.radians(30), 10)
    comet.advance(1.0)
    assert comet.y < 10 and comet.x < 600
    while not comet.offscreen():
        comet.advance(1.0)
    assert comet.y + comet.height < 0 or comet.x + comet.width < 0


def test_meteor_falls_below_horizon() -> None:
    """Meteors fall and expire below the horizon."""
    meteor = Meteor(1100, 0, math.radians(30), 10)
    meteor.advance(1.0)
    assert meteor.y > 0
    meteor.y = WINDOW_HEIGHT + 1
    assert meteor.offscreen()


def test_star_never_expires_and_phase_wraps() -> None:
    """Stars never expire and their twinkle phase wraps."""
    star = Star(-50, 10, 2, 6.2, 0.5)
    for _ in range(100):
        star.advance(1.0)
        assert 0.0 <= star.phase < 2 * math.pi
        assert 0.2 <= star.brightness <= 1.0
    assert not star.offscreen()


def test_cactus_subtypes_share_collision_box() -> None:
    """Subtypes differ in silhouette only; every one has the same hitbox."""
    boxes = {Cactus(200, t).box for t in CactusType}
    assert boxes == {(200, WINDOW_HEIGHT - OBSTACLE_HEIGHT, OBSTACLE_WIDTH, OBSTACLE_HEIGHT)}
    assert Cactus(0, CactusType.GOLDEN).rare
    assert not Cactus(0, CactusType.SMALL).rare
