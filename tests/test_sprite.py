import pytest

from sparrow.sprite import Mask, Rect, Sprite, pixel_perfect_collision


def test_intersection_is_symmetric_and_inside_both():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 3, 10, 10)
    overlap = a.intersection(b)
    assert overlap == b.intersection(a)
    assert overlap.left >= a.left and overlap.left >= b.left
    assert overlap.right <= a.right and overlap.right <= b.right
    assert overlap.bottom <= a.bottom and overlap.bottom <= b.bottom


def test_touching_rectangles_do_not_intersect():
    assert Rect(0, 0, 10, 10).intersection(Rect(10, 0, 5, 5)) is None


def test_intersection_with_itself_is_itself():
    r = Rect(2, 3, 4, 5)
    assert r.intersection(r) == r


def test_contains_edges():
    r = Rect(0, 0, 10, 10)
    assert r.contains(0, 0)
    assert not r.contains(10, 5)
    assert not r.contains(5, 10)
    assert not r.contains(-1, 5)


def test_mask_from_string_rows():
    mask = Mask.from_rows(["#.", ".#"])
    assert mask.width == 2 and mask.height == 2
    assert mask.opaque(0, 0)
    assert not mask.opaque(1, 0)
    assert mask.opaque(1, 1)


def test_mask_from_values_and_outside_pixels():
    mask = Mask.from_rows([[0, 10], [True, False]])
    assert not mask.opaque(0, 0)
    assert mask.opaque(1, 0)
    assert mask.opaque(0, 1)
    assert not mask.opaque(5, 5)


def test_ragged_mask_rejected():
    with pytest.raises(ValueError):
        Mask.from_rows(["##", "#"])


def test_sprite_bounds_follow_position_and_size():
    sprite = Sprite(Mask.from_rows(["##", "##"]), x=10, y=20, width=100, height=50)
    assert sprite.bounds() == Rect(10, 20, 100, 50)


def test_sprite_defaults_to_mask_size():
    sprite = Sprite(Mask.from_rows(["###", "###"]))
    assert (sprite.width, sprite.height) == (3, 2)


def test_alpha_at_scales_mask():
    sprite = Sprite(Mask.from_rows(["#.", ".."]), width=100, height=100)
    assert sprite.alpha_at(10, 10) > 0
    assert sprite.alpha_at(60, 10) == 0
    assert sprite.alpha_at(10, 60) == 0


def test_opaque_overlap_collides():
    mask = Mask.from_rows(["##", "##"])
    a = Sprite(mask, 0, 0, 20, 20)
    b = Sprite(mask, 10, 10, 20, 20)
    assert pixel_perfect_collision(a, b)
    assert pixel_perfect_collision(b, a)


def test_separate_sprites_do_not_collide():
    mask = Mask.from_rows(["#"])
    assert not pixel_perfect_collision(Sprite(mask, 0, 0, 5, 5), Sprite(mask, 50, 50, 5, 5))


def test_transparent_overlap_does_not_collide():
    left = Sprite(Mask.from_rows(["#."]), 0, 0, 20, 10)
    right = Sprite(Mask.from_rows([".#"]), 5, 0, 20, 10)
    assert left.bounds().intersection(right.bounds()) is not None
    assert not pixel_perfect_collision(left, right)