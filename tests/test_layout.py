from memory_match.ui.layout import card_columns, compute_card_layout, dot_at_point, dot_columns


def test_card_columns_follow_card_count():
    assert [card_columns(n) for n in (1, 2, 4, 5, 8, 9, 16, 17, 48)] == [1, 2, 4, 2, 2, 3, 3, 4, 4]


def test_dot_columns_follow_card_capacity():
    assert [dot_columns(n) for n in (1, 4, 5, 9, 10)] == [2, 2, 3, 3, 4]


def test_default_board_geometry():
    layout = compute_card_layout(900, 700, 2, 9)
    assert layout.dot_size == 120
    assert layout.card_width == 404
    assert layout.card_height == 404
    assert layout.origins == [(36.0, 610), (460.0, 610)]
    assert layout.dot_center(0, 0) == (110.0, 536.0)


def test_dot_size_has_floor():
    layout = compute_card_layout(200, 200, 48, 9)
    assert layout.dot_size == 12
    assert len(layout.origins) == 48


def test_hit_testing_finds_dot_and_skips_gaps():
    layout = compute_card_layout(900, 700, 2, 9)
    cx, cy = layout.dot_center(1, 4)
    assert dot_at_point(layout, [9, 9], cx, cy) == (1, 4)
    assert dot_at_point(layout, [9, 9], cx + layout.dot_size / 2 - 1, cy) == (1, 4)
    # Card padding corner is inside the card but outside every dot.
    left, top = layout.origins[0]
    assert dot_at_point(layout, [9, 9], left + 2, top - 2) is None
    assert dot_at_point(layout, [9, 9], 5, 5) is None


def test_hit_testing_ignores_missing_slots_on_short_cards():
    layout = compute_card_layout(900, 700, 3, 5)
    cx, cy = layout.dot_center(2, 4)
    assert dot_at_point(layout, [5, 5, 2], cx, cy) is None
    cx, cy = layout.dot_center(2, 1)
    assert dot_at_point(layout, [5, 5, 2], cx, cy) == (2, 1)
