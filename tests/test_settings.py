from game import settings


def test_clamp_grid_size():
    assert settings.clamp_grid_size("12") == 12
    assert settings.clamp_grid_size("1") == 2
    assert settings.clamp_grid_size("999") == 50
    assert settings.clamp_grid_size("abc") == settings.DEFAULT_GRID_SIZE
    assert settings.clamp_grid_size("") == settings.DEFAULT_GRID_SIZE


def test_clamp_movement_cost():
    assert settings.clamp_movement_cost("6") == 6
    assert settings.clamp_movement_cost("0") == 1
    assert settings.clamp_movement_cost("-20") == 1
    assert settings.clamp_movement_cost("10000") == 500
    assert settings.clamp_movement_cost("2.5") == settings.DEFAULT_MOVEMENT_COST
    assert settings.clamp_movement_cost(None) == settings.DEFAULT_MOVEMENT_COST
