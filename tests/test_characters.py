from monkdungeon.characters import (
    ATTACK_UPGRADE,
    GOBLIN_HEALTH,
    HEALTH_UPGRADE,
    Goblin,
    Monk,
)


def test_monk_starting_stats():
    monk = Monk("Kai")
    assert (monk.name, monk.health, monk.attack, monk.max_health) == ("Kai", 15, 3, 15)


def test_monk_description_defaults_empty_and_is_kept():
    assert Monk("Kai").description == ""
    assert Monk("Kai", "serene").description == "serene"


def test_take_damage_can_go_below_zero():
    goblin = Goblin()
    goblin.take_damage(GOBLIN_HEALTH + 5)
    assert goblin.health < 0
    assert not goblin.is_alive()


def test_alive_boundary():
    goblin = Goblin()
    goblin.take_damage(goblin.health - 1)
    assert goblin.is_alive()
    goblin.take_damage(1)
    assert goblin.health == 0
    assert not goblin.is_alive()


def test_heal_is_capped_at_max():
    monk = Monk("Kai")
    monk.take_damage(4)
    monk.heal(100)
    assert monk.health == monk.max_health


def test_heal_partial():
    monk = Monk("Kai")
    monk.take_damage(4)
    before = monk.health
    monk.heal(1)
    assert monk.health == before + 1


def test_increase_health_raises_max_and_restores():
    monk = Monk("Kai")
    before = monk.max_health
    monk.take_damage(7)
    monk.increase_health()
    assert monk.max_health == before + HEALTH_UPGRADE
    assert monk.health == monk.max_health


def test_increase_attack():
    monk = Monk("Kai")
    before = monk.attack
    monk.increase_attack()
    assert monk.attack == before + ATTACK_UPGRADE


def test_full_heal():
    monk = Monk("Kai")
    monk.take_damage(12)
    monk.full_heal()
    assert monk.health == monk.max_health


def test_goblin_defaults():
    goblin = Goblin()
    assert (goblin.name, goblin.health, goblin.attack, goblin.max_health) == ("Goblin", 10, 2, 10)


def test_boss_goblin():
    boss = Goblin.boss()
    assert (boss.name, boss.health, boss.attack, boss.max_health) == ("Goblin", 30, 6, 30)