import pytest

from physics import Vector, Force
from entities import Resource
from creature import Forager


def make_forager(gene, energy=1000, size=10, mutation_rate=0.0, position=Vector(0, 0)):
    return Forager(position, gene, size, energy, mutation_rate)


def test_alive_iff_energy_positive(hunter_gene):
    assert make_forager(hunter_gene, energy=0.1).is_alive
    dead = make_forager(hunter_gene, energy=0)
    assert not dead.is_alive
    assert dead.is_depleted


def test_dead_forager_does_nothing(hunter_gene):
    f = make_forager(hunter_gene, energy=0)
    assert f.next() == (Force.zero(), [])
    assert f.energy == 0


def test_moving_never_gains_energy(hunter_gene):
    f = make_forager(hunter_gene, energy=5)
    before = f.energy
    for _ in range(50):
        force, offspring = f.next()
        assert offspring == []
        assert f.energy <= before
        assert f.energy >= 0
        before = f.energy


def test_jitter_stays_in_range(hunter_gene):
    f = make_forager(hunter_gene, energy=5)
    for _ in range(50):
        force, _ = f.next()
        assert -0.1 <= force.vector.x < 0.1
        assert -0.1 <= force.vector.y < 0.1


def test_splits_above_twice_reproduction_cost(still, hunter_gene):
    f = make_forager(hunter_gene, energy=1000)
    force, offspring = f.next()
    assert force == Force.zero()
    assert len(offspring) == 1
    assert f.energy == 450
    assert offspring[0].energy == 450
    assert offspring[0].size == f.size
    assert offspring[0].mutation_rate == f.mutation_rate


def test_no_split_at_threshold(still, hunter_gene):
    f = make_forager(hunter_gene, energy=200)
    _, offspring = f.next()
    assert offspring == []
    assert f.energy == 200


def test_split_conserves_energy_minus_cost(hunter_gene):
    f = make_forager(hunter_gene, energy=777)
    [child] = f.reproduce()
    assert f.energy + child.energy == pytest.approx(777 - 100)
    assert f.energy == child.energy


def test_offspring_spawns_behind_heading(hunter_gene):
    f = make_forager(hunter_gene, position=Vector(0, 0))
    f.velocity = Vector(3, 4)
    [child] = f.reproduce()
    assert child.position.x == pytest.approx(-12)
    assert child.position.y == pytest.approx(-16)
    assert child.velocity.x == pytest.approx(-0.6)
    assert child.velocity.y == pytest.approx(-0.8)


def test_mutation_rate_zero_never_mutates(hunter_gene):
    for _ in range(20):
        f = make_forager(hunter_gene, mutation_rate=0.0)
        [child] = f.reproduce()
        assert child.gene == hunter_gene
        assert child.gene is not hunter_gene


def test_mutation_rate_one_always_mutates(hunter_gene):
    for _ in range(20):
        f = make_forager(hunter_gene, mutation_rate=1.0)
        [child] = f.reproduce()
        assert child.gene != hunter_gene


def test_mutation_rate_out_of_range(hunter_gene):
    with pytest.raises(ValueError):
        make_forager(hunter_gene, mutation_rate=1.5)


def test_eat_transfers_energy(hunter_gene, prey_gene):
    predator = make_forager(hunter_gene, energy=10)
    prey = Resource(Vector(0, 0), prey_gene, 3, 50)
    assert predator.eat(prey) == []
    assert predator.energy == 60
    assert prey.energy == 0


def test_eaten_forager_dies(hunter_gene, prey_gene):
    predator = make_forager(hunter_gene, energy=10)
    prey = make_forager(prey_gene, energy=30)
    predator.eat(prey)
    assert predator.energy == 40
    assert not prey.is_alive
    assert prey.eaten() == []
